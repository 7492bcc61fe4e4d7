"""One-year market simulation: lump-sum deposit vs. phased-in investing."""
