#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app phasein.wsgi run --port 5000 --debug

import logging

from phasein.app import create_app
from phasein.config import AppConfig

config = AppConfig.from_env()
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app(config)


if __name__ == "__main__":
    app.run(port=5000, debug=True)
