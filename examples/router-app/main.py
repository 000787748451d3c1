"""
Router App - home/details screens sharing one counter

Controllers are rebuilt from the latest snapshot on every render; only the
store's snapshot survives navigation between the two screens.
"""

from fasthtml.common import serve

from statewire.adapters.fasthtml import create_app
from statewire.app.config import configure_logging, get_config
from statewire.apps import navigation_wiring

config = get_config()
configure_logging(config.logging)

app, rt = create_app(navigation_wiring(config), config)


if __name__ == "__main__":
    serve(host=config.web.host, port=config.web.port)
