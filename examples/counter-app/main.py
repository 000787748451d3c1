"""
Counter App - up/down counter over a simulated database

Run with `python main.py` and open http://localhost:5001.
The counter is loaded once at startup and every change is mirrored back
to the (stubbed) database in the background.
"""

from fasthtml.common import serve

from statewire.adapters.fasthtml import create_app
from statewire.app.config import configure_logging, get_config
from statewire.apps import counter_wiring

config = get_config()
configure_logging(config.logging)

app, rt = create_app(counter_wiring(config), config)


if __name__ == "__main__":
    serve(host=config.web.host, port=config.web.port)
