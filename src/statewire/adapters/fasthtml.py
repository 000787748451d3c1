"""
FastHTML Web Adapter

Serves the routes of an AppWiring as pages, performs controller actions
posted from those pages and streams screen updates over Datastar SSE.

```python
from statewire.adapters.fasthtml import configure_app
app, rt = fast_app()
configure_app(app, rt, wiring)
```
"""

import asyncio
import logging
from typing import AsyncGenerator, Callable

from datastar_py import SSE_HEADERS
from datastar_py import ServerSentEventGenerator as SSE
from fasthtml.common import *
from starlette.responses import PlainTextResponse, StreamingResponse

from ..app.config import ApplicationConfig
from ..app.router import ActionNotFoundError, Router, RouteConfig, Screen
from ..app.wiring import AppWiring
from ..ui import ACTION_PREFIX, datastar_script

logger = logging.getLogger(__name__)

SCREEN_ID = "screen"
LIVE_PATH = "/live"


def render_screen(screen: Screen):
    """Wrap a screen's view so live updates can morph it by id."""
    return Div(screen.view, id=SCREEN_ID)


async def screen_updates(router: Router) -> AsyncGenerator[str, None]:
    """Yield the current screen, then the recomputed screen after every change."""
    queue: asyncio.Queue = asyncio.Queue()
    subscription = router.subscribe(queue.put_nowait)
    try:
        screen = router.screen()
        while True:
            yield SSE.merge_signals(screen.model.signals)
            yield SSE.merge_fragments(to_xml(render_screen(screen)))
            screen = await queue.get()
    finally:
        subscription.unsubscribe()


def _route_name(path: str, route: RouteConfig) -> str:
    return route.name or path.strip("/").replace("/", "_") or "root"


def _page_handler(wiring: AppWiring, path: str, route: RouteConfig, live: bool) -> Callable:
    async def page():
        router = wiring.router
        if router.location != path:
            router.navigate(path)
        screen = router.screen()
        content = render_screen(screen)
        if live:
            content = Div(content, data_on_load=f"@get('{LIVE_PATH}')")
        return Title(route.title or path), Main(content)

    page.__name__ = f"page_{_route_name(path, route)}"
    return page


def configure_app(app, rt, wiring: AppWiring, live: bool = True):
    """
    Register the pages, the action endpoint and the live stream.

    Args:
        app: FastHTML app instance
        rt: FastHTML router instance
        wiring: Wiring whose routes are served; must be started before
            the first request
        live: Whether to register the Datastar update stream

    Returns:
        The configured app instance
    """
    for path, route in wiring.routes.items():
        rt(path, methods=["get"])(_page_handler(wiring, path, route, live))

    async def perform_action(action: str):
        try:
            wiring.router.perform(action)
        except ActionNotFoundError as e:
            logger.warning("Rejected action: %s", e)
            return PlainTextResponse(str(e), status_code=404)
        return Redirect(wiring.router.location)

    rt(f"{ACTION_PREFIX}/{{action}}", methods=["post"])(perform_action)

    if live:
        async def live_updates():
            return StreamingResponse(screen_updates(wiring.router),
                                     media_type="text/event-stream",
                                     headers=SSE_HEADERS)

        rt(LIVE_PATH, methods=["get"])(live_updates)

    logger.info("Registered %d page(s)%s", len(wiring.routes), " with live updates" if live else "")
    return app


def create_app(wiring: AppWiring, config: ApplicationConfig):
    """Build a FastHTML app whose lifespan starts and stops the wiring."""

    async def lifespan(_app):
        await wiring.start()
        try:
            yield
        finally:
            await wiring.stop()

    app, rt = fast_app(
        pico=False,
        hdrs=(datastar_script,),
        secret_key=config.web.secret_key,
        debug=config.debug,
        lifespan=lifespan,
    )
    configure_app(app, rt, wiring, live=config.web.live_updates)
    return app, rt
