from .router import (
    Router, RouteConfig, Screen,
    RouterError, RouterConfigError, RouteNotFoundError, ActionNotFoundError,
)
from .wiring import AppWiring, WiringError
from .config import (
    ApplicationConfig, Environment, PersistenceConfig, WebConfig, LoggingConfig,
    configure_logging, get_config, set_config,
)

__all__ = [
    "Router", "RouteConfig", "Screen",
    "RouterError", "RouterConfigError", "RouteNotFoundError", "ActionNotFoundError",
    "AppWiring", "WiringError",
    "ApplicationConfig", "Environment", "PersistenceConfig", "WebConfig", "LoggingConfig",
    "configure_logging", "get_config", "set_config",
]
