"""
Configuration Management for Statewire Applications

Dataclass based configuration with per-environment defaults, loadable from
a dictionary, a JSON file or STATEWIRE_* environment variables.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class PersistenceConfig:
    """Persistence backend configuration"""
    backend: str = "database"  # "database" or "memory"
    simulated_delay: float = 0.1
    persist_changes: bool = True


@dataclass
class WebConfig:
    """Web surface configuration"""
    host: str = "localhost"
    port: int = 5001
    live_updates: bool = True
    secret_key: Optional[str] = None
    initial_location: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ApplicationConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    persistence: PersistenceConfig = field(default_factory=PersistenceConfig)
    web: WebConfig = field(default_factory=WebConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'ApplicationConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.persistence.backend = "memory"
            config.persistence.simulated_delay = 0.0
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.debug = False
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ApplicationConfig':
        """Create configuration from dictionary"""
        environment = Environment(config_dict.get("environment", Environment.DEVELOPMENT.value))
        config = cls.for_environment(environment)

        if "debug" in config_dict:
            config.debug = config_dict["debug"]

        for section in ("persistence", "web", "logging"):
            target = getattr(config, section)
            for key, value in config_dict.get(section, {}).items():
                if not hasattr(target, key):
                    raise ValueError(f"Unknown {section} setting: {key}")
                setattr(target, key, value)

        return config

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> 'ApplicationConfig':
        """Load configuration from a JSON file"""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        if config_path.suffix != '.json':
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        with open(config_path) as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def from_environment(cls) -> 'ApplicationConfig':
        """Create configuration from environment variables"""
        environment = Environment(os.getenv('STATEWIRE_ENV', 'development'))
        config = cls.for_environment(environment)

        if os.getenv('STATEWIRE_DEBUG'):
            config.debug = os.getenv('STATEWIRE_DEBUG').lower() == 'true'

        if os.getenv('STATEWIRE_BACKEND'):
            config.persistence.backend = os.getenv('STATEWIRE_BACKEND')

        if os.getenv('STATEWIRE_DB_DELAY'):
            config.persistence.simulated_delay = float(os.getenv('STATEWIRE_DB_DELAY'))

        if os.getenv('STATEWIRE_HOST'):
            config.web.host = os.getenv('STATEWIRE_HOST')

        if os.getenv('STATEWIRE_PORT'):
            config.web.port = int(os.getenv('STATEWIRE_PORT'))

        if os.getenv('STATEWIRE_LOG_LEVEL'):
            config.logging.level = os.getenv('STATEWIRE_LOG_LEVEL').upper()

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "persistence": {
                "backend": self.persistence.backend,
                "simulated_delay": self.persistence.simulated_delay,
                "persist_changes": self.persistence.persist_changes,
            },
            "web": {
                "host": self.web.host,
                "port": self.web.port,
                "live_updates": self.web.live_updates,
                "secret_key": self.web.secret_key,
                "initial_location": self.web.initial_location,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            },
        }


def configure_logging(config: LoggingConfig) -> None:
    """Apply the logging configuration to the root logger"""
    logging.basicConfig(level=config.level, format=config.format, force=True)


# Global configuration management
_current_config: Optional[ApplicationConfig] = None


def set_config(config: ApplicationConfig):
    """Set the global configuration"""
    global _current_config
    _current_config = config


def get_config() -> ApplicationConfig:
    """Get the current global configuration"""
    global _current_config

    if _current_config is None:
        _current_config = ApplicationConfig.from_environment()

    return _current_config


__all__ = [
    "ApplicationConfig", "Environment", "PersistenceConfig", "WebConfig", "LoggingConfig",
    "configure_logging", "set_config", "get_config",
]
