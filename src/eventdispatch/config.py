"""
Configuration Management for the Dispatcher

🔧 Unified Configuration:
Dataclass based settings for the dispatcher plus the logging setup shared
by every ``eventdispatch`` module. Values can come from code, a plain
dictionary or ``EVENTDISPATCH_*`` environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

LOGGER_NAME = "eventdispatch"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None


@dataclass
class DispatcherConfig:
    """Complete dispatcher configuration"""
    # Module prefixes whose live instances never go through the DI provider
    internal_namespaces: Tuple[str, ...] = (LOGGER_NAME,)
    warn_on_invalid_phase: bool = True
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def is_internal(self, obj: Any) -> bool:
        """Check whether an instance belongs to one of the internal namespaces"""
        module = type(obj).__module__ or ""
        return any(
            module == namespace or module.startswith(namespace + ".")
            for namespace in self.internal_namespaces
        )

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'DispatcherConfig':
        """Create configuration from dictionary"""
        config = cls()

        if "internal_namespaces" in config_dict:
            config.internal_namespaces = tuple(config_dict["internal_namespaces"])

        if "warn_on_invalid_phase" in config_dict:
            config.warn_on_invalid_phase = bool(config_dict["warn_on_invalid_phase"])

        if "logging" in config_dict:
            for key, value in config_dict["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        return config

    @classmethod
    def from_environment(cls) -> 'DispatcherConfig':
        """Create configuration from environment variables"""
        config = cls()

        if os.getenv('EVENTDISPATCH_LOG_LEVEL'):
            config.logging.level = os.getenv('EVENTDISPATCH_LOG_LEVEL').upper()

        if os.getenv('EVENTDISPATCH_LOG_FILE'):
            config.logging.file_path = os.getenv('EVENTDISPATCH_LOG_FILE')

        if os.getenv('EVENTDISPATCH_INTERNAL_NAMESPACES'):
            namespaces = os.getenv('EVENTDISPATCH_INTERNAL_NAMESPACES').split(',')
            config.internal_namespaces = tuple(ns.strip() for ns in namespaces if ns.strip())

        if os.getenv('EVENTDISPATCH_WARN_ON_INVALID_PHASE'):
            config.warn_on_invalid_phase = (
                os.getenv('EVENTDISPATCH_WARN_ON_INVALID_PHASE').lower() in _TRUE_VALUES
            )

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "internal_namespaces": list(self.internal_namespaces),
            "warn_on_invalid_phase": self.warn_on_invalid_phase,
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file_path": self.logging.file_path
            }
        }


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Apply a logging configuration to the ``eventdispatch`` logger.

    Only the package logger is touched; the root logger and any handlers the
    host application installed stay as they are. Calling it again replaces
    the handler added by the previous call.
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.level.upper())

    for handler in list(logger.handlers):
        if getattr(handler, "_eventdispatch_handler", False):
            logger.removeHandler(handler)
            handler.close()

    if config.file_path:
        handler: logging.Handler = logging.FileHandler(config.file_path)
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    handler._eventdispatch_handler = True
    logger.addHandler(handler)

    return logger


# Global configuration management
_current_config: Optional[DispatcherConfig] = None


def set_config(config: DispatcherConfig):
    """Set the global configuration"""
    global _current_config
    _current_config = config


def get_config() -> DispatcherConfig:
    """Get the current global configuration"""
    global _current_config
    if _current_config is None:
        _current_config = DispatcherConfig.from_environment()
    return _current_config


# Export main components
__all__ = [
    "LoggingConfig", "DispatcherConfig", "configure_logging",
    "get_config", "set_config", "LOGGER_NAME"
]
