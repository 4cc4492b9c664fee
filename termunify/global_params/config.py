"""Run-wide configuration for the unification engine.

This module holds the defaults the CLI and the set builder share: the
input file name, the set delimiter, the executor kind and the logging
setup. There are no environment variables or configuration files; values
are changed programmatically on the singleton.
"""
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class ConfigRegistry(type):
    """Metaclass implementing singleton pattern for UnifyConfig.

    Ensures only one instance of UnifyConfig exists throughout the application.
    """
    _instance = None

    def __call__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__call__(*args, **kwargs)
        return cls._instance


class UnifyConfig(metaclass=ConfigRegistry):
    """Global configuration for reading, solving and reporting expression sets.

    Attributes:
        default_input: File read by the CLI when no path is given.
        set_delimiter: Marker whose presence on a line opens a new set.
        executor_kind: Pool used for solving, "threads" or "processes".
        log_events: Whether the executor logs per-task start/end events.
        log_level: Name of the logging level configured by the CLI.
        log_format: Format string configured by the CLI.
    """
    DEFAULT_INPUT = "default.in"
    SET_DELIMITER = "#"

    def __init__(self):
        self.default_input: str = self.DEFAULT_INPUT
        self.set_delimiter: str = self.SET_DELIMITER
        self.executor_kind: str = "threads"
        self.log_events: bool = False
        self.log_level: str = "WARNING"
        self.log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def get_log_level(self) -> int:
        """Numeric logging level for ``log_level``.

        Unknown names fall back to WARNING.
        """
        level: Optional[int] = getattr(logging, self.log_level.upper(), None)
        if not isinstance(level, int):
            logger.warning("Unknown log level %s, using WARNING", self.log_level)
            return logging.WARNING
        return level

    def reset(self) -> None:
        """Restore every setting to its default."""
        self.__init__()

    def __repr__(self) -> str:
        return (f"UnifyConfig(default_input={self.default_input}, "
                f"set_delimiter={self.set_delimiter}, "
                f"executor_kind={self.executor_kind})")


# Create a singleton instance
global_config = UnifyConfig()
