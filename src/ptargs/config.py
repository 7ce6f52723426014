"""Decoder configuration.

DecodeConfig is a frozen dataclass, immutable after creation, validated on
construction, no string-key dict lookups.
"""

import logging
import os
from dataclasses import dataclass

from ptargs.errors import ConfigurationError

OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class DecodeConfig:
    """How decoded parameters are reported. Immutable after creation.

    All fields have defaults. Override what you need::

        config = DecodeConfig(output="json", log_level="DEBUG")
    """

    # "text" prints one key=value line per pair, "json" an object of lists
    output: str = "text"

    # Level name for the "ptargs" logger
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.output not in OUTPUT_FORMATS:
            choices = ", ".join(sorted(OUTPUT_FORMATS))
            raise ConfigurationError(f"Unknown output format {self.output!r}. Expected one of: {choices}")
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level {self.log_level!r}")

    @property
    def level(self) -> int:
        """Numeric logging level for ``log_level``."""
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, *, output: str | None = None, log_level: str | None = None) -> "DecodeConfig":
        """Build a config from ``PTARGS_OUTPUT`` / ``PTARGS_LOG_LEVEL``.

        Explicit arguments that are not None win over the environment.
        """
        return cls(
            output=output if output is not None else os.environ.get("PTARGS_OUTPUT", "text"),
            log_level=log_level if log_level is not None else os.environ.get("PTARGS_LOG_LEVEL", "WARNING"),
        )
