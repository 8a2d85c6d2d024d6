########################
# Calculator Config     #
########################

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Optional, Union

from geometry_calculator.exceptions import ConfigurationError

# Largest integer the console accepts (signed 32-bit).
INT_MAX = 2 ** 31 - 1

# Default ceiling for Power exponents; each step is one multiplication.
MAX_EXPONENT = 1_000_000


@dataclass
class CalculatorConfig:
    """
    Settings for a calculator session.

    Everything is supplied in code; the console conversation is the only
    external surface, so nothing is read from the environment.
    """

    base_dir: Optional[Union[Path, str]] = None
    log_level: str = "INFO"
    max_exponent: int = MAX_EXPONENT

    def __post_init__(self):
        self.base_dir = Path(self.base_dir).resolve() if self.base_dir else Path.cwd().resolve()

    @property
    def log_dir(self) -> Path:
        return self.base_dir / "logs"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "calculator.log"

    def validate(self) -> None:
        """Raise ConfigurationError if any setting is unusable."""
        if self.max_exponent <= 0:
            raise ConfigurationError("max_exponent must be positive")
        if self.max_exponent > INT_MAX:
            raise ConfigurationError(f"max_exponent cannot exceed {INT_MAX}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
