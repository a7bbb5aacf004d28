"""Fixed-step and adaptive-step numerical integration of f(x) over [lo, hi].

The library is silent by default. Enable logging with
enable_console_logging(), enable_file_logging() or configure_from_env().
"""

import logging

from stepquad.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from stepquad.numerics import (
    DELTA,
    MAX_STEP,
    InvalidStepError,
    adaptive_integral,
    fixed_integral,
    normalize_interval,
)

logging.getLogger("stepquad").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DELTA",
    "MAX_STEP",
    "InvalidStepError",
    "adaptive_integral",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "fixed_integral",
    "normalize_interval",
    "set_level",
    "set_module_level",
]
