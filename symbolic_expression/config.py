"""Engine-wide constants for the symbolic expression engine."""

import numpy as np
from typing import Dict

from .logging_system import LogLevel

# Variable names are capped; longer identifiers are silently truncated
MAX_NAME_LENGTH: int = 31

# Named constants recognized by the parser (case-sensitive)
NAMED_CONSTANTS: Dict[str, float] = {
  'pi': float(np.pi),
  'e': float(np.e),
  'ln2': float(np.log(2.0)),
  'ln10': float(np.log(10.0)),
  'sqrt2': float(np.sqrt(2.0)),
  'sqrt1_2': float(np.sqrt(0.5)),
  'deg2rad': float(np.pi / 180.0),
  'rad2deg': float(180.0 / np.pi),
  'log2e': float(np.log2(np.e)),
  'log10e': float(np.log10(np.e)),
  'two_pi': float(2.0 * np.pi),
  'half_pi': float(0.5 * np.pi),
}

# Capacity used by Expression.to_string_bounded when none is given
DEFAULT_BUFFER_SIZE: int = 256

# Node pool sizing
POOL_INITIAL_SIZE: int = 300
POOL_MAX_FREE: int = 500

DEFAULT_LOG_LEVEL: LogLevel = LogLevel.MINIMAL
