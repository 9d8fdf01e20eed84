"""
FRES - Fuzzy Rule Evolution System

Discovers fuzzy rule-based classifiers ("IF x is low and y is high THEN c")
by evolutionary search, trading classification skill against rule-base
complexity.
"""

__version__ = "0.1.0"

# Expose common submodules for convenience
from .classifier import *  # noqa: F401,F403
from .data import *  # noqa: F401,F403
from .evolution import *  # noqa: F401,F403
from .fuzzy import *  # noqa: F401,F403
from .logic import *  # noqa: F401,F403
from .metrics import *  # noqa: F401,F403
from .utils import *  # noqa: F401,F403

# Expose configuration presets as top-level names
from .config import DEFAULT_CONFIG, PRESET_MINIMAL, PRESET_RESEARCH, PRESET_STANDARD, merge_config  # noqa: F401
