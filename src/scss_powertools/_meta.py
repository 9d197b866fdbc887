from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("scss-powertools")

logger = logging.getLogger("scss_powertools")

__all__ = ["__version__", "logger"]
