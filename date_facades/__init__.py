"""
date-facades - Interchangeable date formatting and manipulation façades
"""

from .__version__ import __version__
from .config import Config
from .models import Unit
from .services import (
    ArrowFormatter,
    ArrowDateUtils,
    DateutilFormatter,
    DateutilDateUtils,
    get_backend,
)

__all__ = [
    "ArrowFormatter",
    "ArrowDateUtils",
    "Config",
    "DateutilFormatter",
    "DateutilDateUtils",
    "Unit",
    "get_backend",
    "__version__",
]
