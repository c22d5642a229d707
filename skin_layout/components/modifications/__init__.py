"""Modifications bundled with skin_layout.

Importing this package registers them in :data:`modification_types`.
"""

from .base import Modification, modification_types
from .sticky import Sticky
from .visibility import HideFor, ShowOnlyFor

__all__ = ["Modification", "modification_types", "Sticky", "ShowOnlyFor", "HideFor"]
