from .core import Federation, League
from .seasons import Season

__all__ = [
    "Federation", "League",
    "Season",
]
