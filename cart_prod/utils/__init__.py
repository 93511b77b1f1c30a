from .iteration import NotRestartableError, Restartable, Source
from .size_hint import SizeHint, SupportsSizeHint, add_hints, mul_hints, size_hint

__all__ = [
    "NotRestartableError",
    "Restartable",
    "SizeHint",
    "Source",
    "SupportsSizeHint",
    "add_hints",
    "mul_hints",
    "size_hint",
]
