from .base import Config
from .debug import DebugConfig

__all__ = [
    "Config",
    "DebugConfig",
]
