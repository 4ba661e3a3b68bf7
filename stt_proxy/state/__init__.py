from .side import Side
from .runtime import RuntimeDeps
from .stats import SessionStats
from .settings import AppSettings
from .lifecycle import SessionState

__all__ = ["AppSettings", "RuntimeDeps", "SessionState", "SessionStats", "Side"]
