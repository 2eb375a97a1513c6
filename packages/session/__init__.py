from .core import BoardView, GameSession, HELP_TEXT, Reply, SessionConfig
from .pages import paginate

__all__ = ["BoardView", "GameSession", "HELP_TEXT", "Reply", "SessionConfig", "paginate"]
