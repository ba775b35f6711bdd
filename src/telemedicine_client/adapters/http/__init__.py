from .session_factory import build_session

__all__ = ["build_session"]
