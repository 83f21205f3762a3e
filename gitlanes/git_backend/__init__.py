"""Git backend supplying commits and heads to the layout"""

from gitlanes.git_backend.repository import GraphRepository

__all__ = ["GraphRepository"]
