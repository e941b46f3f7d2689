"""Router package initialization."""

from . import api, index

__all__ = ["api", "index"]
