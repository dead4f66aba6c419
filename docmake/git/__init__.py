"""Git collaborators."""

from .clone import Cloner, repository_name

__all__ = ["Cloner", "repository_name"]
