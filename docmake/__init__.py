"""docmake: detect a repository's stack and containerize it."""

__version__ = "0.1.0"
