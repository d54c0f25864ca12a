"""Static asset server for wordsearch."""

from .models import ServerConfig, DEFAULT_PORT
from .app import create_app, run

__all__ = [
    "ServerConfig",
    "DEFAULT_PORT",
    "create_app",
    "run",
]
