"""Nut server package: wraps the holdem engine with a WebSocket front end."""

from .models import ServerConfig
from .server import NutServer

__all__ = ["NutServer", "ServerConfig"]
