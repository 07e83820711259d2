"""
api package - Exposes the Modrinth URL builder and HTTP client.
"""

from .client import ModrinthAPIConfig, ModrinthClient, get_api_session

__all__ = ["ModrinthAPIConfig", "ModrinthClient", "get_api_session"]
