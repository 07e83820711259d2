"""
pydrinth - search, inspect and download Modrinth mods from the terminal.
"""

from pydrinth.core.utils import get_version_info

__version__, __author__ = get_version_info()

__all__ = ["__version__", "__author__"]
