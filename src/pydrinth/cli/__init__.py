"""
Commands package - Exports all command groups
"""

from . import browse, install, utils

__all__ = ["browse", "install", "utils"]
