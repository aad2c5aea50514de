"""
Command-line interface for the eosmon package.
"""

from .main import main_cli

__all__ = [
    "main_cli",
]
