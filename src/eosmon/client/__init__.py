"""
EOS client: one listing operation per entity kind.
"""

from .eos_client import EosClient

__all__ = [
    "EosClient",
]
