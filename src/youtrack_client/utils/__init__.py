"""
Utility functions for the YouTrack client.
"""

from .env import is_env_ssl_verify

__all__ = [
    "is_env_ssl_verify",
]
