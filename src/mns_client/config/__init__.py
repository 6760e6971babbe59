"""
Module: config
Description: Configuration for the MNS client.
"""

from .settings import Settings, DEFAULT_VERSION

__all__ = ["Settings", "DEFAULT_VERSION"]
