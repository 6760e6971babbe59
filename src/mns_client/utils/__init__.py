"""
Module: utils
Description: Shared helpers for the MNS client.

Current utilities:
- logger: Structured logging configuration and helpers
"""

__all__ = []
