"""
Module: dispatch
Description: Request execution for the MNS client.

Provides blocking, coroutine and callback-style dispatch of signed
requests over httpx, with shared response-to-result mapping.
"""

from .executor import RequestExecutor, map_response

__all__ = ["RequestExecutor", "map_response"]
