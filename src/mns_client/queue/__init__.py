"""
Module: queue
Description: Queue façade delegating every operation to the executor.
"""

from .queue import MNSQueue

__all__ = ["MNSQueue"]
