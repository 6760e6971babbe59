"""
Module: serialization
Description: Request/response body codecs.
"""

from .xml import MNS_NAMESPACE, deserialize, serialize

__all__ = ["MNS_NAMESPACE", "deserialize", "serialize"]
