"""
Module: auth
Description: Request authentication for the MNS client.

- signer: Canonical string-to-sign and HMAC-SHA1 signature
- headers: Default header assembly and the Authorization header
"""

from .headers import HeaderSet, prepare_headers
from .signer import authorization, signature, string_to_sign

__all__ = [
    "HeaderSet",
    "prepare_headers",
    "authorization",
    "signature",
    "string_to_sign",
]
