"""
Module: signer.py
Description: Canonical request signing for the MNS Authorization header.

Builds the newline-joined string-to-sign from the request method, the
content headers, every x-mns header and the resource path, then signs
it with HMAC-SHA1 under the account's access key secret. The service
recomputes this string byte-for-byte, so field order and the empty
placeholders for missing headers are part of the wire contract.

Key Components:
- string_to_sign(): Build the canonical string
- signature(): HMAC-SHA1 + base64 over the canonical string
- authorization(): Format the Authorization header value
- http_date(): RFC-1123 timestamp used for the Date header

Dependencies: hmac, hashlib, base64, email.utils
"""

import base64
import hashlib
import hmac
from email.utils import formatdate
from typing import Mapping

from ..exceptions import SignatureError

CONTENT_MD5 = "Content-MD5"
CONTENT_TYPE = "Content-Type"
DATE = "Date"

# Matched with str.startswith, so "X-Mns-Foo" is not a signed header.
SIGNED_HEADER_PREFIX = "x-mns"
AUTHORIZATION_SCHEME = "MNS"


def http_date() -> str:
    """Return the current UTC time in RFC-1123 format, e.g. 'Tue, 01 Jan 2019 00:00:00 GMT'."""
    return formatdate(usegmt=True)


def canonical_headers(headers: Mapping[str, str]) -> list:
    """Return "key:value" entries for x-mns headers, sorted by key."""
    return [
        f"{key}:{headers[key]}"
        for key in sorted(k for k in headers if k.startswith(SIGNED_HEADER_PREFIX))
    ]


def string_to_sign(method: str, headers: Mapping[str, str], resource: str) -> str:
    """
    Build the canonical string-to-sign.

    Layout (joined with "\\n", no trailing newline):
        METHOD
        Content-MD5 or ""
        Content-Type or ""
        Date (current time if absent)
        x-mns-a:value      one line per x-mns header, sorted
        /resource?query

    Args:
        method: HTTP method name (GET, PUT, POST, DELETE)
        headers: Header mapping, looked up by exact key
        resource: Resource path including any query string

    Returns:
        Canonical string

    Raises:
        SignatureError: If the resource path is not an absolute path
    """
    if not resource or not isinstance(resource, str) or not resource.startswith("/"):
        raise SignatureError(f"resource must be an absolute path, got {resource!r}")

    method_name = getattr(method, "value", method)

    parts = [
        str(method_name),
        headers.get(CONTENT_MD5, ""),
        headers.get(CONTENT_TYPE, ""),
        headers[DATE] if DATE in headers else http_date(),
    ]
    parts.extend(canonical_headers(headers))
    parts.append(resource)

    return "\n".join(parts)


def signature(method: str, headers: Mapping[str, str], resource: str, secret: str) -> str:
    """
    Compute the base64 HMAC-SHA1 signature of a request.

    Args:
        method: HTTP method name
        headers: Header mapping
        resource: Resource path including any query string
        secret: Access key secret

    Returns:
        Base64-encoded raw HMAC-SHA1 digest

    Raises:
        SignatureError: If the secret is empty or not a string
    """
    if not secret or not isinstance(secret, str):
        raise SignatureError("access key secret must be a non-empty string")

    message = string_to_sign(method, headers, resource).encode("utf-8")
    digest = hmac.new(secret.encode("utf-8"), message, hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


def authorization(access_key_id: str, request_signature: str) -> str:
    """Format the Authorization header value."""
    if not access_key_id or not isinstance(access_key_id, str):
        raise SignatureError("access key id must be a non-empty string")
    return f"{AUTHORIZATION_SCHEME} {access_key_id}:{request_signature}"


def content_md5(body: bytes) -> str:
    """Base64 of the raw MD5 digest of a request body."""
    return base64.b64encode(hashlib.md5(body).digest()).decode("ascii")
