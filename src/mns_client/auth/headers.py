"""
Module: headers.py
Description: Header assembly for outgoing MNS requests.

Fills in the headers every request must carry (Host, Date,
x-mns-version and, for requests with a body, Content-Type) and then
signs the completed set into the Authorization header.

Key Components:
- HeaderSet: Case-sensitive header mapping used for signing
- prepare_headers(): Apply defaults and set Authorization
"""

from collections.abc import MutableMapping
from typing import Dict, Iterator, Mapping, Optional

from . import signer

AUTHORIZATION = "Authorization"
CONTENT_MD5 = signer.CONTENT_MD5
CONTENT_TYPE = signer.CONTENT_TYPE
DATE = signer.DATE
HOST = "Host"
VERSION = "x-mns-version"

XML_CONTENT_TYPE = "text/xml"


class HeaderSet(MutableMapping):
    """
    Mapping of header name to value with exact, case-sensitive keys.

    "Date" and "date" are distinct keys for lookup, and
    signer.canonical_headers() selects x-mns headers by a case-sensitive
    prefix test. set_default() is the exception: it treats any case
    variant of its key as already supplied.
    """

    def __init__(self, headers: Optional[Mapping[str, str]] = None):
        self._headers: Dict[str, str] = {}
        if headers:
            for key, value in headers.items():
                self[key] = value

    def __getitem__(self, key: str) -> str:
        return self._headers[key]

    def __setitem__(self, key: str, value: str) -> None:
        if not isinstance(key, str) or not key:
            raise ValueError("header name must be a non-empty string")
        self._headers[key] = str(value)

    def __delitem__(self, key: str) -> None:
        del self._headers[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        # Authorization is redacted so a HeaderSet can be logged safely.
        shown = {
            k: ("<redacted>" if k == AUTHORIZATION else v)
            for k, v in self._headers.items()
        }
        return f"HeaderSet({shown!r})"

    def canonicalize(self, key: str) -> bool:
        """
        Rename any case variant of key to exactly key.

        When several variants exist the last one written wins, so httpx
        sends the header once. Returns True if the set now holds key.
        """
        variants = [k for k in self._headers if k.lower() == key.lower()]
        if not variants:
            return False
        value = self._headers[variants[-1]]
        for variant in variants:
            del self._headers[variant]
        self._headers[key] = value
        return True

    def set_default(self, key: str, value: str) -> bool:
        """
        Set key only when no case variant of it is present.

        A variant the caller supplied ("date" for "Date") is renamed to
        key and keeps its value, so the signed and sent values agree.
        Returns True if the default was written.
        """
        if self.canonicalize(key):
            return False
        self[key] = value
        return True

    def copy(self) -> "HeaderSet":
        return HeaderSet(self._headers)


def prepare_headers(
    method: str,
    headers: Optional[Mapping[str, str]],
    resource: str,
    has_body: bool,
    *,
    host: str,
    version: str,
    access_key_id: str,
    secret: str,
    body: Optional[bytes] = None,
    content_md5: bool = False
) -> HeaderSet:
    """
    Build the complete, signed header set for one request.

    The caller's mapping is copied, never mutated, so concurrent calls
    sharing a headers dict cannot see each other's Date or signature.

    Args:
        method: HTTP method name
        headers: Caller-supplied headers (may be None)
        resource: Resource path including any query string
        has_body: Whether the request carries a payload
        host: Value for the Host header when absent
        version: Value for the x-mns-version header when absent
        access_key_id: Access key id for the Authorization header
        secret: Access key secret used to sign
        body: Serialized body, needed only for Content-MD5
        content_md5: Add a Content-MD5 header for bodies when absent

    Returns:
        HeaderSet including Authorization

    Raises:
        SignatureError: If credentials or resource cannot be signed
    """
    prepared = HeaderSet(headers)

    prepared.set_default(HOST, host)
    prepared.set_default(DATE, signer.http_date())
    prepared.set_default(VERSION, version)

    if has_body:
        # The server signs with text/xml whatever the caller sent.
        prepared.canonicalize(CONTENT_TYPE)
        prepared[CONTENT_TYPE] = XML_CONTENT_TYPE
        if content_md5 and body is not None:
            prepared.set_default(CONTENT_MD5, signer.content_md5(body))

    request_signature = signer.signature(method, prepared, resource, secret)
    prepared.canonicalize(AUTHORIZATION)
    prepared[AUTHORIZATION] = signer.authorization(access_key_id, request_signature)

    return prepared
