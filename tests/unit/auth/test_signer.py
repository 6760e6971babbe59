"""
Module: test_signer.py
Description: Unit tests for canonical string construction and signing.

Checks the string-to-sign layout, case-sensitive x-mns selection and
that signatures match an independent HMAC-SHA1 computation.
"""

import base64
import hashlib
import hmac
from unittest.mock import patch

import pytest

from mns_client.auth import signer
from mns_client.exceptions import SignatureError
from mns_client.models.request import Method

FIXED_DATE = "Tue, 01 Jan 2019 00:00:00 GMT"


def reference_signature(canonical: str, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), canonical.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


class TestStringToSign:
    """Test cases for string_to_sign()."""

    def test_missing_content_headers_are_empty_lines(self):
        """Content-MD5 and Content-Type contribute empty entries, not omitted ones."""
        canonical = signer.string_to_sign("GET", {"Date": FIXED_DATE}, "/queues/test")

        assert canonical == f"GET\n\n\n{FIXED_DATE}\n/queues/test"

    def test_generated_date_when_absent(self):
        """A missing Date is replaced with the current RFC-1123 time."""
        with patch.object(signer, "http_date", return_value=FIXED_DATE):
            canonical = signer.string_to_sign("GET", {}, "/queues/test")

        assert canonical == f"GET\n\n\n{FIXED_DATE}\n/queues/test"

    def test_empty_date_is_signed_as_given(self):
        """A present but empty Date is signed empty, matching what is sent."""
        with patch.object(signer, "http_date", return_value=FIXED_DATE):
            canonical = signer.string_to_sign("GET", {"Date": ""}, "/queues/test")

        assert canonical == "GET\n\n\n\n/queues/test"

    def test_full_layout(self):
        """Test the ordering of every field."""
        headers = {
            "Content-MD5": "md5value",
            "Content-Type": "text/xml",
            "Date": FIXED_DATE,
            "x-mns-version": "2015-06-06",
            "x-mns-prefix": "order",
            "Host": "example.com",
        }

        canonical = signer.string_to_sign("PUT", headers, "/queues/q?metaoverride=true")

        assert canonical.split("\n") == [
            "PUT",
            "md5value",
            "text/xml",
            FIXED_DATE,
            "x-mns-prefix:order",
            "x-mns-version:2015-06-06",
            "/queues/q?metaoverride=true",
        ]

    def test_entry_count(self):
        """4 fixed entries + one per x-mns header + the resource."""
        headers = {"Date": FIXED_DATE, "x-mns-a": "1", "x-mns-b": "2", "x-mns-c": "3"}

        canonical = signer.string_to_sign("GET", headers, "/queues")

        assert len(canonical.split("\n")) == 4 + 3 + 1
        assert not canonical.endswith("\n")

    def test_prefix_match_is_case_sensitive(self):
        """Headers like X-MNS-Test are not part of the signed set."""
        headers = {
            "Date": FIXED_DATE,
            "X-MNS-Test": "upper",
            "X-Mns-Foo": "mixed",
            "x-mns-version": "2015-06-06",
        }

        canonical = signer.string_to_sign("GET", headers, "/queues/test")

        assert "X-MNS-Test:upper" not in canonical
        assert "X-Mns-Foo:mixed" not in canonical
        assert "x-mns-version:2015-06-06" in canonical

    def test_content_headers_lookup_is_exact(self):
        """Lower-cased content headers don't fill the Content-Type slot."""
        headers = {"Date": FIXED_DATE, "content-type": "text/xml"}

        canonical = signer.string_to_sign("POST", headers, "/queues/q/messages")

        assert canonical == f"POST\n\n\n{FIXED_DATE}\n/queues/q/messages"

    def test_accepts_method_enum(self):
        """Method members sign as their name."""
        canonical = signer.string_to_sign(Method.DELETE, {"Date": FIXED_DATE}, "/queues/q")

        assert canonical.startswith("DELETE\n")

    def test_invalid_resource(self):
        """Test string_to_sign with resources that are not absolute paths."""
        for resource in ["", "queues/test", None]:
            with pytest.raises(SignatureError):
                signer.string_to_sign("GET", {"Date": FIXED_DATE}, resource)


class TestSignature:
    """Test cases for signature() and authorization()."""

    def test_matches_reference_hmac(self):
        """Signature equals base64 HMAC-SHA1 of the canonical string."""
        headers = {"Date": FIXED_DATE, "x-mns-version": "2015-06-06"}
        expected = reference_signature(
            f"GET\n\n\n{FIXED_DATE}\nx-mns-version:2015-06-06\n/queues/test",
            "secret123"
        )

        assert signer.signature("GET", headers, "/queues/test", "secret123") == expected

    def test_scenario_without_headers(self):
        """GET with empty headers signs over the generated date."""
        with patch.object(signer, "http_date", return_value=FIXED_DATE):
            result = signer.signature("GET", {}, "/queues/test", "secret123")

        expected = reference_signature(f"GET\n\n\n{FIXED_DATE}\n/queues/test", "secret123")
        assert result == expected

    def test_deterministic(self):
        """Identical inputs give identical signatures."""
        headers = {"Date": FIXED_DATE, "Content-Type": "text/xml"}

        first = signer.signature("POST", headers, "/queues/q/messages", "secret")
        second = signer.signature("POST", dict(headers), "/queues/q/messages", "secret")

        assert first == second

    def test_different_secret_changes_signature(self):
        headers = {"Date": FIXED_DATE}

        assert signer.signature("GET", headers, "/queues", "a") != signer.signature(
            "GET", headers, "/queues", "b"
        )

    def test_unicode_is_utf8_encoded(self):
        """Non-ASCII header values and secrets are UTF-8 encoded."""
        headers = {"Date": FIXED_DATE, "x-mns-prefix": "队列"}
        expected = reference_signature(
            f"GET\n\n\n{FIXED_DATE}\nx-mns-prefix:队列\n/queues",
            "密钥"
        )

        assert signer.signature("GET", headers, "/queues", "密钥") == expected

    def test_invalid_secret(self):
        """Test signature with missing or non-string secrets."""
        for secret in ["", None, 123]:
            with pytest.raises(SignatureError):
                signer.signature("GET", {"Date": FIXED_DATE}, "/queues", secret)

    def test_authorization_format(self):
        assert signer.authorization("keyId", "c2lnbmF0dXJl") == "MNS keyId:c2lnbmF0dXJl"

    def test_authorization_invalid_key_id(self):
        with pytest.raises(SignatureError):
            signer.authorization("", "sig")

    def test_http_date_format(self):
        """http_date() renders RFC-1123 in GMT."""
        value = signer.http_date()

        assert value.endswith(" GMT")
        assert len(value) == len(FIXED_DATE)

    def test_content_md5(self):
        expected = base64.b64encode(hashlib.md5(b"<Message/>").digest()).decode("ascii")

        assert signer.content_md5(b"<Message/>") == expected
