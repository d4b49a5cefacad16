"""Unit tests for fiso.api.scan.decode_name module."""

import os

import pytest

from fiso.api.scan.decode_name import decode_name

pytestmark = pytest.mark.scan


def test_decode_name_passes_text_through():
    assert decode_name("résumé.txt") == "résumé.txt"


def test_decode_name_replaces_invalid_bytes():
    """Test surrogate-escaped bytes become U+FFFD."""
    name = os.fsdecode(b"bad\xffname.txt")
    decoded = decode_name(name)
    assert decoded == "bad\ufffdname.txt"
    decoded.encode("utf-8")
