"""
keyset_core.utils
-----------------
Base64 helpers used by the dict (de)serializers in models.
"""

from __future__ import annotations
import base64


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")


def b64d(s: str) -> bytes:
    return base64.b64decode(s.encode("ascii"))
