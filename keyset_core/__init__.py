"""
keyset_core
===========
Admission gate for cryptographic keysets.

Provides:
- Keyset / Key / KeyData model and dict conversion
- Structural and policy validation (validate_keyset and friends)
- KeyData builders for AES-GCM, Ed25519 and X25519 raw keys
- Structured JSON logger
"""

from .errors import KeysetError, InvalidArgumentError, StatusCode, to_error_f
from .models import (
    KeyStatusType,
    OutputPrefixType,
    KeyMaterialType,
    KeyData,
    Key,
    Keyset,
    KeyInfo,
    KeysetInfo,
    keyset_info,
)
from .validation import validate_aes_key_size, validate_version, validate_key, validate_keyset
from .key_data import (
    aes_key_data,
    ed25519_private_key_data,
    ed25519_public_key_data,
    x25519_public_key_data,
    public_key_data,
    new_key,
)
from .logger import get_logger

__all__ = [
    "KeysetError",
    "InvalidArgumentError",
    "StatusCode",
    "to_error_f",
    "KeyStatusType",
    "OutputPrefixType",
    "KeyMaterialType",
    "KeyData",
    "Key",
    "Keyset",
    "KeyInfo",
    "KeysetInfo",
    "keyset_info",
    "validate_aes_key_size",
    "validate_version",
    "validate_key",
    "validate_keyset",
    "aes_key_data",
    "ed25519_private_key_data",
    "ed25519_public_key_data",
    "x25519_public_key_data",
    "public_key_data",
    "new_key",
    "get_logger",
]
