"""
keyset_core.key_data
--------------------
Builds KeyData / Key records from raw key bytes that already exist:

- AES-GCM: symmetric key, size-checked with validate_aes_key_size()
- Ed25519: private (signing) and public (verifying) keys
- X25519: public keys for hybrid encryption

Raw bytes are loaded with `cryptography` so malformed material is rejected
when the record is built, not when a primitive is created later.
"""

from __future__ import annotations
from cryptography.hazmat.primitives.asymmetric import ed25519, x25519
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from .constants import (
    AES_GCM_TYPE_URL,
    ED25519_PRIVATE_TYPE_URL,
    ED25519_PUBLIC_TYPE_URL,
    X25519_PUBLIC_TYPE_URL,
)
from .errors import StatusCode, to_error_f
from .models import Key, KeyData, KeyMaterialType, KeyStatusType, OutputPrefixType
from .validation import validate_aes_key_size


# --------- Symmetric ----------
def aes_key_data(raw: bytes, type_url: str = AES_GCM_TYPE_URL) -> KeyData:
    validate_aes_key_size(len(raw))
    AESGCM(raw)
    return KeyData(type_url=type_url, value=bytes(raw), key_material_type=KeyMaterialType.SYMMETRIC)


# --------- Ed25519 ----------
def ed25519_private_key_data(raw: bytes) -> KeyData:
    try:
        ed25519.Ed25519PrivateKey.from_private_bytes(raw)
    except ValueError as e:
        raise to_error_f(StatusCode.INVALID_ARGUMENT, "invalid Ed25519 private key: %s", e) from e
    return KeyData(
        type_url=ED25519_PRIVATE_TYPE_URL,
        value=bytes(raw),
        key_material_type=KeyMaterialType.ASYMMETRIC_PRIVATE,
    )


def ed25519_public_key_data(raw: bytes) -> KeyData:
    try:
        ed25519.Ed25519PublicKey.from_public_bytes(raw)
    except ValueError as e:
        raise to_error_f(StatusCode.INVALID_ARGUMENT, "invalid Ed25519 public key: %s", e) from e
    return KeyData(
        type_url=ED25519_PUBLIC_TYPE_URL,
        value=bytes(raw),
        key_material_type=KeyMaterialType.ASYMMETRIC_PUBLIC,
    )


def public_key_data(private: KeyData) -> KeyData:
    """Public half of Ed25519 private key data, for a verification-only keyset."""
    if private.type_url != ED25519_PRIVATE_TYPE_URL:
        raise to_error_f(
            StatusCode.INVALID_ARGUMENT,
            "no public key for type url '%s'",
            private.type_url,
        )
    try:
        sk = ed25519.Ed25519PrivateKey.from_private_bytes(private.value)
    except ValueError as e:
        raise to_error_f(StatusCode.INVALID_ARGUMENT, "invalid Ed25519 private key: %s", e) from e
    return ed25519_public_key_data(sk.public_key().public_bytes_raw())


# --------- X25519 ----------
def x25519_public_key_data(raw: bytes) -> KeyData:
    try:
        x25519.X25519PublicKey.from_public_bytes(raw)
    except ValueError as e:
        raise to_error_f(StatusCode.INVALID_ARGUMENT, "invalid X25519 public key: %s", e) from e
    return KeyData(
        type_url=X25519_PUBLIC_TYPE_URL,
        value=bytes(raw),
        key_material_type=KeyMaterialType.ASYMMETRIC_PUBLIC,
    )


def new_key(
    key_id: int,
    key_data: KeyData,
    status: KeyStatusType = KeyStatusType.ENABLED,
    output_prefix_type: OutputPrefixType = OutputPrefixType.TINK,
) -> Key:
    return Key(key_id=key_id, status=status, output_prefix_type=output_prefix_type, key_data=key_data)
