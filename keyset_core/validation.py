"""
keyset_core.validation
----------------------
Admission checks a keyset must pass before primitives are built from it:

- validate_aes_key_size(): symmetric key length is 16 or 32 bytes
- validate_version(): key format version is within what the caller supports
- validate_key(): one key record is structurally complete
- validate_keyset(): aggregate policy over all enabled keys

Every check returns None on success and raises InvalidArgumentError on the
first violation found. Nothing here mutates its input.
"""

from __future__ import annotations
from .constants import SUPPORTED_AES_KEY_SIZES
from .errors import KeysetError, StatusCode, to_error_f
from .logger import get_logger
from .models import Key, Keyset, KeyMaterialType, KeyStatusType, OutputPrefixType

log = get_logger(__name__)


def validate_aes_key_size(key_size: int) -> None:
    if key_size not in SUPPORTED_AES_KEY_SIZES:
        raise to_error_f(
            StatusCode.INVALID_ARGUMENT,
            "AES key has %d bytes; supported sizes: 16 or 32 bytes.",
            key_size,
        )


def validate_version(candidate: int, max_expected: int) -> None:
    if candidate < 0 or candidate > max_expected:
        raise to_error_f(
            StatusCode.INVALID_ARGUMENT,
            "Key has version '%d'; only keys with version in range [0..%d] are supported.",
            candidate,
            max_expected,
        )


def validate_key(key: Key) -> None:
    """
    Check the structural fields of a single key record, in order:
    key data present, prefix known, status known.

    DISABLED and DESTROYED keys pass; only the unset sentinels are rejected.
    """
    if not key.has_key_data():
        raise to_error_f(StatusCode.INVALID_ARGUMENT, "key %d, has no key data", key.key_id)

    if key.output_prefix_type == OutputPrefixType.UNKNOWN_PREFIX:
        raise to_error_f(StatusCode.INVALID_ARGUMENT, "key %d has unknown prefix", key.key_id)

    if key.status == KeyStatusType.UNKNOWN_STATUS:
        raise to_error_f(StatusCode.INVALID_ARGUMENT, "key %d has unknown status", key.key_id)


def validate_keyset(keyset: Keyset) -> None:
    """
    Check a whole keyset.

    Only ENABLED keys take part: each one must pass validate_key(), exactly
    one of them must carry primary_key_id, and at least one must exist.
    A keyset holding only ASYMMETRIC_PUBLIC material may omit the primary,
    since public keys are usable for verification without being primary.
    """
    if len(keyset.key) < 1:
        log.warning("rejected keyset: no keys")
        raise to_error_f(
            StatusCode.INVALID_ARGUMENT,
            "A valid keyset must contain at least one key.",
        )

    primary_key_id = keyset.primary_key_id
    has_primary_key = False
    contains_only_public_key_material = True
    enabled_keys = 0

    for key in keyset.key:
        if key.status != KeyStatusType.ENABLED:
            if key.status == KeyStatusType.UNKNOWN_STATUS:
                log.warning("skipping key %d with unknown status", key.key_id)
            continue
        enabled_keys += 1

        try:
            validate_key(key)
        except KeysetError as e:
            log.warning("rejected keyset: %s", e)
            raise

        if key.key_id == primary_key_id:
            if has_primary_key:
                log.warning("rejected keyset: duplicate primary key %d", primary_key_id)
                raise to_error_f(
                    StatusCode.INVALID_ARGUMENT,
                    "keyset contains multiple primary keys",
                )
            has_primary_key = True

        if key.key_data.key_material_type != KeyMaterialType.ASYMMETRIC_PUBLIC:
            contains_only_public_key_material = False

    if enabled_keys == 0:
        log.warning("rejected keyset: no enabled keys")
        raise to_error_f(
            StatusCode.INVALID_ARGUMENT,
            "keyset must contain at least one ENABLED key",
        )

    if not has_primary_key and not contains_only_public_key_material:
        log.warning("rejected keyset: primary key %d not found among enabled keys", primary_key_id)
        raise to_error_f(
            StatusCode.INVALID_ARGUMENT,
            "keyset doesn't contain a valid primary key",
        )

    log.debug("keyset ok: %d enabled key(s), primary=%d", enabled_keys, primary_key_id)
