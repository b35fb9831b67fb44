"""
keyset_core.constants
---------------------
Shared constants for keyset validation and key-data construction.
"""

SUPPORTED_AES_KEY_SIZES = (16, 32)  # bytes

LOGGER_NAME = "keyset_core"

# Environment overrides for the package logger
ENV_LOG_LEVEL = "KEYSET_CORE_LOG_LEVEL"
ENV_LOG_FILE = "KEYSET_CORE_LOG_FILE"

AES_GCM_TYPE_URL = "type.googleapis.com/google.crypto.tink.AesGcmKey"
ED25519_PRIVATE_TYPE_URL = "type.googleapis.com/google.crypto.tink.Ed25519PrivateKey"
ED25519_PUBLIC_TYPE_URL = "type.googleapis.com/google.crypto.tink.Ed25519PublicKey"
X25519_PUBLIC_TYPE_URL = "type.googleapis.com/keyset_core.X25519PublicKey"
