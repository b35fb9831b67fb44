"""
keyset_core.models
------------------
Data model for keysets as seen by the validation layer.

A Keyset is an ordered list of Key records plus the id of the primary key.
Each Key carries its status, output prefix type and (optionally) KeyData.
Instances are produced by whatever layer loads keysets; the validators only
read them.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Any, Dict, List, Optional
from .errors import StatusCode, to_error_f
from .utils import b64e, b64d


class KeyStatusType(str, Enum):
    UNKNOWN_STATUS = "UNKNOWN_STATUS"
    ENABLED = "ENABLED"
    DISABLED = "DISABLED"
    DESTROYED = "DESTROYED"


class OutputPrefixType(str, Enum):
    UNKNOWN_PREFIX = "UNKNOWN_PREFIX"
    TINK = "TINK"
    LEGACY = "LEGACY"
    RAW = "RAW"
    CRUNCHY = "CRUNCHY"


class KeyMaterialType(str, Enum):
    UNKNOWN_KEYMATERIAL = "UNKNOWN_KEYMATERIAL"
    SYMMETRIC = "SYMMETRIC"
    ASYMMETRIC_PRIVATE = "ASYMMETRIC_PRIVATE"
    ASYMMETRIC_PUBLIC = "ASYMMETRIC_PUBLIC"
    REMOTE = "REMOTE"


@dataclass(frozen=True)
class KeyData:
    type_url: str
    value: bytes = b""
    key_material_type: KeyMaterialType = KeyMaterialType.UNKNOWN_KEYMATERIAL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type_url": self.type_url,
            "value": b64e(self.value),
            "key_material_type": self.key_material_type.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeyData":
        try:
            return cls(
                type_url=data.get("type_url", ""),
                value=b64d(data.get("value", "")),
                key_material_type=KeyMaterialType(
                    data.get("key_material_type", KeyMaterialType.UNKNOWN_KEYMATERIAL)
                ),
            )
        except (TypeError, ValueError) as e:
            raise to_error_f(StatusCode.INVALID_ARGUMENT, "malformed key data: %s", e) from e


@dataclass(frozen=True)
class Key:
    """
    One entry of a keyset.

    key_id is a 32-bit id, unique within its keyset only. A missing
    key_data is representable here so that validation can reject it.
    """
    key_id: int
    status: KeyStatusType = KeyStatusType.UNKNOWN_STATUS
    output_prefix_type: OutputPrefixType = OutputPrefixType.UNKNOWN_PREFIX
    key_data: Optional[KeyData] = None

    def has_key_data(self) -> bool:
        return self.key_data is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key_id": self.key_id,
            "status": self.status.value,
            "output_prefix_type": self.output_prefix_type.value,
            "key_data": self.key_data.to_dict() if self.key_data else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Key":
        key_data = data.get("key_data")
        try:
            key_id = int(data["key_id"])
            status = KeyStatusType(data.get("status", KeyStatusType.UNKNOWN_STATUS))
            output_prefix_type = OutputPrefixType(
                data.get("output_prefix_type", OutputPrefixType.UNKNOWN_PREFIX)
            )
        except KeyError as e:
            raise to_error_f(StatusCode.INVALID_ARGUMENT, "key record is missing %s", e) from e
        except (TypeError, ValueError) as e:
            raise to_error_f(StatusCode.INVALID_ARGUMENT, "malformed key record: %s", e) from e
        return cls(
            key_id=key_id,
            status=status,
            output_prefix_type=output_prefix_type,
            key_data=KeyData.from_dict(key_data) if key_data else None,
        )


@dataclass(frozen=True)
class Keyset:
    primary_key_id: int = 0
    key: List[Key] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary_key_id": self.primary_key_id,
            "key": [k.to_dict() for k in self.key],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Keyset":
        return cls(
            primary_key_id=int(data.get("primary_key_id", 0)),
            key=[Key.from_dict(k) for k in data.get("key", [])],
        )


@dataclass(frozen=True)
class KeyInfo:
    type_url: str
    status: KeyStatusType
    key_id: int
    output_prefix_type: OutputPrefixType


@dataclass(frozen=True)
class KeysetInfo:
    """Material-free view of a Keyset. Safe to log."""
    primary_key_id: int
    key_info: List[KeyInfo] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        for info in d["key_info"]:
            info["status"] = info["status"].value
            info["output_prefix_type"] = info["output_prefix_type"].value
        return d


def keyset_info(keyset: Keyset) -> KeysetInfo:
    return KeysetInfo(
        primary_key_id=keyset.primary_key_id,
        key_info=[
            KeyInfo(
                type_url=k.key_data.type_url if k.key_data else "",
                status=k.status,
                key_id=k.key_id,
                output_prefix_type=k.output_prefix_type,
            )
            for k in keyset.key
        ],
    )
