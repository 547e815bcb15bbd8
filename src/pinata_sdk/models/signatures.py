"""CID signature and CID swap records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pinata_sdk.models.common import as_dict, as_list


@dataclass
class CidSignature:
    cid: str = ""
    signature: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CidSignature:
        inner = as_dict(data.get("data"))
        return cls(cid=inner.get("cid", ""), signature=inner.get("signature", ""))


@dataclass
class SwapRecord:
    mapped_cid: str = ""
    created_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SwapRecord:
        return cls(
            mapped_cid=data.get("mappedCid", ""),
            created_at=data.get("createdAt", ""),
        )

    @classmethod
    def from_envelope(cls, data: dict[str, Any]) -> SwapRecord:
        """Decode ``{"data": {...}}`` as returned by add-swap."""
        return cls.from_dict(as_dict(data.get("data")))


@dataclass
class SwapHistory:
    swaps: list[SwapRecord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SwapHistory:
        return cls(swaps=[SwapRecord.from_dict(s) for s in as_list(data.get("data"))])
