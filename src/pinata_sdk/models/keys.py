"""API key management models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pinata_sdk.models.common import as_dict, as_list, omit_empty


# ── Permissions (request side) ──────────────────────────


@dataclass
class DataPermissions:
    pin_list: bool = False
    user_pinned_data_total: bool = False

    def to_dict(self) -> dict[str, Any]:
        return omit_empty({
            "pinList": self.pin_list,
            "userPinnedDataTotal": self.user_pinned_data_total,
        })


@dataclass
class PinningPermissions:
    hash_metadata: bool = False
    hash_pin_policy: bool = False
    pin_by_hash: bool = False
    pin_file_to_ipfs: bool = False
    pin_json_to_ipfs: bool = False
    pin_jobs: bool = False
    unpin: bool = False
    user_pin_policy: bool = False

    def to_dict(self) -> dict[str, Any]:
        return omit_empty({
            "hashMetadata": self.hash_metadata,
            "hashPinPolicy": self.hash_pin_policy,
            "pinByHash": self.pin_by_hash,
            "pinFileToIPFS": self.pin_file_to_ipfs,
            "pinJSONToIPFS": self.pin_json_to_ipfs,
            "pinJobs": self.pin_jobs,
            "unpin": self.unpin,
            "userPinPolicy": self.user_pin_policy,
        })


@dataclass
class EndpointPermissions:
    data: DataPermissions = field(default_factory=DataPermissions)
    pinning: PinningPermissions = field(default_factory=PinningPermissions)

    def to_dict(self) -> dict[str, Any]:
        return {"data": self.data.to_dict(), "pinning": self.pinning.to_dict()}


@dataclass
class Permissions:
    admin: bool = False
    endpoints: EndpointPermissions | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.admin:
            payload["admin"] = True
        if self.endpoints is not None:
            payload["endpoints"] = self.endpoints.to_dict()
        return payload


@dataclass
class GenerateApiKeyOptions:
    key_name: str = ""
    permissions: Permissions = field(default_factory=Permissions)
    max_uses: int = 0

    def to_dict(self) -> dict[str, Any]:
        return omit_empty({
            "keyName": self.key_name,
            "permissions": self.permissions.to_dict(),
            "maxUses": self.max_uses,
        })


@dataclass
class ListApiKeysOptions:
    """Filters for the v3 key listing. ``None`` booleans are not sent."""

    revoked: bool | None = None
    limited_use: bool | None = None
    exhausted: bool | None = None
    name: str = ""
    offset: int = 0


# ── Responses ───────────────────────────────────────────


@dataclass
class ApiKeySecret:
    """Credentials returned once, when a key is generated."""

    jwt: str = ""
    pinata_api_key: str = ""
    pinata_api_secret: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApiKeySecret:
        return cls(
            jwt=data.get("JWT", ""),
            pinata_api_key=data.get("pinata_api_key", ""),
            pinata_api_secret=data.get("pinata_api_secret", ""),
        )

    def __repr__(self) -> str:
        return f"ApiKeySecret(pinata_api_key={self.pinata_api_key!r})"


@dataclass
class ApiKey:
    id: str = ""
    name: str = ""
    key: str = ""
    secret: str = ""
    max_uses: int = 0
    uses: int = 0
    user_id: str = ""
    scopes: dict[str, Any] = field(default_factory=dict)
    revoked: bool = False
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApiKey:
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            key=data.get("key", ""),
            secret=data.get("secret", ""),
            max_uses=int(data.get("max_uses") or 0),
            uses=int(data.get("uses") or 0),
            user_id=data.get("user_id", ""),
            scopes=as_dict(data.get("scopes")),
            revoked=bool(data.get("revoked", False)),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )


@dataclass
class ApiKeyList:
    keys: list[ApiKey] = field(default_factory=list)
    count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApiKeyList:
        return cls(
            keys=[ApiKey.from_dict(k) for k in as_list(data.get("keys"))],
            count=int(data.get("count") or 0),
        )
