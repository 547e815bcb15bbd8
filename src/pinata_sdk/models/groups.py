"""Group records and list filters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pinata_sdk.models.common import as_list


@dataclass
class PinataGroup:
    id: str = ""
    owner_id: str = ""
    name: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PinataGroup:
        return cls(
            id=data.get("id", ""),
            owner_id=data.get("user_id", ""),
            name=data.get("name", ""),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )

    @classmethod
    def list_from(cls, data: Any) -> list[PinataGroup]:
        return [cls.from_dict(g) for g in as_list(data)]


@dataclass
class ListGroupsOptions:
    name_contains: str = ""
    limit: int = 0
    offset: int = 0
