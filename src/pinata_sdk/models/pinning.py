"""Pinning request options and response records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from pinata_sdk.models.common import as_dict, as_list, omit_empty


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class PinStatus(str, Enum):
    """Status values reported for pin-by-CID jobs."""

    PRECHECKING = "prechecking"
    RETRIEVING = "retrieving"
    EXPIRED = "expired"
    OVER_FREE_LIMIT = "over_free_limit"
    OVER_MAX_SIZE = "over_max_size"
    INVALID_OBJECT = "invalid_object"
    BAD_HOST_NODE = "bad_host_node"


# ── Options ─────────────────────────────────────────────


@dataclass
class PinataMetadata:
    """Name and free-form key/values attached to a pin."""

    name: str = ""
    keyvalues: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return omit_empty({"name": self.name, "keyvalues": self.keyvalues})


@dataclass
class PinataOptions:
    cid_version: int = 0

    def to_dict(self) -> dict[str, Any]:
        return omit_empty({"cidVersion": self.cid_version})


@dataclass
class PinOptions:
    """Options for pinning files, folders, URLs and JSON."""

    metadata: PinataMetadata = field(default_factory=PinataMetadata)
    options: PinataOptions = field(default_factory=PinataOptions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pinataMetadata": self.metadata.to_dict(),
            "pinataOptions": self.options.to_dict(),
        }


@dataclass
class PinByCidPinataOptions:
    group_id: str = ""
    host_nodes: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return omit_empty({"groupId": self.group_id, "hostNodes": self.host_nodes})


@dataclass
class PinByCidOptions:
    metadata: PinataMetadata = field(default_factory=PinataMetadata)
    options: PinByCidPinataOptions = field(default_factory=PinByCidPinataOptions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pinataMetadata": self.metadata.to_dict(),
            "pinataOptions": self.options.to_dict(),
        }


@dataclass
class PinMetadataUpdateOptions:
    name: str = ""
    keyvalues: dict[str, Any] = field(default_factory=dict)


@dataclass
class ListFilesOptions:
    """Filters for ``/data/pinList``. Zero/empty values are not sent."""

    cid: str = ""
    group_id: str = ""
    status: str = ""
    page_limit: int = 0
    page_offset: int = 0
    metadata: dict[str, Any] | None = None
    pin_size_min: int = 0
    pin_size_max: int = 0
    pin_start: datetime | None = None
    pin_end: datetime | None = None
    unpin_start: datetime | None = None
    unpin_end: datetime | None = None
    include_count: bool = False


@dataclass
class ListPinJobsOptions:
    """Filters for ``/pinning/pinJobs``."""

    sort: SortOrder | None = None
    status: PinStatus | None = None
    ipfs_pin_hash: str = ""
    limit: int = 0
    offset: int = 0


# ── Responses ───────────────────────────────────────────


@dataclass
class AuthTestResponse:
    message: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AuthTestResponse:
        return cls(message=data.get("message", ""))


@dataclass
class PinResponse:
    """Result of uploading content (file, folder, URL or JSON)."""

    ipfs_hash: str = ""
    pin_size: int = 0
    timestamp: str = ""
    is_duplicate: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PinResponse:
        return cls(
            ipfs_hash=data.get("IpfsHash", ""),
            pin_size=int(data.get("PinSize") or 0),
            timestamp=data.get("Timestamp", ""),
            is_duplicate=bool(data.get("isDuplicate", data.get("IsDuplicate", False))),
        )


@dataclass
class PinByCidResponse:
    id: str = ""
    ipfs_hash: str = ""
    status: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PinByCidResponse:
        return cls(
            id=data.get("id", ""),
            ipfs_hash=data.get("ipfsHash", ""),
            status=data.get("status", ""),
            name=data.get("name", ""),
        )


@dataclass
class Region:
    region_id: str = ""
    current_replication_count: int = 0
    desired_replication_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Region:
        return cls(
            region_id=data.get("regionId", ""),
            current_replication_count=int(data.get("currentReplicationCount") or 0),
            desired_replication_count=int(data.get("desiredReplicationCount") or 0),
        )


@dataclass
class Pin:
    """One row of ``/data/pinList``."""

    id: str = ""
    ipfs_pin_hash: str = ""
    size: int = 0
    user_id: str = ""
    date_pinned: str = ""
    date_unpinned: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    regions: list[Region] = field(default_factory=list)
    mime_type: str = ""
    number_of_files: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pin:
        return cls(
            id=data.get("id", ""),
            ipfs_pin_hash=data.get("ipfs_pin_hash", ""),
            size=int(data.get("size") or 0),
            user_id=data.get("user_id", ""),
            date_pinned=data.get("date_pinned", ""),
            date_unpinned=data.get("date_unpinned"),
            metadata=as_dict(data.get("metadata")),
            regions=[Region.from_dict(r) for r in as_list(data.get("regions"))],
            mime_type=data.get("mime_type", ""),
            number_of_files=int(data.get("number_of_files") or 0),
        )


@dataclass
class ListFilesResponse:
    count: int = 0
    rows: list[Pin] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListFilesResponse:
        return cls(
            count=int(data.get("count") or 0),
            rows=[Pin.from_dict(r) for r in as_list(data.get("rows"))],
        )


@dataclass
class PinPolicyRegion:
    id: str = ""
    desired_replication_count: int = 0


@dataclass
class PinPolicy:
    regions: list[PinPolicyRegion] = field(default_factory=list)
    version: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PinPolicy:
        return cls(
            regions=[
                PinPolicyRegion(
                    id=r.get("id", ""),
                    desired_replication_count=int(r.get("desiredReplicationCount") or 0),
                )
                for r in as_list(data.get("regions"))
            ],
            version=int(data.get("version") or 0),
        )


@dataclass
class PinJob:
    """One queued pin-by-CID job."""

    id: str = ""
    ipfs_pin_hash: str = ""
    date_queued: str = ""
    name: str = ""
    status: str = ""
    keyvalues: Any = None
    host_nodes: list[str] = field(default_factory=list)
    pin_policy: PinPolicy = field(default_factory=PinPolicy)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PinJob:
        return cls(
            id=data.get("id", ""),
            ipfs_pin_hash=data.get("ipfs_pin_hash", ""),
            date_queued=data.get("date_queued", ""),
            name=data.get("name", ""),
            status=data.get("status", ""),
            keyvalues=data.get("keyvalues"),
            host_nodes=list(as_list(data.get("host_nodes"))),
            pin_policy=PinPolicy.from_dict(as_dict(data.get("pin_policy"))),
        )


@dataclass
class ListPinJobsResponse:
    count: int = 0
    rows: list[PinJob] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ListPinJobsResponse:
        return cls(
            count=int(data.get("count") or 0),
            rows=[PinJob.from_dict(r) for r in as_list(data.get("rows"))],
        )
