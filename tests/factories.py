"""Synthetic API payloads and local files for testing."""

from __future__ import annotations

from pathlib import Path


def pin_response_body(
    ipfs_hash: str = "QmTestCID123",
    pin_size: int = 123,
    timestamp: str = "2023-05-01T12:00:00Z",
) -> dict:
    return {"IpfsHash": ipfs_hash, "PinSize": pin_size, "Timestamp": timestamp}


def pin_row_body(
    cid: str = "QmTestCID123",
    size: int = 1024,
    name: str = "test-asset.glb",
) -> dict:
    return {
        "id": f"pin-{cid}",
        "ipfs_pin_hash": cid,
        "size": size,
        "user_id": "user-1",
        "date_pinned": "2023-05-01T12:00:00.000Z",
        "date_unpinned": None,
        "metadata": {"name": name, "keyvalues": {"env": "test"}},
        "regions": [
            {
                "regionId": "FRA1",
                "currentReplicationCount": 1,
                "desiredReplicationCount": 1,
            }
        ],
        "mime_type": "model/gltf-binary",
        "number_of_files": 1,
    }


def group_body(group_id: str = "group-1", name: str = "Test Group") -> dict:
    return {
        "id": group_id,
        "user_id": "user-1",
        "name": name,
        "createdAt": "2023-05-01T12:00:00Z",
        "updatedAt": "2023-05-02T12:00:00Z",
    }


def write_file(directory: Path, name: str, content: bytes | str = b"Test content") -> Path:
    """Create ``directory/name`` (parents included) and return its path."""
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        content = content.encode("utf-8")
    path.write_bytes(content)
    return path
