"""Pinning endpoints against the mock API."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from pinata_sdk.errors import APIError, BatchItemError, ValidationError
from pinata_sdk.models.pinning import (
    ListFilesOptions,
    ListPinJobsOptions,
    PinataMetadata,
    PinByCidOptions,
    PinByCidPinataOptions,
    PinMetadataUpdateOptions,
    PinOptions,
    PinStatus,
    SortOrder,
)

from tests.factories import pin_response_body, pin_row_body, write_file


# ── pin_file ──────────────────────────────────────────────────────


async def test_pin_file_uploads_multipart(client, mock_server, tmp_path):
    path = write_file(tmp_path, "test.txt", b"Test content")
    mock_server.respond("POST", "/pinning/pinFileToIPFS", body=pin_response_body())

    options = PinOptions(metadata=PinataMetadata(name="test_name"))
    resp = await client.pinning.pin_file(path, options)

    assert resp.ipfs_hash == "QmTestCID123"
    assert resp.pin_size == 123
    assert resp.timestamp == "2023-05-01T12:00:00Z"

    req = mock_server.last()
    assert req.headers["content-type"].startswith("multipart/form-data; boundary=")
    assert req.files == [("test.txt", b"Test content")]
    sent_options = json.loads(req.fields["pinataOptions"])
    assert sent_options["pinataMetadata"]["name"] == "test_name"


async def test_pin_file_without_options_sends_only_the_file(client, mock_server, tmp_path):
    path = write_file(tmp_path, "only.bin", b"\x00\x01")
    mock_server.respond("POST", "/pinning/pinFileToIPFS", body=pin_response_body())

    await client.pinning.pin_file(str(path))

    req = mock_server.last()
    assert req.files == [("only.bin", b"\x00\x01")]
    assert req.fields == {}


async def test_pin_file_requires_path(client, mock_server):
    with pytest.raises(ValidationError, match="filepath is required"):
        await client.pinning.pin_file("")
    assert mock_server.requests == []


async def test_pin_file_missing_file(client, mock_server, tmp_path):
    with pytest.raises(ValidationError, match="failed to open file"):
        await client.pinning.pin_file(tmp_path / "nope.txt")
    assert mock_server.requests == []


async def test_pin_file_api_error(client, mock_server, tmp_path):
    path = write_file(tmp_path, "test.txt")
    mock_server.respond(
        "POST", "/pinning/pinFileToIPFS", status=403,
        body={"error": {"reason": "NO_SCOPES_FOUND", "details": "no scopes"}},
    )
    with pytest.raises(APIError, match="NO_SCOPES_FOUND") as exc_info:
        await client.pinning.pin_file(path)
    assert exc_info.value.status_code == 403


# ── pin_files ─────────────────────────────────────────────────────


async def test_pin_files_returns_results_in_order(client, mock_server, tmp_path):
    paths = [write_file(tmp_path, f"f{i}.txt", f"content {i}") for i in range(8)]

    def _reply(req):
        filename, _ = req.files[0]
        return 200, pin_response_body(ipfs_hash=f"Qm-{filename}")

    mock_server.route("POST", "/pinning/pinFileToIPFS", _reply)
    mock_server.delay = 0.05

    results = await client.pinning.pin_files(paths)

    assert [r.ipfs_hash for r in results] == [f"Qm-f{i}.txt" for i in range(8)]
    assert mock_server.max_in_flight == 5


async def test_pin_files_applies_options_per_path(client, mock_server, tmp_path):
    paths = [write_file(tmp_path, "a.txt"), write_file(tmp_path, "b.txt")]
    mock_server.respond("POST", "/pinning/pinFileToIPFS", body=pin_response_body())

    await client.pinning.pin_files(
        paths, [PinOptions(metadata=PinataMetadata(name="first")), None],
    )

    by_name = {r.files[0][0]: r for r in mock_server.requests}
    assert json.loads(by_name["a.txt"].fields["pinataOptions"])["pinataMetadata"] == {
        "name": "first",
    }
    assert "pinataOptions" not in by_name["b.txt"].fields


async def test_pin_files_requires_paths(client):
    with pytest.raises(ValidationError, match="at least one filepath is required"):
        await client.pinning.pin_files([])


async def test_pin_files_fails_fast(client, mock_server, tmp_path):
    paths = [write_file(tmp_path, f"f{i}.txt") for i in range(3)]

    def _reply(req):
        if req.files[0][0] == "f1.txt":
            return 500, {"error": "upload rejected"}
        return 200, pin_response_body()

    mock_server.route("POST", "/pinning/pinFileToIPFS", _reply)

    with pytest.raises(APIError, match="upload rejected"):
        await client.pinning.pin_files(paths)


# ── pin_json / pin_by_cid ─────────────────────────────────────────


async def test_pin_json(client, mock_server):
    mock_server.respond("POST", "/pinning/pinJSONToIPFS", body=pin_response_body("QmJSON"))

    resp = await client.pinning.pin_json(
        {"hello": "world"},
        PinOptions(metadata=PinataMetadata(name="doc", keyvalues={"env": "test"})),
    )

    assert resp.ipfs_hash == "QmJSON"
    assert mock_server.last().json() == {
        "pinataContent": {"hello": "world"},
        "pinataMetadata": {"name": "doc", "keyvalues": {"env": "test"}},
        "pinataOptions": {},
    }


async def test_pin_json_requires_data(client):
    with pytest.raises(ValidationError, match="json data is required"):
        await client.pinning.pin_json(None)


async def test_pin_by_cid(client, mock_server):
    mock_server.respond("POST", "/pinning/pinByHash", body={
        "id": "job-1", "ipfsHash": "QmCID", "status": "prechecking", "name": "remote",
    })

    resp = await client.pinning.pin_by_cid("QmCID", PinByCidOptions(
        metadata=PinataMetadata(name="remote"),
        options=PinByCidPinataOptions(group_id="g1", host_nodes=["/ip4/1.2.3.4"]),
    ))

    assert (resp.id, resp.ipfs_hash, resp.status, resp.name) == (
        "job-1", "QmCID", "prechecking", "remote",
    )
    assert mock_server.last().json() == {
        "hashToPin": "QmCID",
        "pinataMetadata": {"name": "remote"},
        "pinataOptions": {"groupId": "g1", "hostNodes": ["/ip4/1.2.3.4"]},
    }


async def test_pin_by_cid_requires_cid(client):
    with pytest.raises(ValidationError, match="hashToPin is required"):
        await client.pinning.pin_by_cid("")


# ── Listing ───────────────────────────────────────────────────────


async def test_list_files_query(client, mock_server):
    mock_server.respond("GET", "/data/pinList", body={
        "count": 1, "rows": [pin_row_body()],
    })

    resp = await client.pinning.list_files(ListFilesOptions(
        status="pinned",
        page_limit=10,
        metadata={"name": "test-asset.glb"},
        pin_start=datetime(2023, 5, 1, tzinfo=timezone.utc),
    ))

    assert resp.count == 1
    row = resp.rows[0]
    assert row.ipfs_pin_hash == "QmTestCID123"
    assert row.regions[0].region_id == "FRA1"
    assert row.metadata["keyvalues"] == {"env": "test"}

    query = mock_server.last().query
    assert query == {
        "status": "pinned",
        "pageLimit": "10",
        "metadata": '{"name":"test-asset.glb"}',
        "pinStart": "2023-05-01T00:00:00+00:00",
        "includeCount": "false",
    }


async def test_list_files_without_options(client, mock_server):
    mock_server.respond("GET", "/data/pinList", body={"count": 0, "rows": None})
    resp = await client.pinning.list_files()
    assert resp.rows == []
    assert mock_server.last().query == {}


async def test_list_pin_jobs(client, mock_server):
    mock_server.respond("GET", "/pinning/pinJobs", body={
        "count": 1,
        "rows": [{
            "id": "job-1",
            "ipfs_pin_hash": "QmCID",
            "date_queued": "2023-05-01T12:00:00Z",
            "name": "remote",
            "status": "retrieving",
            "keyvalues": None,
            "host_nodes": [],
            "pin_policy": {
                "regions": [{"id": "FRA1", "desiredReplicationCount": 1}],
                "version": 1,
            },
        }],
    })

    resp = await client.pinning.list_pin_jobs(ListPinJobsOptions(
        sort=SortOrder.ASC, status=PinStatus.RETRIEVING, limit=5,
    ))

    assert resp.rows[0].status == "retrieving"
    assert resp.rows[0].pin_policy.regions[0].desired_replication_count == 1
    assert mock_server.last().query == {"sort": "ASC", "status": "retrieving", "limit": "5"}


# ── Metadata / unpin ──────────────────────────────────────────────


async def test_update_metadata(client, mock_server):
    mock_server.respond("PUT", "/pinning/hashMetadata", body=b"OK")

    await client.pinning.update_metadata(
        "QmCID", PinMetadataUpdateOptions(name="renamed", keyvalues={"k": "v"}),
    )

    assert mock_server.last().json() == {
        "ipfsPinHash": "QmCID", "name": "renamed", "keyvalues": {"k": "v"},
    }


async def test_update_metadata_requires_cid(client):
    with pytest.raises(ValidationError, match="cid and options are required"):
        await client.pinning.update_metadata("", PinMetadataUpdateOptions())


async def test_delete_file(client, mock_server):
    mock_server.respond("DELETE", "/pinning/unpin/QmCID", body=b"OK")
    await client.pinning.delete_file("QmCID")
    assert mock_server.last().method == "DELETE"


async def test_delete_file_not_found(client, mock_server):
    with pytest.raises(APIError) as exc_info:
        await client.pinning.delete_file("QmMissing")
    assert exc_info.value.status_code == 404


async def test_delete_files_collects_failures(client, mock_server):
    for cid in ("a", "c"):
        mock_server.respond("DELETE", f"/pinning/unpin/{cid}", body=b"OK")
    mock_server.respond("DELETE", "/pinning/unpin/b", status=500, body={"error": "locked"})

    errors = await client.pinning.delete_files(["a", "b", "c"])

    assert len(errors) == 1
    err = errors[0]
    assert isinstance(err, BatchItemError)
    assert err.item == "b"
    assert "failed to delete CID b" in str(err)
    assert isinstance(err.__cause__, APIError)
    assert sorted(r.path for r in mock_server.requests) == [
        "/pinning/unpin/a", "/pinning/unpin/b", "/pinning/unpin/c",
    ]


async def test_delete_files_all_succeed(client, mock_server):
    mock_server.respond("DELETE", "/pinning/unpin/a", body=b"OK")
    assert await client.pinning.delete_files(["a"]) == []


async def test_delete_files_empty_input(client, mock_server):
    errors = await client.pinning.delete_files([])
    assert len(errors) == 1
    assert isinstance(errors[0], ValidationError)
    assert "at least one CID is required" in str(errors[0])
    assert mock_server.requests == []


async def test_delete_files_bounded_concurrency(client, mock_server):
    cids = [f"Qm{i:03d}" for i in range(100)]
    for cid in cids:
        mock_server.respond("DELETE", f"/pinning/unpin/{cid}", body=b"OK")
    mock_server.delay = 0.01

    errors = await client.pinning.delete_files(cids)

    assert errors == []
    assert len(mock_server.requests) == 100
    assert mock_server.max_in_flight == 5
