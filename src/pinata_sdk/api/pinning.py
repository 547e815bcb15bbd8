"""Pinning endpoints: upload, pin by CID, list, update metadata, unpin."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Any, Sequence
from urllib.parse import urlparse

import httpx

from pinata_sdk.errors import APIError, BatchItemError, NetworkError, ValidationError
from pinata_sdk.models.pinning import (
    ListFilesOptions,
    ListFilesResponse,
    ListPinJobsOptions,
    ListPinJobsResponse,
    PinByCidOptions,
    PinByCidResponse,
    PinMetadataUpdateOptions,
    PinOptions,
    PinResponse,
)
from pinata_sdk.multipart import MultipartForm
from pinata_sdk.request import RequestBuilder, encode_json

if TYPE_CHECKING:
    from pinata_sdk.client import PinataClient

log = logging.getLogger(__name__)

PIN_FILE_PATH = "/pinning/pinFileToIPFS"


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _rfc3339(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def _add_metadata_and_options(form: MultipartForm, options: PinOptions, name: str) -> None:
    """Folder/URL uploads carry metadata and options as two separate fields."""
    form.add_json_field("pinataMetadata", {
        "name": name,
        "keyvalues": options.metadata.keyvalues or None,
    })
    form.add_json_field("pinataOptions", {"cidVersion": options.options.cid_version})


def set_list_files_params(req: RequestBuilder, options: ListFilesOptions) -> RequestBuilder:
    if options.cid:
        req.add_query_param("cid", options.cid)
    if options.group_id:
        req.add_query_param("groupId", options.group_id)
    if options.status:
        req.add_query_param("status", options.status)
    if options.page_limit > 0:
        req.add_query_param("pageLimit", options.page_limit)
    if options.page_offset > 0:
        req.add_query_param("pageOffset", options.page_offset)
    if options.pin_size_min > 0:
        req.add_query_param("pinSizeMin", options.pin_size_min)
    if options.pin_size_max > 0:
        req.add_query_param("pinSizeMax", options.pin_size_max)
    if options.pin_start is not None:
        req.add_query_param("pinStart", _rfc3339(options.pin_start))
    if options.pin_end is not None:
        req.add_query_param("pinEnd", _rfc3339(options.pin_end))
    if options.unpin_start is not None:
        req.add_query_param("unpinStart", _rfc3339(options.unpin_start))
    if options.unpin_end is not None:
        req.add_query_param("unpinEnd", _rfc3339(options.unpin_end))
    req.add_query_param("includeCount", options.include_count)
    if options.metadata:
        req.add_query_param("metadata", encode_json(options.metadata).decode("utf-8"))
    return req


def set_list_pin_jobs_params(req: RequestBuilder, options: ListPinJobsOptions) -> RequestBuilder:
    if options.sort:
        req.add_query_param("sort", options.sort.value)
    if options.status:
        req.add_query_param("status", options.status.value)
    if options.ipfs_pin_hash:
        req.add_query_param("ipfs_pin_hash", options.ipfs_pin_hash)
    if options.limit > 0:
        req.add_query_param("limit", options.limit)
    if options.offset > 0:
        req.add_query_param("offset", options.offset)
    return req


class PinningAPI:
    """Upload and pin management under ``/pinning`` and ``/data``."""

    def __init__(self, client: PinataClient) -> None:
        self._client = client

    async def _upload(self, form: MultipartForm) -> PinResponse:
        body, content_type = form.encode()
        return await self._client.new_request("POST", PIN_FILE_PATH).set_body(
            body, content_type,
        ).send(PinResponse.from_dict)

    # ── Uploads ────────────────────────────────────────────

    async def pin_file(self, path: str | Path, options: PinOptions | None = None) -> PinResponse:
        """Upload one local file and pin it.

        When given, ``options`` travels whole (metadata and options) in the
        ``pinataOptions`` form field.
        """
        if not path:
            raise ValidationError("filepath is required")
        form = MultipartForm().add_path(path)
        if options is not None:
            form.add_json_field("pinataOptions", options)
        return await self._upload(form)

    async def pin_files(
        self,
        paths: Sequence[str | Path],
        options: Sequence[PinOptions | None] | None = None,
    ) -> list[PinResponse]:
        """Pin several local files, at most ``max_workers`` uploads at a time.

        ``options[i]`` applies to ``paths[i]``. The first failure is raised as
        soon as it is seen; uploads already in flight still complete and files
        already pinned stay pinned.
        """
        if not paths:
            raise ValidationError("at least one filepath is required")
        jobs = [
            (path, options[i] if options is not None and i < len(options) else None)
            for i, path in enumerate(paths)
        ]

        async def _pin(job: tuple[str | Path, PinOptions | None]) -> PinResponse:
            return await self.pin_file(*job)

        log.info("Pinning %d files", len(jobs))
        results = await self._client.worker_pool(_pin).run_fail_fast(jobs)
        log.info("Pinned %d files", len(results))
        return results

    async def pin_url(self, url: str, options: PinOptions | None = None) -> PinResponse:
        """Download ``url`` and pin its content."""
        if not url:
            raise ValidationError("url is required")

        try:
            async with httpx.AsyncClient(
                timeout=self._client.config.timeout, follow_redirects=True,
            ) as fetcher:
                resp = await fetcher.get(url)
        except httpx.InvalidURL as exc:
            raise ValidationError(f"invalid url {url}: {exc}") from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"error fetching URL {url}: {exc!r}") from exc
        if resp.status_code != 200:
            raise APIError(
                f"HTTP error fetching {url}: {resp.status_code} {resp.reason_phrase}",
                status_code=resp.status_code,
            )

        name = f"url_upload_{_timestamp()}"
        if options is not None and options.metadata.name:
            name = options.metadata.name

        filename = PurePosixPath(urlparse(url).path).name or "file"
        form = MultipartForm().add_file(filename, resp.content)
        if options is not None:
            _add_metadata_and_options(form, options, name)
        return await self._upload(form)

    async def pin_folder(
        self, paths: Sequence[str | Path], options: PinOptions | None = None,
    ) -> PinResponse:
        """Upload several files as one directory, named after the metadata name."""
        if not paths:
            raise ValidationError("at least one filepath is required")
        folder = self._folder_name(options)
        form = MultipartForm()
        for path in paths:
            form.add_path(path, f"{folder}/{Path(path).name}")
        if options is not None:
            _add_metadata_and_options(form, options, folder)
        return await self._upload(form)

    async def pin_nested_folders(
        self,
        base_dir: str | Path,
        paths: Sequence[str | Path],
        options: PinOptions | None = None,
    ) -> PinResponse:
        """Upload files as one directory, keeping their layout relative to ``base_dir``."""
        if not base_dir or not paths:
            raise ValidationError("base dir and at least one filepath is required")
        folder = self._folder_name(options)
        form = MultipartForm()
        for path in paths:
            rel = Path(os.path.relpath(path, base_dir)).as_posix()
            form.add_path(path, f"{folder}/{rel}")
        if options is not None:
            _add_metadata_and_options(form, options, folder)
        return await self._upload(form)

    @staticmethod
    def _folder_name(options: PinOptions | None) -> str:
        if options is not None and options.metadata.name:
            return options.metadata.name
        return f"folder_from_sdk_{_timestamp()}"

    # ── JSON / CID ─────────────────────────────────────────

    async def pin_json(self, data: Any, options: PinOptions | None = None) -> PinResponse:
        if data is None:
            raise ValidationError("json data is required")
        payload: dict[str, Any] = {"pinataContent": data}
        if options is not None:
            payload.update(options.to_dict())
        req = self._client.new_request("POST", "/pinning/pinJSONToIPFS").set_json_body(payload)
        return await req.send(PinResponse.from_dict)

    async def pin_by_cid(
        self, cid: str, options: PinByCidOptions | None = None,
    ) -> PinByCidResponse:
        """Queue a pin-by-CID job for content already on the IPFS network."""
        if not cid:
            raise ValidationError("hashToPin is required")
        payload: dict[str, Any] = {"hashToPin": cid}
        if options is not None:
            payload.update(options.to_dict())
        req = self._client.new_request("POST", "/pinning/pinByHash").set_json_body(payload)
        return await req.send(PinByCidResponse.from_dict)

    # ── Listing ────────────────────────────────────────────

    async def list_files(self, options: ListFilesOptions | None = None) -> ListFilesResponse:
        req = self._client.new_request("GET", "/data/pinList")
        if options is not None:
            set_list_files_params(req, options)
        return await req.send(ListFilesResponse.from_dict)

    async def list_pin_jobs(
        self, options: ListPinJobsOptions | None = None,
    ) -> ListPinJobsResponse:
        req = self._client.new_request("GET", "/pinning/pinJobs")
        if options is not None:
            set_list_pin_jobs_params(req, options)
        return await req.send(ListPinJobsResponse.from_dict)

    # ── Metadata / unpin ───────────────────────────────────

    async def update_metadata(self, cid: str, options: PinMetadataUpdateOptions) -> None:
        if not cid or options is None:
            raise ValidationError("cid and options are required")
        payload = {
            "ipfsPinHash": cid,
            "name": options.name,
            "keyvalues": options.keyvalues,
        }
        await self._client.new_request("PUT", "/pinning/hashMetadata").set_json_body(
            payload,
        ).send()

    async def delete_file(self, cid: str) -> None:
        if not cid:
            raise ValidationError("cid is required")
        await self._client.new_request("DELETE", "/pinning/unpin/{cid}").add_path_param(
            "cid", cid,
        ).send()

    async def delete_files(self, cids: Sequence[str]) -> list[Exception]:
        """Unpin several CIDs, at most ``max_workers`` at a time.

        Every CID is attempted. Returns one BatchItemError per failed CID (the
        CID is in ``.item`` and the message); an empty list means all succeeded.
        """
        if not cids:
            return [ValidationError("at least one CID is required")]

        log.info("Unpinning %d CIDs", len(cids))
        outcomes = await self._client.worker_pool(self.delete_file).run_all(list(cids))
        errors: list[Exception] = []
        for outcome in outcomes:
            if outcome.ok:
                continue
            log.warning("Unpin failed for %s: %s", outcome.job, outcome.error)
            err = BatchItemError(
                f"failed to delete CID {outcome.job}: {outcome.error}", item=outcome.job,
            )
            err.__cause__ = outcome.error
            errors.append(err)
        log.info("Unpinned %d/%d CIDs", len(cids) - len(errors), len(cids))
        return errors
