"""Group endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from pinata_sdk.errors import ValidationError
from pinata_sdk.models.groups import ListGroupsOptions, PinataGroup

if TYPE_CHECKING:
    from pinata_sdk.client import PinataClient


class GroupsAPI:
    """CRUD for ``/groups`` and group membership of CIDs."""

    def __init__(self, client: PinataClient) -> None:
        self._client = client

    async def create(self, name: str) -> PinataGroup:
        if not name:
            raise ValidationError("group name is required")
        req = self._client.new_request("POST", "/groups").set_json_body({"name": name})
        return await req.send(PinataGroup.from_dict)

    async def get(self, group_id: str) -> PinataGroup:
        if not group_id:
            raise ValidationError("group id is required")
        req = self._client.new_request("GET", "/groups/{id}").add_path_param("id", group_id)
        return await req.send(PinataGroup.from_dict)

    async def list(self, options: ListGroupsOptions | None = None) -> list[PinataGroup]:
        req = self._client.new_request("GET", "/groups")
        if options is not None:
            if options.name_contains:
                req.add_query_param("nameContains", options.name_contains)
            if options.limit > 0:
                req.add_query_param("limit", options.limit)
            if options.offset > 0:
                req.add_query_param("offset", options.offset)
        return await req.send(PinataGroup.list_from)

    async def update(self, group_id: str, name: str) -> PinataGroup:
        if not group_id or not name:
            raise ValidationError("group id and new group name are required")
        req = (
            self._client.new_request("PUT", "/groups/{id}")
            .add_path_param("id", group_id)
            .set_json_body({"name": name})
        )
        return await req.send(PinataGroup.from_dict)

    async def add_cids(self, group_id: str, cids: Sequence[str]) -> None:
        await self._membership("PUT", group_id, cids)

    async def remove_cids(self, group_id: str, cids: Sequence[str]) -> None:
        await self._membership("DELETE", group_id, cids)

    async def _membership(self, method: str, group_id: str, cids: Sequence[str]) -> None:
        if not group_id or not cids:
            raise ValidationError("group id and at least one cid is required")
        await (
            self._client.new_request(method, "/groups/{id}/cids")
            .add_path_param("id", group_id)
            .set_json_body({"cids": list(cids)})
            .send()
        )

    async def remove(self, group_id: str) -> None:
        if not group_id:
            raise ValidationError("group id is required")
        await self._client.new_request("DELETE", "/groups/{id}").add_path_param(
            "id", group_id,
        ).send()
