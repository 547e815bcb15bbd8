"""Request options and response records for the Pinata API."""

from pinata_sdk.models.config import ClientConfig, DEFAULT_BASE_URL
from pinata_sdk.models.groups import ListGroupsOptions, PinataGroup
from pinata_sdk.models.keys import (
    ApiKey,
    ApiKeyList,
    ApiKeySecret,
    DataPermissions,
    EndpointPermissions,
    GenerateApiKeyOptions,
    ListApiKeysOptions,
    Permissions,
    PinningPermissions,
)
from pinata_sdk.models.pinning import (
    AuthTestResponse,
    ListFilesOptions,
    ListFilesResponse,
    ListPinJobsOptions,
    ListPinJobsResponse,
    Pin,
    PinataMetadata,
    PinataOptions,
    PinByCidOptions,
    PinByCidPinataOptions,
    PinByCidResponse,
    PinJob,
    PinMetadataUpdateOptions,
    PinOptions,
    PinPolicy,
    PinResponse,
    PinStatus,
    Region,
    SortOrder,
)
from pinata_sdk.models.signatures import CidSignature, SwapHistory, SwapRecord

__all__ = [
    "ClientConfig", "DEFAULT_BASE_URL",
    "ListGroupsOptions", "PinataGroup",
    "ApiKey", "ApiKeyList", "ApiKeySecret", "DataPermissions", "EndpointPermissions",
    "GenerateApiKeyOptions", "ListApiKeysOptions", "Permissions", "PinningPermissions",
    "AuthTestResponse", "ListFilesOptions", "ListFilesResponse", "ListPinJobsOptions",
    "ListPinJobsResponse", "Pin", "PinataMetadata", "PinataOptions", "PinByCidOptions",
    "PinByCidPinataOptions", "PinByCidResponse", "PinJob", "PinMetadataUpdateOptions",
    "PinOptions", "PinPolicy", "PinResponse", "PinStatus", "Region", "SortOrder",
    "CidSignature", "SwapHistory", "SwapRecord",
]
