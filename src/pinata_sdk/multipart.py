"""multipart/form-data encoding for file and folder uploads."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import httpx

from pinata_sdk.errors import ValidationError
from pinata_sdk.request import encode_json

FILE_FIELD = "file"


class MultipartForm:
    """Collects file parts and text fields, then encodes them in one go.

    Encoding is delegated to httpx so the boundary and part headers match what
    httpx itself would send for ``files=``/``data=``.
    """

    def __init__(self) -> None:
        self._files: list[tuple[str, tuple[str, bytes]]] = []
        self._fields: dict[str, str] = {}

    def add_file(self, filename: str, content: bytes) -> MultipartForm:
        self._files.append((FILE_FIELD, (filename, content)))
        return self

    def add_path(self, path: str | Path, filename: str | None = None) -> MultipartForm:
        """Read a local file into a ``file`` part. Raises ValidationError if unreadable."""
        p = Path(path)
        try:
            content = p.read_bytes()
        except OSError as exc:
            raise ValidationError(f"failed to open file {path}: {exc}") from exc
        return self.add_file(filename or p.name, content)

    def add_field(self, name: str, value: str) -> MultipartForm:
        self._fields[name] = value
        return self

    def add_json_field(self, name: str, value: Any) -> MultipartForm:
        return self.add_field(name, encode_json(value).decode("utf-8"))

    def encode(self) -> tuple[bytes, str]:
        """Return ``(body, content_type)``; the content type carries the boundary."""
        request = httpx.Request(
            "POST",
            "http://multipart.invalid/",
            files=self._files,
            data=self._fields or None,
        )
        return request.read(), request.headers["Content-Type"]
