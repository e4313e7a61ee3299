from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional


def _optional_int(payload: Mapping, key: str) -> Optional[int]:
    value = payload.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"upload payload field {key!r} is not an integer: {value!r}") from e


@dataclass(frozen=True)
class FileLinkInputs:
    filename: str
    direct_url: str
    page_url: str

    # Display-only metadata from the upload response
    size: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    delete_url: Optional[str] = None

    @classmethod
    def create(cls, filename: str, direct_url: str, page_url: Optional[str] = None) -> "FileLinkInputs":
        """Build inputs, using the direct URL when there is no share page."""
        return cls(filename=filename, direct_url=direct_url, page_url=page_url or direct_url)

    @classmethod
    def from_upload(cls, payload: Any) -> "FileLinkInputs":
        """
        Build inputs from a file upload response object.

        Expected keys: filename, url (required); page, size, width, height,
        delete (optional).

        Raises:
            ValueError: If payload is not an object, filename or url is
                missing, or a numeric field is not an integer
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"upload payload must be an object, got {type(payload).__name__}")

        filename = payload.get("filename")
        url = payload.get("url")
        if filename is None or url is None:
            raise ValueError("upload payload requires 'filename' and 'url'")

        return cls(
            filename=str(filename),
            direct_url=str(url),
            page_url=str(payload.get("page") or url),
            size=_optional_int(payload, "size"),
            width=_optional_int(payload, "width"),
            height=_optional_int(payload, "height"),
            delete_url=payload.get("delete"),
        )

    @property
    def dimensions(self) -> Optional[str]:
        """Width x height, e.g. 800x600, when both are known"""
        if self.width is None or self.height is None:
            return None
        return f"{self.width}x{self.height}"
