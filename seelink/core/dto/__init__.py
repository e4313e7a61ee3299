from seelink.core.dto.file import FileLinkInputs

__all__ = [
    "FileLinkInputs",
]
