from __future__ import annotations

from enum import Enum

from seelink.utils.file_utils import get_file_extension


class FileCategory(Enum):
    """Coarse file category used to pick the embed tag."""
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    OTHER = "other"


IMAGE_EXTENSIONS = frozenset({
    "jpg", "jpeg", "png", "gif", "webp", "bmp", "svg", "heic", "avif", "ico", "tiff",
})
AUDIO_EXTENSIONS = frozenset({
    "mp3", "wav", "flac", "aac", "ogg", "m4a", "wma",
})
VIDEO_EXTENSIONS = frozenset({
    "mp4", "mkv", "avi", "mov", "wmv", "flv", "webm", "m4v", "3gp",
})


def classify(filename: str) -> FileCategory:
    """
    Map a filename to its category by extension.

    Never fails: no extension, an empty name or an unknown extension
    all give FileCategory.OTHER.

    Examples:
        >>> classify("Photo.JPG")
        <FileCategory.IMAGE: 'image'>
        >>> classify("notes")
        <FileCategory.OTHER: 'other'>
    """
    ext = get_file_extension(filename)
    if ext in IMAGE_EXTENSIONS:
        return FileCategory.IMAGE
    if ext in AUDIO_EXTENSIONS:
        return FileCategory.AUDIO
    if ext in VIDEO_EXTENSIONS:
        return FileCategory.VIDEO
    return FileCategory.OTHER
