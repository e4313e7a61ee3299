from __future__ import annotations


def get_file_extension(filename: str) -> str:
    """
    Extract the lowercase extension after the last dot.

    Examples:
        >>> get_file_extension("image.JPG")
        "jpg"
        >>> get_file_extension("README")
        ""
    """
    if not filename or "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].lower()


def format_file_size(size_bytes: int) -> str:
    """
    Format byte size as human-readable string.

    Args:
        size_bytes: File size in bytes

    Returns:
        Human-readable size string (e.g., "1.5 MB")

    Examples:
        >>> format_file_size(1024)
        "1.0 KB"
        >>> format_file_size(1572864)
        "1.5 MB"
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024**2:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024**3:
        return f"{size_bytes / 1024**2:.1f} MB"
    else:
        return f"{size_bytes / 1024**3:.1f} GB"
