"""
Link rendering for hosted files.

Every output here is pasted verbatim into forums, web pages and notes, so the
templates are fixed strings. Inputs are interpolated as given: nothing is
escaped or validated.

Audio and video always render as their bare tag, including the
"with link" and "direct link" variants.
"""
from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Tuple

from seelink.core.dto.file import FileLinkInputs
from seelink.core.links.categories import FileCategory, classify
from seelink.core.links.display_types import DisplayType, all_types


# ------------------------------------------------------------
# BBCode
# ------------------------------------------------------------

def _bbcode_media(category: FileCategory, direct_url: str) -> str:
    if category is FileCategory.AUDIO:
        return f"[audio]{direct_url}[/audio]"
    return f"[video]{direct_url}[/video]"


def bbcode(filename: str, direct_url: str, page_url: str) -> str:
    category = classify(filename)
    if category is FileCategory.IMAGE:
        return f"[img]{direct_url}[/img]"
    if category is FileCategory.OTHER:
        return f"[url={direct_url}]{filename}[/url]"
    return _bbcode_media(category, direct_url)


def bbcode_with_link(filename: str, direct_url: str, page_url: str) -> str:
    category = classify(filename)
    if category is FileCategory.IMAGE:
        return f"[url={page_url}][img]{direct_url}[/img][/url]"
    if category is FileCategory.OTHER:
        return f"[url={page_url}]{filename}[/url]"
    return _bbcode_media(category, direct_url)


def bbcode_direct_link(filename: str, direct_url: str, page_url: str) -> str:
    category = classify(filename)
    if category is FileCategory.IMAGE:
        return f"[url={direct_url}][img]{direct_url}[/img][/url]"
    if category is FileCategory.OTHER:
        return f"[url={direct_url}]{filename}[/url]"
    return _bbcode_media(category, direct_url)


# ------------------------------------------------------------
# HTML
# ------------------------------------------------------------

def _html_media(category: FileCategory, filename: str, direct_url: str) -> str:
    tag = "audio" if category is FileCategory.AUDIO else "video"
    return f'<{tag} src="{direct_url}" controls>{filename}</{tag}>'


def _html_img(filename: str, direct_url: str) -> str:
    return f'<img src="{direct_url}" alt="{filename}">'


def html(filename: str, direct_url: str, page_url: str) -> str:
    category = classify(filename)
    if category is FileCategory.IMAGE:
        return _html_img(filename, direct_url)
    if category is FileCategory.OTHER:
        return f'<a href="{direct_url}">{filename}</a>'
    return _html_media(category, filename, direct_url)


def html_with_link(filename: str, direct_url: str, page_url: str) -> str:
    category = classify(filename)
    if category is FileCategory.IMAGE:
        return f'<a href="{page_url}">{_html_img(filename, direct_url)}</a>'
    if category is FileCategory.OTHER:
        return f'<a href="{page_url}">{filename}</a>'
    return _html_media(category, filename, direct_url)


def html_direct_link(filename: str, direct_url: str, page_url: str) -> str:
    category = classify(filename)
    if category is FileCategory.IMAGE:
        return f'<a href="{direct_url}">{_html_img(filename, direct_url)}</a>'
    if category is FileCategory.OTHER:
        return f'<a href="{direct_url}">{filename}</a>'
    return _html_media(category, filename, direct_url)


# ------------------------------------------------------------
# Markdown / plain
# ------------------------------------------------------------

def markdown(filename: str, direct_url: str, page_url: str) -> str:
    if classify(filename) is FileCategory.IMAGE:
        return f"![{filename}]({direct_url})"
    return f"[{filename}]({direct_url})"


def _direct_link(filename: str, direct_url: str, page_url: str) -> str:
    return direct_url


def _share_page(filename: str, direct_url: str, page_url: str) -> str:
    return page_url


# One entry per DisplayType; tests check the table is complete.
RENDERERS: Dict[DisplayType, Callable[[str, str, str], str]] = {
    DisplayType.DIRECT_LINK: _direct_link,
    DisplayType.SHARE_PAGE: _share_page,
    DisplayType.BBCODE: bbcode,
    DisplayType.BBCODE_WITH_LINK: bbcode_with_link,
    DisplayType.BBCODE_DIRECT_LINK: bbcode_direct_link,
    DisplayType.HTML: html,
    DisplayType.HTML_WITH_LINK: html_with_link,
    DisplayType.HTML_DIRECT_LINK: html_direct_link,
    DisplayType.MARKDOWN: markdown,
}


def render(display_type: DisplayType, filename: str, direct_url: str, page_url: str) -> str:
    """
    Render a file link in the requested display type.

    Args:
        display_type: Output format
        filename: Original filename (drives the category and link text)
        direct_url: URL of the raw file
        page_url: URL of the share page (pass direct_url when there is none)

    Returns:
        The text to display or copy
    """
    return RENDERERS[display_type](filename, direct_url, page_url)


def render_file(display_type: DisplayType, inputs: FileLinkInputs) -> str:
    return render(display_type, inputs.filename, inputs.direct_url, inputs.page_url)


def render_batch(display_type: DisplayType, files: Iterable[FileLinkInputs]) -> str:
    """Render several files, one per line, in a single display type."""
    return "\n".join(render_file(display_type, f) for f in files)


def render_all(inputs: FileLinkInputs) -> List[Tuple[DisplayType, str]]:
    """Every display type for one file, in picker order."""
    return [(t, render_file(t, inputs)) for t in all_types()]
