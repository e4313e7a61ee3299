import pytest

from seelink.core.dto.file import FileLinkInputs
from seelink.core.links import DisplayType, all_types, render, render_all, render_batch, render_file
from seelink.core.links.renderer import RENDERERS

D = "https://x/d"
P = "https://x/p"

# (display type, filename) -> expected output for every type x category cell
MATRIX = {
    DisplayType.DIRECT_LINK: {
        "a.png": D, "a.mp3": D, "a.mp4": D, "a.pdf": D,
    },
    DisplayType.SHARE_PAGE: {
        "a.png": P, "a.mp3": P, "a.mp4": P, "a.pdf": P,
    },
    DisplayType.BBCODE: {
        "a.png": f"[img]{D}[/img]",
        "a.mp3": f"[audio]{D}[/audio]",
        "a.mp4": f"[video]{D}[/video]",
        "a.pdf": f"[url={D}]a.pdf[/url]",
    },
    DisplayType.BBCODE_WITH_LINK: {
        "a.png": f"[url={P}][img]{D}[/img][/url]",
        "a.mp3": f"[audio]{D}[/audio]",
        "a.mp4": f"[video]{D}[/video]",
        "a.pdf": f"[url={P}]a.pdf[/url]",
    },
    DisplayType.BBCODE_DIRECT_LINK: {
        "a.png": f"[url={D}][img]{D}[/img][/url]",
        "a.mp3": f"[audio]{D}[/audio]",
        "a.mp4": f"[video]{D}[/video]",
        "a.pdf": f"[url={D}]a.pdf[/url]",
    },
    DisplayType.HTML: {
        "a.png": f'<img src="{D}" alt="a.png">',
        "a.mp3": f'<audio src="{D}" controls>a.mp3</audio>',
        "a.mp4": f'<video src="{D}" controls>a.mp4</video>',
        "a.pdf": f'<a href="{D}">a.pdf</a>',
    },
    DisplayType.HTML_WITH_LINK: {
        "a.png": f'<a href="{P}"><img src="{D}" alt="a.png"></a>',
        "a.mp3": f'<audio src="{D}" controls>a.mp3</audio>',
        "a.mp4": f'<video src="{D}" controls>a.mp4</video>',
        "a.pdf": f'<a href="{P}">a.pdf</a>',
    },
    DisplayType.HTML_DIRECT_LINK: {
        "a.png": f'<a href="{D}"><img src="{D}" alt="a.png"></a>',
        "a.mp3": f'<audio src="{D}" controls>a.mp3</audio>',
        "a.mp4": f'<video src="{D}" controls>a.mp4</video>',
        "a.pdf": f'<a href="{D}">a.pdf</a>',
    },
    DisplayType.MARKDOWN: {
        "a.png": f"![a.png]({D})",
        "a.mp3": f"[a.mp3]({D})",
        "a.mp4": f"[a.mp4]({D})",
        "a.pdf": f"[a.pdf]({D})",
    },
}

CELLS = [
    (display_type, filename, expected)
    for display_type, row in MATRIX.items()
    for filename, expected in row.items()
]


def test_matrix_covers_every_display_type():
    assert set(MATRIX) == set(DisplayType)
    assert set(RENDERERS) == set(DisplayType)


@pytest.mark.parametrize("display_type,filename,expected", CELLS)
def test_render_matrix(display_type, filename, expected):
    assert render(display_type, filename, D, P) == expected


# Literal regression examples


def test_bbcode_image():
    assert render(DisplayType.BBCODE, "a.png", "https://x/a.png", "https://x/p/a") == "[img]https://x/a.png[/img]"


def test_bbcode_with_link_audio_is_bare_tag():
    assert (
        render(DisplayType.BBCODE_WITH_LINK, "a.mp3", "https://x/a.mp3", "https://x/p/a")
        == "[audio]https://x/a.mp3[/audio]"
    )


def test_html_other():
    assert (
        render(DisplayType.HTML, "doc.pdf", "https://x/doc.pdf", "https://x/p/doc")
        == '<a href="https://x/doc.pdf">doc.pdf</a>'
    )


def test_markdown_image_vs_video():
    assert render(DisplayType.MARKDOWN, "a.png", "https://x/a.png", "_") == "![a.png](https://x/a.png)"
    assert render(DisplayType.MARKDOWN, "a.mp4", "https://x/a.mp4", "_") == "[a.mp4](https://x/a.mp4)"


def test_direct_link_ignores_category():
    assert render(DisplayType.DIRECT_LINK, "anything", "https://x/d", "https://x/p") == "https://x/d"


# Pass-through behavior


def test_empty_inputs_pass_through():
    assert render(DisplayType.BBCODE, "", "", "") == "[url=][/url]"
    assert render(DisplayType.HTML_WITH_LINK, "a.gif", "", "") == '<a href=""><img src="" alt="a.gif"></a>'
    assert render(DisplayType.SHARE_PAGE, "a.gif", "https://x/a.gif", "") == ""


def test_filename_is_not_escaped():
    name = 'say "hi" <b>&.png'
    out = render(DisplayType.HTML, name, D, P)
    assert out == f'<img src="{D}" alt="{name}">'


def test_alt_text_matches_filename_in_every_image_variant():
    for display_type in (DisplayType.HTML, DisplayType.HTML_WITH_LINK, DisplayType.HTML_DIRECT_LINK):
        out = render(display_type, "cat.webp", D, P)
        assert 'alt="cat.webp"' in out
        assert "title=" not in out
        assert "target=" not in out


def test_other_variants_differ_only_by_url_when_page_equals_direct():
    with_link = render(DisplayType.BBCODE_WITH_LINK, "a.zip", D, D)
    direct = render(DisplayType.BBCODE_DIRECT_LINK, "a.zip", D, D)
    assert with_link == direct == f"[url={D}]a.zip[/url]"


def test_category_uses_case_insensitive_extension():
    assert render(DisplayType.BBCODE, "Photo.JPG", D, P) == f"[img]{D}[/img]"


def test_render_is_idempotent():
    for display_type in all_types():
        first = render(display_type, "clip.webm", D, P)
        assert render(display_type, "clip.webm", D, P) == first


# Convenience surfaces


def test_render_file_uses_page_default():
    inputs = FileLinkInputs.create("a.png", D)
    assert render_file(DisplayType.SHARE_PAGE, inputs) == D
    assert render_file(DisplayType.HTML_WITH_LINK, inputs) == f'<a href="{D}"><img src="{D}" alt="a.png"></a>'


def test_render_batch_joins_lines():
    files = [
        FileLinkInputs.create("a.png", "https://x/a.png", "https://x/p/a"),
        FileLinkInputs.create("b.mp3", "https://x/b.mp3"),
        FileLinkInputs.create("c.txt", "https://x/c.txt", "https://x/p/c"),
    ]
    assert render_batch(DisplayType.MARKDOWN, files) == (
        "![a.png](https://x/a.png)\n"
        "[b.mp3](https://x/b.mp3)\n"
        "[c.txt](https://x/c.txt)"
    )


def test_render_batch_empty():
    assert render_batch(DisplayType.BBCODE, []) == ""


def test_render_all_follows_picker_order():
    inputs = FileLinkInputs.create("a.png", D, P)
    rendered = render_all(inputs)
    assert [t for t, _ in rendered] == list(all_types())
    assert rendered[0] == (DisplayType.DIRECT_LINK, D)
    assert rendered[-1] == (DisplayType.MARKDOWN, f"![a.png]({D})")
