from seelink.core.links.categories import FileCategory, classify
from seelink.core.links.display_types import (
    DEFAULT_DISPLAY_TYPE,
    DisplayType,
    all_types,
    from_string,
    label,
)
from seelink.core.links.renderer import (
    render,
    render_all,
    render_batch,
    render_file,
)

__all__ = [
    # Categories
    "FileCategory",
    "classify",

    # Display types
    "DEFAULT_DISPLAY_TYPE",
    "DisplayType",
    "all_types",
    "from_string",
    "label",

    # Rendering
    "render",
    "render_all",
    "render_batch",
    "render_file",
]
