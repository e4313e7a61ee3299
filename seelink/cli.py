"""Command line front end for SEE Links.

Usage:
  # List display types (the stored preference is marked with *)
  see-links types

  # Render one file link with the stored preference, or an explicit type
  see-links render photo.png https://s.ee/f/photo.png --page https://s.ee/p/abc
  see-links render photo.png https://s.ee/f/photo.png --type BBCODE_WITH_LINK
  see-links render photo.png https://s.ee/f/photo.png --all

  # Render a JSON array of upload responses, one line per file
  see-links batch uploads.json --type MARKDOWN
  see-links batch uploads.json --details

  # Settings
  see-links config show
  see-links config set-display-type HTML
  see-links config set-api-key <key>
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from seelink import __version__
from seelink.core import ConfigError, CoreContext
from seelink.core.dto.file import FileLinkInputs
from seelink.core.links import all_types, from_string, render_all, render_batch
from seelink.utils.file_utils import format_file_size
from seelink.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

SECRET_MASK = "********"


def _type_identifiers() -> List[str]:
    return [t.identifier for t in all_types()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="see-links",
        description="Render SEE file links as URLs, BBCode, HTML or Markdown",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--data-dir", type=Path, default=None, help="Settings and logs directory (default: ~/.see-links)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("types", help="List display types in picker order")

    render_p = sub.add_parser("render", help="Render one file link")
    render_p.add_argument("filename")
    render_p.add_argument("url", help="Direct URL of the file")
    render_p.add_argument("--page", default=None, help="Share page URL (defaults to the direct URL)")
    render_p.add_argument("--type", dest="display_type", choices=_type_identifiers(), default=None)
    render_p.add_argument("--all", action="store_true", help="Render every display type")

    batch_p = sub.add_parser("batch", help="Render a JSON array of upload responses")
    batch_p.add_argument("path", nargs="?", default=None, help="JSON file (default: stdin)")
    batch_p.add_argument("--type", dest="display_type", choices=_type_identifiers(), default=None)
    batch_p.add_argument(
        "--details",
        action="store_true",
        help="Also list size, dimensions and delete link per file on stderr",
    )

    config_p = sub.add_parser("config", help="Inspect or edit settings")
    config_sub = config_p.add_subparsers(dest="config_command", required=True)
    config_sub.add_parser("show", help="Show all settings (secrets masked)")
    get_p = config_sub.add_parser("get", help="Print one setting")
    get_p.add_argument("key")
    set_p = config_sub.add_parser("set", help="Store one setting")
    set_p.add_argument("key")
    set_p.add_argument("value")
    dt_p = config_sub.add_parser("set-display-type", help="Store the preferred display type")
    dt_p.add_argument("identifier", choices=_type_identifiers())
    key_p = config_sub.add_parser("set-api-key", help="Store the API key (encrypted)")
    key_p.add_argument("api_key")
    config_sub.add_parser("clear-api-key", help="Remove the stored API key")

    return parser


# ------------------------------------------------------------------
# Commands
# ------------------------------------------------------------------

def _cmd_types(core: CoreContext, args: argparse.Namespace) -> int:
    current = core.preferences.file_link_display_type
    for t in all_types():
        marker = "*" if t is current else " "
        kind = "markup" if t.is_markup else "url"
        print(f"{marker} {t.identifier:<20} {kind:<7} {t.label}")
    return 0


def _cmd_render(core: CoreContext, args: argparse.Namespace) -> int:
    inputs = FileLinkInputs.create(args.filename, args.url, args.page)
    if args.all:
        for t, text in render_all(inputs):
            print(f"{t.label}: {text}")
        return 0

    display_type = from_string(args.display_type) if args.display_type else None
    print(core.render_for(inputs, display_type))
    return 0


def _cmd_batch(core: CoreContext, args: argparse.Namespace) -> int:
    if args.path:
        raw = Path(args.path).read_text(encoding="utf-8")
    else:
        raw = sys.stdin.read()

    payload = json.loads(raw)
    if not isinstance(payload, list):
        raise ValueError("batch input must be a JSON array of upload objects")

    files = [FileLinkInputs.from_upload(item) for item in payload]
    if args.display_type:
        display_type = from_string(args.display_type)
    else:
        display_type = core.preferences.file_link_display_type

    logger.info(f"Rendering {len(files)} file(s) as {display_type.identifier}")
    text = render_batch(display_type, files)
    if text:
        print(text)

    if args.details:
        # stderr keeps stdout pasteable
        for f in files:
            print(_describe_file(f), file=sys.stderr)
    return 0


def _describe_file(inputs: FileLinkInputs) -> str:
    parts = [inputs.filename]
    if inputs.size is not None:
        parts.append(format_file_size(inputs.size))
    if inputs.dimensions:
        parts.append(inputs.dimensions)
    if inputs.delete_url:
        parts.append(f"delete: {inputs.delete_url}")
    return "  ".join(parts)


def _cmd_config(core: CoreContext, args: argparse.Namespace) -> int:
    prefs = core.preferences
    db = core.db
    command = args.config_command

    if command == "show":
        for key, encrypted in db.list_config_keys().items():
            value = SECRET_MASK if encrypted else db.get_config(key)
            print(f"{key} = {value}")
        return 0

    if command == "get":
        if db.is_encrypted(args.key):
            print(SECRET_MASK)
            return 0
        value = db.get_config(args.key)
        if value is None:
            print(f"Error: no setting named {args.key!r}", file=sys.stderr)
            return 1
        print(value)
        return 0

    if command == "set":
        if args.key == prefs.KEY_API_KEY:
            raise ConfigError("Use 'config set-api-key' to store the API key")
        if args.key == prefs.KEY_THEME_MODE:
            prefs.set_theme_mode(args.value)
        elif args.key == prefs.KEY_FILE_LINK_DISPLAY_TYPE:
            if args.value not in _type_identifiers():
                raise ConfigError(f"Unknown display type {args.value!r}")
            prefs.set_file_link_display_type(from_string(args.value))
        else:
            db.set_config(args.key, args.value)
        logger.info(f"Setting updated: {args.key}")
        return 0

    if command == "set-display-type":
        prefs.set_file_link_display_type(from_string(args.identifier))
        return 0

    if command == "set-api-key":
        prefs.save_api_key(args.api_key)
        logger.info("API key stored")
        return 0

    if command == "clear-api-key":
        prefs.clear_api_key()
        logger.info("API key cleared")
        return 0

    return 2


COMMANDS = {
    "types": _cmd_types,
    "render": _cmd_render,
    "batch": _cmd_batch,
    "config": _cmd_config,
}


def main(argv: Optional[Sequence[str]] = None, *, encryption_key: Optional[bytes] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        core = CoreContext(base_dir=args.data_dir, encryption_key=encryption_key)
    except (ConfigError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        setup_logging(
            core.db,
            log_dir=core.paths.logs,
            console_level=logging.getLevelName(args.log_level),
        )
        return COMMANDS[args.command](core, args)
    except (ConfigError, OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        core.close()


if __name__ == "__main__":
    sys.exit(main())
