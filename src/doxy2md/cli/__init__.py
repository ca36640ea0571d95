"""Command-line interface for the doxy2md converter.

The command reads a Doxygen XML output folder and writes one Markdown/MDX
page per compound.

Environment Variable Support
----------------------------
``DOXY2MD_CONFIG`` names a configuration file used when ``--config`` is
not given. Without either, ``.doxy2md.yaml`` (or ``.yml``, ``.toml``,
``.json``) or a ``[tool.doxy2md]`` table in ``pyproject.toml`` is looked
up from the current directory upwards. Command line flags always
override configuration values.

Examples
--------
Basic conversion::

    $ doxy2md build/xml -o website/docs/api

Pages served below another URL::

    $ doxy2md build/xml -o docs/reference --base-url /reference/

Show TODO placeholders and progress::

    $ doxy2md build/xml -o docs/api --suggest-todo --verbose

"""

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path
from typing import Any, Optional

from doxy2md.cli.config import load_config_with_priority, merge_configs
from doxy2md.constants import RENDER_MODES
from doxy2md.exceptions import (
    ConfigError,
    Doxy2MdError,
    FileError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from doxy2md.logging_utils import configure_logging, resolve_log_level
from doxy2md.options import ParseOptions, RenderOptions
from doxy2md.parsers.session import ParseSession
from doxy2md.renderers.page import PageRenderer
from doxy2md.renderers.workspace import RenderWorkspace

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

IMAGES_FOLDER_NAME = "images"

# Command line and config file spellings of the option field names.
_OPTION_ALIASES = {
    "base_url": "page_base_url",
    "suggest_todo": "suggest_todo_descriptions",
    "extension": "page_file_extension",
}

__all__ = ["create_parser", "get_exit_code_for_exception", "main"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the ``doxy2md`` command."""
    parser = argparse.ArgumentParser(
        prog="doxy2md",
        description="Convert Doxygen XML output into Markdown/MDX reference pages.",
    )
    parser.add_argument("input_folder", metavar="INPUT_FOLDER", help="Folder holding the Doxygen XML output")
    parser.add_argument("-o", "--output", dest="output_folder", required=True, help="Folder receiving the pages")
    parser.add_argument("--mode", choices=list(RENDER_MODES), default=None, help="Output mode (default: markdown)")
    parser.add_argument("--base-url", dest="base_url", default=None, help="URL prefix of the pages (default: /api/)")
    parser.add_argument(
        "--suggest-todo",
        dest="suggest_todo",
        action="store_true",
        default=None,
        help="Show TODO placeholders for compounds without descriptions",
    )
    parser.add_argument(
        "--no-front-matter",
        dest="front_matter",
        action="store_false",
        default=None,
        help="Do not prepend YAML front matter to the pages",
    )
    parser.add_argument("--config", default=None, help="Configuration file (YAML, JSON or TOML)")
    parser.add_argument("--verbose", action="store_true", help="Log progress at info level")
    parser.add_argument("--debug", action="store_true", help="Log internals at debug level, with timestamps")
    parser.add_argument("--log-file", dest="log_file", default=None, help="Also write log output to this file")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code."""
    if isinstance(exception, (ValidationError, ConfigError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _normalize_config(config: dict[str, Any]) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    for key, value in config.items():
        name = key.replace("-", "_")
        normalized[_OPTION_ALIASES.get(name, name)] = value
    return normalized


def build_render_options(parsed_args: argparse.Namespace, config: dict[str, Any]) -> RenderOptions:
    """Combine configuration values and command line flags into render options.

    Raises
    ------
    ValidationError
        If a resulting option value is invalid

    """
    overrides: dict[str, Any] = {"verbose": parsed_args.verbose, "debug": parsed_args.debug}
    for name in ("mode", "base_url", "suggest_todo", "front_matter"):
        value = getattr(parsed_args, name)
        if value is not None:
            overrides[name] = value

    merged = merge_configs(_normalize_config(config), _normalize_config(overrides))
    try:
        return RenderOptions.from_mapping(merged)
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def copy_images(session: ParseSession, input_folder: Path, output_folder: Path) -> int:
    """Copy the HTML images referenced by the descriptions next to the pages.

    Doxygen copies the images into its XML output folder; missing files
    are reported and skipped.
    """
    names = sorted({image.name for image in session.xml.images if image.name and "://" not in image.name})
    if not names:
        return 0

    images_folder = output_folder / IMAGES_FOLDER_NAME
    copied = 0
    for name in names:
        source = input_folder / name
        if not source.is_file():
            logger.warning("Image %s not found in %s", name, input_folder)
            continue
        target = images_folder / name
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
        except OSError as e:
            raise FileError(f"Cannot copy image {name}: {e}", file_path=str(target), original_error=e) from e
        copied += 1
    logger.info("%d images copied", copied)
    return copied


def run(parsed_args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Parse the XML folder and write the pages."""
    render_options = build_render_options(parsed_args, config)
    input_folder = Path(parsed_args.input_folder)
    output_folder = Path(parsed_args.output_folder)

    session = ParseSession(ParseOptions(input_folder=str(input_folder))).parse()
    workspace = RenderWorkspace.from_session(session, render_options)
    written = PageRenderer(workspace).write_pages(output_folder)
    copy_images(session, input_folder, output_folder)

    logger.info("%d pages written to %s", len(written), output_folder)
    return EXIT_SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    """Execute the ``doxy2md`` command."""
    parser = create_parser()
    parsed_args = parser.parse_args(argv)

    configure_logging(
        resolve_log_level(parsed_args.verbose, parsed_args.debug),
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.debug,
    )

    try:
        config = load_config_with_priority(parsed_args.config, os.environ.get("DOXY2MD_CONFIG"))
        return run(parsed_args, config)
    except Doxy2MdError as e:
        logger.debug("Conversion aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)


if __name__ == "__main__":
    sys.exit(main())
