#!/usr/bin/env python3
"""
substance-jsx CLI Entry Point

Translates a JSON tree description with a recording builder and prints
the resulting node tree or the builder call log.

Tree format:

    {"element": "label", "props": {"htmlFor": "name"}, "children": ["Name"]}
    {"component": "DatePicker", "props": {"value": "2024-01-01"}}
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from pydantic import ValidationError

from . import __version__
from .config import DEFAULT_CONFIG, RenameRule, TranslatorConfig
from .errors import TreeFormatError
from .jsx_runtime import Translator
from .recording import ComponentRef, RecordingBuilder
from .serialize import serialize_to_xml

logger = logging.getLogger(__name__)


def parse_rename(value: str) -> RenameRule:
    """Parse a SOURCE=TARGET rename option."""
    source, sep, target = value.partition("=")
    if not sep or not source or not target:
        raise argparse.ArgumentTypeError(f"Expected SOURCE=TARGET, got '{value}'")
    return RenameRule(source_key=source, target_key=target)


def build_tree(translator: Translator, tree: Any) -> Any:
    """Translate a tree description bottom-up, children before parents."""
    if tree is None or isinstance(tree, (str, int, float, bool)):
        return tree

    if not isinstance(tree, dict):
        raise TreeFormatError(f"Expected an object, got {type(tree).__name__}")

    if "component" in tree:
        element = ComponentRef(str(tree["component"]))
    elif "element" in tree:
        element = tree["element"]
        if not isinstance(element, str):
            raise TreeFormatError(f"Element name must be a string, got {element!r}")
    else:
        raise TreeFormatError("Tree node needs an 'element' or 'component' field")

    props = tree.get("props")
    if props is None:
        props = {}
    if not isinstance(props, dict):
        raise TreeFormatError(f"Props of {element!r} must be an object")

    children = tree.get("children")
    if children is None:
        children = []
    if not isinstance(children, list):
        raise TreeFormatError(f"Children of {element!r} must be a list")

    built_children = [build_tree(translator, child) for child in children]
    return translator(element, props, *built_children)


def load_tree(path: str) -> Any:
    """Read a JSON tree from a file path, or stdin for '-'."""
    try:
        if path == "-":
            return json.load(sys.stdin)
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise TreeFormatError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise TreeFormatError(f"{path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise TreeFormatError(f"Invalid JSON in {path}: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Translate JSX-style JSON trees into builder calls",
        prog="substance-jsx"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON tree file (default: stdin)"
    )

    parser.add_argument(
        "--format", "-f",
        choices=["xml", "calls"],
        default="xml",
        help="Print the built tree as XML or the builder calls as NDJSON (default: xml)"
    )

    parser.add_argument(
        "--rename",
        action="append",
        type=parse_rename,
        default=[],
        metavar="SOURCE=TARGET",
        help="Extra prop rename rule, may be repeated"
    )

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        config = DEFAULT_CONFIG.with_renames(*args.rename) if args.rename else DEFAULT_CONFIG
    except ValidationError as e:
        print(f"Error: Invalid rename rules: {e}", file=sys.stderr)
        return 1

    builder = RecordingBuilder()
    translator = Translator(builder, config)

    try:
        root = build_tree(translator, load_tree(args.input))
    except TreeFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Built %d node(s) with %d builder call(s)", len(builder.nodes), len(builder.calls))

    if args.format == "calls":
        for call in builder.calls:
            print(json.dumps(call.to_dict(), separators=(',', ':')))
    else:
        print(serialize_to_xml(root))

    return 0


if __name__ == "__main__":
    sys.exit(main())
