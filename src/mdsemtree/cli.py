"""Command line entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import SemtreeOptions
from .hast import hast_to_dict, to_hast, to_html
from .nodes import node_to_dict
from .parser.markdown import parse_markdown
from .semtree.builder import build_semantic_tree
from .semtree.lookup import create_subtree
from .sentence.annotate import annotate_sentences
from .sentence.splitter import split_sentences

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdsemtree",
        description="Sentence segmentation and semantic trees for markdown",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Parse a markdown file and output HTML")
    parse_cmd.add_argument("file", help="Path to the markdown file")

    ast_cmd = commands.add_parser("ast", help="Show the tree of a markdown file as JSON")
    ast_cmd.add_argument("file", help="Path to the markdown file")
    ast_cmd.add_argument("--html", action="store_true", help="Show the annotated HTML tree instead")

    semtree_cmd = commands.add_parser("semtree", help="Show the semantic heading tree as JSON")
    semtree_cmd.add_argument("file", help="Path to the markdown file")
    semtree_cmd.add_argument("--heading", default=None, help="Only show the subtree under this heading")
    semtree_cmd.add_argument(
        "--no-preserve-lists",
        action="store_true",
        help="Copy lists like any other block instead of as atomic units",
    )
    return parser


def _read(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def parse_command(args: argparse.Namespace) -> str:
    tree = split_sentences(parse_markdown(_read(args.file)))
    return to_html(annotate_sentences(to_hast(tree)))


def ast_command(args: argparse.Namespace) -> str:
    tree = split_sentences(parse_markdown(_read(args.file)))
    if args.html:
        return json.dumps(hast_to_dict(annotate_sentences(to_hast(tree))), indent=2)
    return json.dumps(node_to_dict(tree), indent=2)


def semtree_command(args: argparse.Namespace) -> str:
    options = SemtreeOptions.from_env()
    if args.no_preserve_lists:
        options.preserve_list_structure = False
    tree = build_semantic_tree(parse_markdown(_read(args.file)), options)
    if args.heading is not None:
        tree = create_subtree(tree, args.heading)
        if not tree.children:
            logger.warning("No heading matched %r", args.heading)
    return json.dumps(node_to_dict(tree), indent=2)


COMMANDS = {
    "parse": parse_command,
    "ast": ast_command,
    "semtree": semtree_command,
}


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        output = COMMANDS[args.command](args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error processing file: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
