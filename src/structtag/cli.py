#!/usr/bin/env python3
import argparse
import sys
from typing import List, Optional

from loguru import logger

from .config import get_cli_log_level
from .display import ConsoleDisplay
from .errors import StructTagError
from .grammar import parse
from .schema import Tag


def configure_logging(verbose: bool = False) -> None:
    """Route structtag's log records to stderr at the CLI log level."""
    logger.remove()
    logger.add(sys.stderr, level=get_cli_log_level(verbose))
    logger.enable("structtag")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structtag",
        description="Inspect and edit struct tag strings such as 'json:\"foo,omitempty\"'.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug information to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Show the tags of a tag string")
    parse_cmd.add_argument("tag", help="The tag string")

    get_cmd = subparsers.add_parser("get", help="Show the tag stored under a key")
    get_cmd.add_argument("tag", help="The tag string")
    get_cmd.add_argument("key", help="The key to look up")
    get_cmd.add_argument(
        "--value", action="store_true", help="Only print the value of the tag"
    )

    set_cmd = subparsers.add_parser("set", help="Replace or append a tag")
    set_cmd.add_argument("tag", help="The tag string")
    set_cmd.add_argument("key", help="The key of the tag")
    set_cmd.add_argument("name", help="The name of the tag")
    set_cmd.add_argument("options", nargs="*", help="The options of the tag")

    delete_cmd = subparsers.add_parser("delete", help="Remove tags by key")
    delete_cmd.add_argument("tag", help="The tag string")
    delete_cmd.add_argument("keys", nargs="+", help="The keys to remove")

    add_cmd = subparsers.add_parser("add-options", help="Add options to a tag")
    add_cmd.add_argument("tag", help="The tag string")
    add_cmd.add_argument("key", help="The key of the tag")
    add_cmd.add_argument("options", nargs="+", help="The options to add")

    del_opt_cmd = subparsers.add_parser(
        "delete-options", help="Remove options from a tag"
    )
    del_opt_cmd.add_argument("tag", help="The tag string")
    del_opt_cmd.add_argument("key", help="The key of the tag")
    del_opt_cmd.add_argument("options", nargs="+", help="The options to remove")

    sort_cmd = subparsers.add_parser("sort", help="Sort the tags by key")
    sort_cmd.add_argument("tag", help="The tag string")

    return parser


def run(args: argparse.Namespace) -> None:
    tags = parse(args.tag)
    logger.debug(f"Parsed {len(tags)} tag(s) with keys {tags.keys()}")

    if args.command == "parse":
        ConsoleDisplay.display_tags(tags)
        return

    if args.command == "get":
        ConsoleDisplay.display_tag(tags.get(args.key), value_only=args.value)
        return

    if args.command == "set":
        tags.set(Tag(key=args.key, name=args.name, options=args.options))
    elif args.command == "delete":
        tags.delete(*args.keys)
    elif args.command == "add-options":
        tags.add_options(args.key, *args.options)
    elif args.command == "delete-options":
        tags.delete_options(args.key, *args.options)
    elif args.command == "sort":
        tags.sort()

    ConsoleDisplay.display_tag_string(tags)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        run(args)
    except StructTagError as e:
        logger.debug(f"{args.command} failed with {e.code.value}")
        ConsoleDisplay.display_error(e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
