"""Command-line front door for notefind.

Parses CLI options, resolves the workspace path and search settings.
Then dispatches into listing, search, document display, trash, or config handling.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from itertools import groupby
from pathlib import Path

from . import config
from .errors import FileOpError
from .file_ops import read_file_text
from .file_tree_model import DirectoryEntry, list_directory
from .highlight import highlight_document, mark_match_spans, sanitize_terminal_text
from .search import SearchResult, search_by_name, search_content
from .trash import empty_trash, list_trash, move_to_trash, restore_from_trash


def _extension(value: str) -> str:
    """argparse type for document extensions given with or without a dot."""
    cleaned = value.strip().lstrip(".")
    if not cleaned:
        raise argparse.ArgumentTypeError("extension must not be empty")
    return cleaned


def _boolean(value: str) -> bool:
    """argparse-style parser for ``true``/``false`` style config values."""
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def _style(value: str) -> str:
    cleaned = value.strip()
    if not cleaned:
        raise argparse.ArgumentTypeError("style must not be empty")
    return cleaned


CONFIG_SETTERS = {
    "document_extension": (_extension, config.save_document_extension),
    "case_sensitive": (_boolean, config.save_case_sensitive),
    "use_regex": (_boolean, config.save_use_regex),
    "style": (_style, config.save_style),
}


def _format_timestamp(value_ms: int | None) -> str:
    if value_ms is None:
        return "-"
    return datetime.fromtimestamp(value_ms / 1000).strftime("%Y-%m-%d %H:%M")


def format_directory_entry(entry: DirectoryEntry) -> str:
    metadata = entry.metadata
    size = "-" if metadata is None or entry.is_directory else str(metadata.size_bytes)
    modified = _format_timestamp(None if metadata is None else metadata.modified_ms)
    name = sanitize_terminal_text(entry.name) + ("/" if entry.is_directory else "")
    return f"{size:>10}  {modified:<16}  {name}"


def format_search_result(result: SearchResult, no_color: bool) -> list[str]:
    """Render one result as a header plus one row per matching line."""
    rows = [f"{sanitize_terminal_text(result.path)} ({len(result.matches)})"]
    for line_number, group in groupby(result.matches, key=lambda match: match.line_number):
        matches = list(group)
        spans = [(match.match_start, match.match_end) for match in matches]
        rows.append(f"  {line_number}: {mark_match_spans(matches[0].line_content, spans, no_color)}")
    return rows


def _print_json(payload: object) -> None:
    sys.stdout.write(json.dumps(payload, indent=2, ensure_ascii=False) + "\n")


def _cmd_ls(args: argparse.Namespace) -> None:
    entries = list_directory(args.path)
    if args.json:
        _print_json([entry.to_dict() for entry in entries])
        return
    for entry in entries:
        sys.stdout.write(format_directory_entry(entry) + "\n")


def _cmd_find(args: argparse.Namespace) -> None:
    paths = search_by_name(args.root, args.ext, args.query)
    if args.sort:
        paths.sort(key=str.lower)
    if args.json:
        _print_json(paths)
        return
    for path in paths:
        sys.stdout.write(sanitize_terminal_text(path) + "\n")


def _cmd_grep(args: argparse.Namespace) -> None:
    case_sensitive = args.case_sensitive if args.case_sensitive is not None else config.load_case_sensitive()
    use_regex = args.regex if args.regex is not None else config.load_use_regex()
    results = search_content(args.root, args.ext, args.query, case_sensitive=case_sensitive, use_regex=use_regex)
    if args.json:
        _print_json([result.to_dict() for result in results])
        return
    for result in results:
        sys.stdout.write("\n".join(format_search_result(result, args.no_color)) + "\n")


def _cmd_show(args: argparse.Namespace) -> None:
    source = read_file_text(args.path)
    style = args.style or config.load_style()
    sys.stdout.write(highlight_document(source, args.path, style=style, no_color=args.no_color))


def _cmd_trash(args: argparse.Namespace) -> None:
    project = args.project
    if args.trash_command == "move":
        sys.stdout.write(move_to_trash(args.path, project) + "\n")
    elif args.trash_command == "restore":
        sys.stdout.write(restore_from_trash(args.path, project, args.destination) + "\n")
    elif args.trash_command == "list":
        entries = list_trash(project)
        if args.json:
            _print_json([entry.to_dict() for entry in entries])
            return
        for entry in entries:
            sys.stdout.write(format_directory_entry(entry) + "\n")
    elif args.trash_command == "empty":
        failed = empty_trash(project)
        if failed:
            raise SystemExit("Could not delete: " + ", ".join(failed))


def _effective_config() -> dict[str, object]:
    return {
        "document_extension": config.load_document_extension(),
        "case_sensitive": config.load_case_sensitive(),
        "use_regex": config.load_use_regex(),
        "style": config.load_style(),
    }


def _cmd_config(args: argparse.Namespace) -> None:
    if args.config_command == "set":
        parse_value, save_value = CONFIG_SETTERS[args.key]
        try:
            value = parse_value(args.value)
        except argparse.ArgumentTypeError as exc:
            raise SystemExit(f"{args.key}: {exc}") from exc
        save_value(value)
    values = _effective_config()
    if args.json:
        _print_json(values)
        return
    for key, value in values.items():
        rendered = str(value).lower() if isinstance(value, bool) else value
        sys.stdout.write(f"{key} = {rendered}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List, search, and manage a workspace of markdown notes.")
    parser.add_argument("--ext", type=_extension, default=None, help="Document extension (default: from config, else md).")
    parser.add_argument("--json", action="store_true", help="Print structured JSON instead of text.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped files and other soft failures to stderr.")
    commands = parser.add_subparsers(dest="command", required=True)

    ls_parser = commands.add_parser("ls", help="List one directory level, directories first.")
    ls_parser.add_argument("path", nargs="?", default=".", help="Directory to list. Defaults to current directory.")
    ls_parser.set_defaults(handler=_cmd_ls)

    find_parser = commands.add_parser("find", help="Find documents whose file name contains QUERY.")
    find_parser.add_argument("root", help="Workspace root.")
    find_parser.add_argument("query", nargs="?", default="", help="Case-insensitive name fragment.")
    find_parser.add_argument("--sort", action="store_true", help="Sort paths instead of keeping walk order.")
    find_parser.set_defaults(handler=_cmd_find)

    grep_parser = commands.add_parser("grep", help="Search document contents, most matches first.")
    grep_parser.add_argument("root", help="Workspace root.")
    grep_parser.add_argument("query", help="Text or pattern to search for.")
    grep_parser.add_argument(
        "-s", "--case-sensitive", dest="case_sensitive", action="store_true", default=None, help="Match case exactly."
    )
    grep_parser.add_argument("-i", "--ignore-case", dest="case_sensitive", action="store_false", help="Ignore case.")
    grep_parser.add_argument("-e", "--regex", dest="regex", action="store_true", default=None, help="Treat QUERY as a regular expression.")
    grep_parser.add_argument("-F", "--fixed-strings", dest="regex", action="store_false", help="Treat QUERY as plain text.")
    grep_parser.set_defaults(handler=_cmd_grep)

    show_parser = commands.add_parser("show", help="Print a document with syntax highlighting.")
    show_parser.add_argument("path", help="Document to print.")
    show_parser.add_argument("--style", default=None, help="Pygments style name.")
    show_parser.set_defaults(handler=_cmd_show)

    trash_parser = commands.add_parser("trash", help="Manage the workspace trash folder.")
    trash_parser.add_argument("--project", default=".", help="Workspace root holding the trash folder.")
    trash_commands = trash_parser.add_subparsers(dest="trash_command", required=True)
    move_parser = trash_commands.add_parser("move", help="Move PATH into the trash.")
    move_parser.add_argument("path")
    restore_parser = trash_commands.add_parser("restore", help="Restore a trashed PATH.")
    restore_parser.add_argument("path")
    restore_parser.add_argument("--destination", default=None, help="Target folder (default: workspace root).")
    trash_commands.add_parser("list", help="List trash contents.")
    trash_commands.add_parser("empty", help="Permanently delete trash contents.")
    trash_parser.set_defaults(handler=_cmd_trash)

    config_parser = commands.add_parser("config", help="Show or change persisted defaults.")
    config_commands = config_parser.add_subparsers(dest="config_command", required=True)
    config_commands.add_parser("show", help="Print effective config values.")
    set_parser = config_commands.add_parser("set", help="Persist one config value.")
    set_parser.add_argument("key", choices=sorted(CONFIG_SETTERS))
    set_parser.add_argument("value")
    config_parser.set_defaults(handler=_cmd_config)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one notefind command.

    Filesystem failures exit with their message instead of a traceback.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.ext is None:
        args.ext = config.load_document_extension()
    if not args.no_color and not sys.stdout.isatty():
        args.no_color = True

    try:
        args.handler(args)
    except FileOpError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
