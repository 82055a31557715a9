#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from src.jtl.base import JTLError
from src.jtl.config import load_jtl_config
from src.jtl.env import extract_env
from src.jtl.parser import parse
from src.jtl.runner import ConversionResult, convert_file, convert_tree
from src.jtl.serializer import FORMAT_JSON, SUPPORTED_FORMATS, render, stringify_env


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"indent must be non-negative; got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Read JTL markup documents and emit their element records.",
        prog="jtl",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit debug logging for section transitions and skipped declarations.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    show = commands.add_parser("show", help="Print the element records of one document.")
    show.add_argument("path", type=Path, help="JTL document to parse.")
    show.add_argument("--format", choices=list(SUPPORTED_FORMATS), default=FORMAT_JSON)
    show.add_argument(
        "--indent",
        type=_non_negative_int,
        default=None,
        help="Pretty-print with the given indent (default: compact).",
    )
    show.set_defaults(func=show_cli)

    env = commands.add_parser("env", help="Print the variables declared in the ENV section.")
    env.add_argument("path", type=Path, help="JTL document to inspect.")
    env.add_argument("--indent", type=_non_negative_int, default=None)
    env.set_defaults(func=env_cli)

    convert = commands.add_parser("convert", help="Write one artifact per JTL file.")
    convert.add_argument("paths", nargs="+", type=Path, help="JTL files to convert.")
    _add_output_options(convert)
    convert.set_defaults(func=convert_cli)

    scan = commands.add_parser("scan", help="Convert every JTL file under a directory.")
    scan.add_argument("root", type=Path, nargs="?", default=Path("."))
    scan.add_argument(
        "--recursive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Descend into subdirectories (default controlled by configuration).",
    )
    scan.add_argument("--limit", type=int, default=None, help="Convert at most this many files.")
    _add_output_options(scan)
    scan.set_defaults(func=scan_cli)

    return parser


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--output-root", type=Path, help="Directory for artifacts.")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a JTL YAML config (default: config/jtl.yaml when present).",
    )


def show_cli(args: argparse.Namespace) -> int:
    try:
        records = parse(args.path.expanduser().read_text(encoding="utf-8"))
        print(render(records, fmt=args.format, indent=args.indent))
    except (OSError, UnicodeDecodeError, JTLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def env_cli(args: argparse.Namespace) -> int:
    try:
        env = extract_env(args.path.expanduser().read_text(encoding="utf-8"))
        print(stringify_env(env, indent=args.indent))
    except (OSError, UnicodeDecodeError, JTLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def convert_cli(args: argparse.Namespace) -> int:
    config = load_jtl_config(args.config)
    output_root = (args.output_root or config.output_root).expanduser().resolve()
    results = [
        convert_file(path, output_root, fmt=config.format, indent=config.indent)
        for path in args.paths
    ]
    return _report(results)


def scan_cli(args: argparse.Namespace) -> int:
    config = load_jtl_config(args.config)
    results = convert_tree(
        args.root,
        args.output_root or config.output_root,
        suffixes=config.suffixes,
        recursive=config.recursive if args.recursive is None else args.recursive,
        fmt=config.format,
        indent=config.indent,
        limit=args.limit,
    )
    if not results:
        print(f"No JTL files found under {args.root.expanduser().resolve()}")
    return _report(results)


def _report(results: list[ConversionResult]) -> int:
    for result in results:
        if result.ok:
            print(f"[{result.status}] {result.source}: {result.record_count} record(s) -> {result.artifact}")
        else:
            print(f"[error] {result.source}: {result.error}", file=sys.stderr)
    return 0 if all(result.ok for result in results) else 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
