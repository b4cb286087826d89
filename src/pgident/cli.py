from __future__ import annotations

import argparse
import logging
import sys

from .compose import format_query
from .config import Settings, get_settings
from .exceptions import PgIdentError
from .ident import PgIdent
from .name import PgName, Single

logger = logging.getLogger(__name__)


def configure_logging(verbosity: int) -> None:
    level = logging.INFO if verbosity == 0 else logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")


def _reconfigure_stdout() -> None:
    # undecodable argv bytes arrive as lone surrogates; write them back out as bytes
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def _split_mode(args: argparse.Namespace, settings: Settings) -> bool:
    split = getattr(args, "split", None)
    return settings.split_dots if split is None else split


def _raw_parts(parts: list[str], *, split: bool) -> list[str]:
    if not split:
        return parts
    return [piece for part in parts for piece in part.split(".")]


def _build_name(parts: list[str], *, split: bool) -> PgName[str]:
    return PgName.new_ns(_raw_parts(parts, split=split))


def cmd_ident(args: argparse.Namespace, settings: Settings) -> None:
    for raw in args.raw:
        ident = PgIdent.new(raw)
        logger.debug(
            "Formatted identifier",
            extra={"action": "ident", "quoted": ident.is_quoted},
        )
        print(ident)


def cmd_name(args: argparse.Namespace, settings: Settings) -> None:
    raw_parts = _raw_parts(args.parts, split=_split_mode(args, settings))
    name = PgName.new_ns(raw_parts)
    schema = settings.default_schema if args.schema is None else args.schema
    if schema and isinstance(name, Single):
        name = PgName.pair(schema, raw_parts[0])
    logger.debug(
        "Formatted name",
        extra={"action": "name", "parts": len(name.parts)},
    )
    print(name)


def cmd_rename(args: argparse.Namespace, settings: Settings) -> None:
    name = _build_name(args.parts, split=_split_mode(args, settings))
    renamed = name.with_leaf(args.leaf)
    logger.debug(
        "Replaced name leaf",
        extra={
            "action": "rename",
            "old_leaf": str(name.leaf),
            "new_leaf": str(renamed.leaf),
        },
    )
    print(renamed)


def _parse_binding(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise SystemExit(f"Use KEY=NAME syntax for bindings (got {raw!r})")
    return key, value


def cmd_format(args: argparse.Namespace, settings: Settings) -> None:
    split = _split_mode(args, settings)
    names = {}
    for binding in args.bindings:
        key, value = _parse_binding(binding)
        names[key] = _build_name([value], split=split)
    query = format_query(args.template, **names)
    logger.debug(
        "Formatted query",
        extra={"action": "format", "bindings": sorted(names)},
    )
    print(query.as_string(None))


def _add_split_flags(sp: argparse.ArgumentParser) -> None:
    sp.add_argument(
        "--split",
        dest="split",
        action="store_true",
        default=None,
        help="Split arguments on dots. Defaults to PGIDENT_SPLIT_DOTS.",
    )
    sp.add_argument("--no-split", dest="split", action="store_false", default=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Quote PostgreSQL identifiers and dotted names."
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase log verbosity"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("ident", help="Format each argument as one identifier")
    sp.add_argument("raw", nargs="+")
    sp.set_defaults(func=cmd_ident)

    sp = sub.add_parser("name", help="Format the arguments as one dotted name")
    sp.add_argument("parts", nargs="+")
    sp.add_argument(
        "--schema",
        default=None,
        help="Namespace for single-part names. Defaults to PGIDENT_DEFAULT_SCHEMA.",
    )
    _add_split_flags(sp)
    sp.set_defaults(func=cmd_name)

    sp = sub.add_parser("rename", help="Replace the last part of a dotted name")
    sp.add_argument("parts", nargs="+")
    sp.add_argument("--leaf", required=True, help="New last component")
    _add_split_flags(sp)
    sp.set_defaults(func=cmd_rename)

    sp = sub.add_parser("format", help="Substitute names into a query template")
    sp.add_argument("template", help="Query with {placeholders}")
    sp.add_argument("bindings", nargs="*", metavar="KEY=NAME")
    _add_split_flags(sp)
    sp.set_defaults(func=cmd_format)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    _reconfigure_stdout()
    try:
        settings = get_settings()
        args.func(args, settings)
    except PgIdentError as exc:
        logger.error(
            "pgident error", extra={"action": args.command, "error": str(exc)}
        )
        raise SystemExit(f"error: {exc}") from exc


__all__ = ["build_parser", "main"]
