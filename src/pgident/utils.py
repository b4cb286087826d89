from __future__ import annotations

# PostgreSQL truncates identifiers to NAMEDATALEN - 1 bytes; longer names are
# quoted instead of being emitted bare.
NAMEDATALEN = 64
MAX_IDENT_BYTES = NAMEDATALEN - 1

QUOTE = '"'


def _is_first_char(c: str) -> bool:
    return c.islower() or c == "_"


def _is_subsequent_char(c: str) -> bool:
    return c.islower() or c.isdecimal() or c in ("_", "$")


def is_ident_compatible(raw: str) -> bool:
    """
    Return True when `raw` can be emitted as an unquoted PostgreSQL identifier.

    Identifiers start with a letter or underscore and continue with letters,
    digits, underscores or dollar signs. Unquoted names are folded to lower
    case by the server, so only lower-case letters are accepted here.
    Lone surrogates (e.g. undecodable argv bytes) are measured as-is and
    always end up on the quoting path.
    """
    if not raw or len(raw.encode("utf-8", "surrogatepass")) > MAX_IDENT_BYTES:
        return False
    if not _is_first_char(raw[0]):
        return False
    return all(_is_subsequent_char(c) for c in raw[1:])


def escape_quotes(raw: str) -> str:
    return raw.replace(QUOTE, QUOTE * 2)


__all__ = ["MAX_IDENT_BYTES", "NAMEDATALEN", "escape_quotes", "is_ident_compatible"]
