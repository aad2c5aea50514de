"""
Tokenizer for the eos "monitoring format" (``-m``) output.

Each line of monitoring output describes one entity as whitespace separated
``key=value`` tokens. Values may be wrapped in single or double quotes to
embed whitespace, e.g.::

    hostport=fst01.example.org:1095 status=online stat.errmsg="disk full" nofs=12

Quotes toggle a quoted span and are not part of the resulting token. Tokens
without an ``=`` separator are skipped and logged.
"""

import logging
from typing import Dict, Iterator, List, Mapping

logger = logging.getLogger(__name__)

QUOTE_CHARS = "\"'"


def split_tokens(line: str) -> List[str]:
    """Split ``line`` on whitespace that is not inside a quoted span.

    A quoted span opened by one quote character is closed only by the same
    character. An unterminated span runs to the end of the line.

    Examples:
        >>> split_tokens('a=1 b="x y" c=\\'it"s\\'')
        ['a=1', 'b=x y', 'c=it"s']
    """
    tokens: List[str] = []
    current: List[str] = []
    in_token = False
    quote = None

    for char in line:
        if quote is not None:
            if char == quote:
                quote = None
            else:
                current.append(char)
            continue

        if char in QUOTE_CHARS:
            quote = char
            in_token = True
        elif char.isspace():
            if in_token:
                tokens.append("".join(current))
                current = []
                in_token = False
        else:
            current.append(char)
            in_token = True

    if in_token:
        tokens.append("".join(current))
    return tokens


def tokenize(line: str) -> Dict[str, str]:
    """Convert one monitoring-format line into a mapping.

    Each token is split on its first ``=``. When a key repeats, the later
    value wins. Tokens without ``=`` are skipped with a warning.

    Args:
        line: A single line of ``-m`` output.

    Returns:
        Mapping from key to value in order of first appearance.
    """
    mapping: Dict[str, str] = {}
    for token in split_tokens(line):
        key, sep, value = token.partition("=")
        if not sep:
            logger.warning(f"Skipping malformed monitoring token without '=': '{token}'")
            continue
        mapping[key] = value
    return mapping


def split_lines(raw: str) -> Iterator[str]:
    """Yield the non-blank lines of raw tool output, in order.

    Only a line feed ends a line. Form feeds and other Unicode line
    boundaries stay part of the line. A trailing carriage return is dropped.
    """
    for line in raw.split("\n"):
        line = line.rstrip("\r")
        if line.strip():
            yield line


def _quote(text: str) -> str:
    if not any(char.isspace() for char in text) and not any(q in text for q in QUOTE_CHARS):
        return text
    for quote in QUOTE_CHARS:
        if quote not in text:
            return f"{quote}{text}{quote}"
    raise ValueError(f"Cannot quote a value containing both quote characters: {text!r}")


def format_line(mapping: Mapping[str, str]) -> str:
    """Render a mapping as a monitoring-format line.

    This is the inverse of :func:`tokenize` for keys without ``=``.

    Raises:
        ValueError: If a key contains ``=`` or a value holds both quote
            characters.
    """
    tokens = []
    for key, value in mapping.items():
        if "=" in key:
            raise ValueError(f"Monitoring keys cannot contain '=': {key!r}")
        tokens.append(f"{_quote(key)}={_quote(value)}")
    return " ".join(tokens)
