"""Helpers shared by the text-based front ends."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from structcheck.domain.exceptions.extraction import ExtractionError

if TYPE_CHECKING:
    from pathlib import Path

_TOKEN = re.compile(r'//|/\*|"""|"|\'')
_BLOCK_EDGE = re.compile(r"/\*|\*/")
_NOT_NEWLINE = re.compile(r"[^\n]")

# One dotted path segment: identifier or `backticked name`
SEGMENT = r"(?:`[^`\n]+`|\w+)"
DOTTED = rf"{SEGMENT}(?:[ \t]*\.[ \t]*{SEGMENT})*"


def read_source(path: Path) -> str:
    """Read source file as UTF-8.

    FAIL-FIRST: raises ExtractionError on any file error.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ExtractionError(path, "file not found") from e
    except PermissionError as e:
        raise ExtractionError(path, "permission denied") from e
    except UnicodeDecodeError as e:
        raise ExtractionError(path, f"encoding error: {e}") from e
    except OSError as e:
        raise ExtractionError(path, f"read error: {e}") from e


def mask_comments(
    source: str,
    *,
    nested_comments: bool = False,
    string_templates: bool = False,
) -> str:
    """Blank out comments and string literals, keeping every newline.

    Offsets and line numbers of the masked text match the original,
    so regex matches on it can be mapped back by position.

    Args:
        source: C-family source text (Kotlin, Java)
        nested_comments: `/* /* */ */` nests (Kotlin) instead of ending
            at the first `*/` (Java)
        string_templates: `${...}` inside a string literal is code that may
            hold its own quotes (Kotlin)

    Returns:
        Text of equal length with comments/strings replaced by spaces
    """
    parts: list[str] = []
    pos = 0
    end_of_text = len(source)

    while True:
        match = _TOKEN.search(source, pos)
        if match is None:
            parts.append(source[pos:])
            break

        start = match.start()
        parts.append(source[pos:start])
        token = match.group()

        if token == "//":
            end = source.find("\n", start)
            end = end_of_text if end == -1 else end
        elif token == "/*":
            end = _block_comment_end(source, start, nested_comments)
        elif token == '"""':
            end = _raw_string_end(source, start, string_templates)
        else:
            end = _quoted_end(source, start, token, string_templates)

        parts.append(_NOT_NEWLINE.sub(" ", source[start:end]))
        pos = end

    return "".join(parts)


def line_of(text: str, offset: int) -> int:
    """1-based line number of a character offset."""
    return text.count("\n", 0, offset) + 1


def normalize_dotted(raw: str) -> str:
    """Drop whitespace and backticks from a dotted path."""
    return "".join(raw.split()).replace("`", "")


def _block_comment_end(source: str, start: int, nested: bool) -> int:
    if not nested:
        end = source.find("*/", start + 2)
        return len(source) if end == -1 else end + 2

    depth = 0
    for edge in _BLOCK_EDGE.finditer(source, start):
        depth += 1 if edge.group() == "/*" else -1
        if depth == 0:
            return edge.end()
    return len(source)


def _raw_string_end(source: str, start: int, templates: bool) -> int:
    index = start + 3
    while index < len(source):
        if source.startswith('"""', index):
            return index + 3
        if templates and source.startswith("${", index):
            index = _template_end(source, index + 2)
            continue
        index += 1
    return len(source)


def _quoted_end(source: str, start: int, quote: str, templates: bool = False) -> int:
    index = start + 1
    while index < len(source):
        char = source[index]
        if char == "\\":
            index += 2
            continue
        if templates and quote == '"' and source.startswith("${", index):
            index = _template_end(source, index + 2)
            continue
        if char == quote:
            return index + 1
        if char == "\n":
            return index
        index += 1
    return len(source)


def _template_end(source: str, index: int) -> int:
    """Offset past the `}` closing a `${` that ends just before index."""
    depth = 1
    while index < len(source):
        if source.startswith('"""', index):
            index = _raw_string_end(source, index, True)
            continue
        char = source[index]
        if char in "\"'":
            index = _quoted_end(source, index, char, True)
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index + 1
        index += 1
    return len(source)
