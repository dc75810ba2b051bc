# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Heuristic synopsis and example extraction from reStructuredText sources.

The scanner works on the file's lines and never parses the markup. It takes
the first sentence of the first prose paragraph as the synopsis and the first
literal block after it as the example. Anything it cannot recognize becomes
``None``; output is a candidate for review, not verified documentation.
"""

import logging
import re
from dataclasses import dataclass

from cmdoc.model import ExtractedSnippet

logger = logging.getLogger(__name__)

LITERAL_BLOCK_MARKER = "::"

# Terminator plus closing quotes/backticks, followed by whitespace or line end.
_SENTENCE_END = re.compile(r"[.?!][`'\"]*(?=\s|$)")


@dataclass(frozen=True)
class ScanPosition:
    """Represent a point in line-segmented text.

    Attributes:
        line: Zero-based line index.
        column: Character offset within the line.
    """

    line: int
    column: int = 0


def is_blank(line: str) -> bool:
    """Return whether a line separates paragraphs."""
    return not line.strip()


def find_paragraph_break(lines: list[str]) -> int | None:
    """Return the index of the first blank line, if any."""
    for index, line in enumerate(lines):
        if is_blank(line):
            return index
    return None


def find_opening_line(lines: list[str], start: int) -> int | None:
    """Return the first line at or after ``start`` that opens with prose.

    A prose line begins with a letter or a backtick in the first column;
    directives, indented blocks and section underlines are passed over.
    """
    for index in range(start, len(lines)):
        first = lines[index][:1]
        if first.isalpha() or first == "`":
            return index
    return None


def extract_first_sentence(
    lines: list[str], start: int
) -> tuple[str, ScanPosition] | None:
    """Capture the first sentence of the paragraph opening at ``start``.

    Args:
        lines: Source lines.
        start: Index of the paragraph's first line.

    Returns:
        The sentence with its original line breaks and the position right
        after it, or ``None`` when the paragraph has no sentence terminator.
    """
    for index in range(start, len(lines)):
        line = lines[index]
        if is_blank(line):
            break
        match = _SENTENCE_END.search(line)
        if match is None:
            continue
        sentence = "\n".join([*lines[start:index], line[: match.end()]])
        return sentence, ScanPosition(line=index, column=match.end())
    return None


def find_literal_marker(lines: list[str], position: ScanPosition) -> int | None:
    """Return the index of the first line holding ``::`` at or after ``position``."""
    if position.line >= len(lines):
        return None
    if LITERAL_BLOCK_MARKER in lines[position.line][position.column :]:
        return position.line
    for index in range(position.line + 1, len(lines)):
        if LITERAL_BLOCK_MARKER in lines[index]:
            return index
    return None


def extract_literal_block(lines: list[str], position: ScanPosition) -> str | None:
    """Capture the literal block introduced after ``position``.

    Capture starts on the line after the ``::`` marker and stops before the
    first blank line that follows a captured line. Leading and trailing blank
    lines are trimmed, so a marker followed only by blank lines yields ``""``.

    Args:
        lines: Source lines.
        position: Point after which the marker is searched.

    Returns:
        The verbatim block, or ``None`` when no marker follows ``position``.
    """
    marker_line = find_literal_marker(lines, position)
    if marker_line is None:
        return None

    block: list[str] = []
    for index in range(marker_line + 1, len(lines)):
        block.append(lines[index])
        if index + 1 < len(lines) and is_blank(lines[index + 1]):
            break
    return _trim_blank_lines(block)


def extract_snippet(text: str) -> ExtractedSnippet:
    """Derive the synopsis and example from one source file's text.

    Args:
        text: Full file contents.

    Returns:
        Extracted fields; both are ``None`` when no prose paragraph follows
        the first blank line.
    """
    lines = text.splitlines()
    paragraph_break = find_paragraph_break(lines)
    if paragraph_break is None:
        logger.debug("No paragraph break found")
        return ExtractedSnippet()
    opening_line = find_opening_line(lines, paragraph_break)
    if opening_line is None:
        logger.debug(f"No prose line after paragraph break (line={paragraph_break})")
        return ExtractedSnippet()

    synopsis: str | None = None
    position = ScanPosition(line=opening_line)
    sentence = extract_first_sentence(lines, opening_line)
    if sentence is not None:
        synopsis, position = sentence
    example = extract_literal_block(lines, position)
    return ExtractedSnippet(synopsis=synopsis, example=example)


def _trim_blank_lines(block: list[str]) -> str:
    start = 0
    end = len(block)
    while start < end and is_blank(block[start]):
        start += 1
    while end > start and is_blank(block[end - 1]):
        end -= 1
    return "\n".join(block[start:end])
