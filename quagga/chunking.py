"""Helpers for cutting file content into parts and filling in part placeholders."""

from __future__ import annotations

from .template import PartTemplate

__all__ = [
    "calculate_part_overhead",
    "replace_placeholders",
    "split_file_by_lines",
]

_PLACEHOLDER_ESTIMATE = "999"
_PLACEHOLDERS = ("<part-number>", "<total-parts>", "<parts-remaining>")


def _lines(text: str) -> list[str]:
    """Split text into lines the way a line iterator does.

    Lines end at "\\n" (a preceding "\\r" is dropped too); a final line
    ending does not produce an extra empty line.
    """
    if not text:
        return []
    pieces = text.split("\n")
    trailing_newline = pieces[-1] == ""
    if trailing_newline:
        pieces.pop()
        terminated = pieces
        last = None
    else:
        terminated = pieces[:-1]
        last = pieces[-1]
    lines = [line[:-1] if line.endswith("\r") else line for line in terminated]
    if last is not None:
        lines.append(last)
    return lines


def split_file_by_lines(file_content: str, max_chunk_size: int) -> list[str]:
    """Split file content into chunks at line boundaries.

    Each chunk holds as many whole lines as fit within ``max_chunk_size``
    characters (counting one newline per line). A single line longer than
    the limit becomes a chunk of its own.
    """
    chunks: list[str] = []
    current: list[str] = []
    current_chars = 0

    for line in _lines(file_content):
        line_chars = len(line) + 1
        if current_chars + line_chars > max_chunk_size and current:
            chunks.append("\n".join(current))
            current = []
            current_chars = 0
        current.append(line)
        current_chars += line_chars

    if current:
        chunks.append("\n".join(current))

    return chunks


def _with_estimates(text: str) -> str:
    for placeholder in _PLACEHOLDERS:
        text = text.replace(placeholder, _PLACEHOLDER_ESTIMATE)
    return text


def calculate_part_overhead(part_template: PartTemplate) -> int:
    """Estimate the characters a part's header, footer and pending text add."""
    overhead = len(_with_estimates(part_template.header)) + 1
    overhead += len(_with_estimates(part_template.footer)) + 1
    if part_template.pending:
        overhead += len(_with_estimates(part_template.pending)) + 1
    return overhead


def replace_placeholders(text: str, part_number: int, total_parts: int) -> str:
    """Fill in the part number, total parts and parts remaining placeholders."""
    parts_remaining = max(total_parts - part_number, 0)
    return (
        text.replace("<part-number>", str(part_number))
        .replace("<total-parts>", str(total_parts))
        .replace("<parts-remaining>", str(parts_remaining))
    )