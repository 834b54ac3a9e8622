"""Splitting of the assembled prompt into one or more size-limited parts."""

from __future__ import annotations

from collections.abc import Sequence

from .chunking import calculate_part_overhead, replace_placeholders, split_file_by_lines
from .template import PartTemplate

__all__ = ["split_into_parts"]


def split_into_parts(
    header: str,
    files: Sequence[str],
    footer: str,
    part_template: PartTemplate,
    max_part_chars: int,
) -> list[str]:
    """Split header, file texts and footer into parts of at most ``max_part_chars``.

    When everything fits, a single part without part headers or footers is
    returned. Otherwise files are distributed over several parts, each
    wrapped in the part template; files too large for one part are cut at
    line boundaries.
    """
    files = list(files)
    if _fits_in_single_part(header, files, footer, max_part_chars):
        return [_assemble_single_part(header, files, footer)]

    plan = _SplitPlan(header, files, footer, part_template, max_part_chars).build()
    return _assemble_multiple_parts(plan, part_template, header, footer)


def _fits_in_single_part(
    header: str, files: list[str], footer: str, max_part_chars: int
) -> bool:
    total = sum(len(file) + 1 for file in files)
    if header:
        total += len(header) + 1
    total += len(footer)
    return total <= max_part_chars


def _assemble_single_part(header: str, files: list[str], footer: str) -> str:
    pieces = [f"{header}\n"] if header else []
    pieces.extend(f"{file}\n" for file in files)
    pieces.append(footer)
    return "".join(pieces)


class _SplitPlan:
    """Decides which file texts, or pieces of them, go into each part."""

    def __init__(
        self,
        header: str,
        files: list[str],
        footer: str,
        part_template: PartTemplate,
        max_part_chars: int,
    ) -> None:
        self._header = header
        self._files = files
        self._footer = footer
        self._max = max_part_chars
        self._overhead = calculate_part_overhead(part_template)
        self._parts: list[list[str]] = []
        self._current: list[str] = []
        self._current_size = 0

    def build(self) -> list[list[str]]:
        for index, file in enumerate(self._files):
            file_length = self._file_length(index, file)
            if self._current_size + file_length + self._overhead > self._max:
                self._handle_exceeding_size(file)
            else:
                self._add(file, file_length)

        if self._current:
            self._parts.append(self._current)
        return self._parts

    def _file_length(self, index: int, file: str) -> int:
        is_first = index == 0 and bool(self._header)
        is_last = index == len(self._files) - 1 and bool(self._footer)
        header_len = len(self._header) + 1 if is_first else 0
        footer_len = len(self._footer) + 1 if is_last else 0
        return header_len + len(file) + 1 + footer_len

    def _handle_exceeding_size(self, file: str) -> None:
        if len(file) + self._overhead > self._max:
            self._handle_large_file(file)
        else:
            self._start_new_part_if_needed()
            self._add(file, len(file) + 1)

    def _handle_large_file(self, file: str) -> None:
        reserved = self._overhead + len(self._footer) + len(self._header)
        max_chunk_size = max(self._max - reserved, 0)
        for chunk in split_file_by_lines(file, max_chunk_size):
            self._start_new_part_if_needed()
            self._add(chunk, len(chunk) + 1)

    def _start_new_part_if_needed(self) -> None:
        if self._current:
            self._parts.append(self._current)
            self._current = []
            self._current_size = 0

    def _add(self, text: str, size: int) -> None:
        self._current.append(f"{text}\n")
        self._current_size += size


def _assemble_multiple_parts(
    parts: list[list[str]],
    part_template: PartTemplate,
    header: str,
    footer: str,
) -> list[str]:
    total_parts = len(parts)
    assembled: list[str] = []

    for number, chunks in enumerate(parts, start=1):
        is_first = number == 1
        is_last = number == total_parts
        pieces: list[str] = []

        if is_first and header:
            pieces.append(f"{header}\n")

        pieces.append(replace_placeholders(part_template.header, number, total_parts) + "\n")
        pieces.extend(chunks)
        pieces.append(replace_placeholders(part_template.footer, number, total_parts) + "\n")

        if not is_last and part_template.pending:
            pieces.append(
                replace_placeholders(part_template.pending, number, total_parts) + "\n"
            )

        if is_last and footer:
            pieces.append(f"{footer}\n")

        assembled.append("".join(pieces))

    return assembled