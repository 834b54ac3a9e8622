"""Applying the per-file template to file contents."""

from __future__ import annotations

import os
from collections.abc import Iterable

__all__ = ["apply_file_template"]


def apply_file_template(
    item_template: str,
    files: Iterable[tuple[str | os.PathLike[str], str]],
) -> list[str]:
    """Fill ``<file-path>`` and ``<file-content>`` in the template for each file.

    ``files`` yields ``(path, content)`` pairs; one filled-in text is returned
    per file, in the same order.
    """
    return [
        item_template.replace("<file-path>", os.fspath(path)).replace(
            "<file-content>", content
        )
        for path, content in files
    ]