"""Lookup of a user-provided .quagga_template file."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = ["quagga_template_path"]

_TEMPLATE_NAME = ".quagga_template"


def _home_directory() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def quagga_template_path(
    project_root: str | os.PathLike[str],
    home_dir_override: str | os.PathLike[str] | None = None,
) -> Path | None:
    """Return the .quagga_template in the project root, else in the home directory.

    Returns None when neither location has one.
    """
    project_template = Path(project_root) / _TEMPLATE_NAME
    if project_template.exists():
        return project_template

    home = Path(home_dir_override) if home_dir_override is not None else _home_directory()
    if home is not None:
        home_template = home / _TEMPLATE_NAME
        if home_template.exists():
            return home_template

    return None