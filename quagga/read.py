"""Reading the prompt template from a file or from the built-in default."""

from __future__ import annotations

import os
from pathlib import Path

from .parse import parse_template
from .template import Template
from .template_locator import quagga_template_path

__all__ = [
    "DEFAULT_TEMPLATE",
    "path_to_custom_template",
    "read_and_parse_template",
    "read_template",
]

DEFAULT_TEMPLATE = """\
<template>
  <prompt>
    <header>
    Below are the files of a software project, followed by a question about it.
    Project structure:
    <tree>
    </header>

    <file>
    ### File: <file-path>
    ```
    <file-content>
    ```
    </file>

    <footer>
    Total size of the files: <total-file-size>.
    Answer questions about the code above.
    </footer>
  </prompt>

  <part>
    <header>
    ======== PART <part-number> OF <total-parts> ========
    </header>

    <footer>
    ======== END OF PART <part-number> OF <total-parts> ========
    </footer>

    <pending>
    This is only a part of the code (<parts-remaining> remaining). Reply only with "Ok" until all parts are received.
    </pending>
  </part>
</template>
"""


def read_template(template_path: str | os.PathLike[str] | None = None) -> str:
    """Return the template text from ``template_path``, or the default template.

    Raises OSError naming the path when the file cannot be read as UTF-8 text.
    """
    if template_path is None:
        return DEFAULT_TEMPLATE

    path = os.fspath(template_path)
    prefix = f"Failed to read template from '{path}'"
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        if exc.errno is not None:
            raise type(exc)(exc.errno, f"{prefix}: {reason}") from exc
        raise OSError(f"{prefix}: {reason}") from exc

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise OSError(f"{prefix}: stream did not contain valid UTF-8") from exc


def read_and_parse_template(
    template_path: str | os.PathLike[str] | None = None,
) -> Template:
    """Read the template (or the default) and parse it into a Template."""
    content = read_template(template_path).replace("\r\n", "\n")
    return parse_template(content)


def path_to_custom_template(
    root: str | os.PathLike[str],
    template: str | os.PathLike[str] | None = None,
    no_quagga_template: bool = False,
) -> Path | None:
    """Choose the custom template to use, if any.

    An explicit ``template`` path wins; otherwise, unless
    ``no_quagga_template`` is set, a .quagga_template in ``root`` or the home
    directory is used.
    """
    if template is not None:
        return Path(template)
    if no_quagga_template:
        return None
    return quagga_template_path(root, None)