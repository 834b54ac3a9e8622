# quagga

A small library for turning source files into one or more prompt texts,
driven by a tag-based template. It parses templates, fills in a per-file
template, splits the result into parts no longer than a given number of
characters, and tells UTF-8 text files from binary ones.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Templates

A template describes the whole prompt and how it is split when it grows
too large:

```
<template>
  <prompt>
    <header>Here is my code:</header>
    <file>File: <file-path>
<file-content>
---</file>
    <footer>Please review it.</footer>
  </prompt>

  <part>
    <header>== Part <part-number> OF <total-parts> ==</header>
    <footer>== Part END <part-number> OF <total-parts> ==</footer>
    <pending>This is only a part of the code (<parts-remaining> remaining)</pending>
  </part>
</template>
```

`quagga.parse.parse_template(text)` returns a `quagga.template.Template`
holding a `PromptTemplate` (`header`, `file`, `footer`) and a
`PartTemplate` (`header`, `footer`, `pending`). The whitespace
indentation common to the non-blank lines inside each tag is removed
(`quagga.parse.trim_indentation`). A missing tag, or a closing tag before
its opening tag, raises `quagga.parse.TemplateParseError`, a subclass of
`ValueError`, for example:

```
Closing tag </prompt> not found in the provided text.
```

`quagga.parse.text_inside_tag(text, tag)` is the underlying helper: it
takes the text between the first `<tag>` and the last `</tag>`.

## Usage

Render each file with the template's file section. `files` is an iterable
of `(path, content)` pairs; `<file-path>` and `<file-content>` are
replaced in each copy:

```python
from pathlib import Path

from quagga.concatenate import apply_file_template
from quagga.parse import parse_template

template = parse_template(Path("my_template.md").read_text())
files = [("src/app.py", "print('hi')\n"), ("README.md", "# App\n")]
rendered = apply_file_template(template.prompt.file, files)
```

Split the rendered files into parts:

```python
from quagga.split import split_into_parts

parts = split_into_parts(
    template.prompt.header,
    rendered,
    template.prompt.footer,
    template.part,
    max_part_chars=50_000,
)
```

If the header, the files and the footer fit together, a single part is
returned without part headers or footers. Otherwise the files are packed
into parts in order; each part is wrapped in the part header and footer,
every part but the last gets the pending text, the global header goes
only into the first part and the global footer only into the last.
`<part-number>`, `<total-parts>` and `<parts-remaining>` are filled in. A
file too large for a part on its own is cut at line boundaries.

The helpers used for this live in `quagga.chunking`:
`split_file_by_lines(file_content, max_chunk_size)`,
`calculate_part_overhead(part_template)` and
`replace_placeholders(text, part_number, total_parts)`.

### Finding and reading a template

`quagga.read.path_to_custom_template(root, template=None,
no_quagga_template=False)` picks the template file to use:

1. `template`, if given;
2. otherwise, unless `no_quagga_template` is set, a `.quagga_template`
   file in `root`, or else in the home directory
   (`quagga.template_locator.quagga_template_path`);
3. otherwise `None`.

`quagga.read.read_template(path)` returns the file's text, or
`quagga.read.DEFAULT_TEMPLATE` when `path` is `None`. A file that cannot
be read, or is not valid UTF-8, raises `OSError` with a message starting
`Failed to read template from '<path>'`.
`quagga.read.read_and_parse_template(path)` reads the template,
normalises `\r\n` line endings and parses it.

### Detecting text files

`quagga.binary_detector.is_valid_text_file(path)` samples the first
1024 bytes of a file and treats it as text when the sample holds no NUL
bytes and is valid UTF-8; a multibyte character cut off at the end of the
sample is allowed. It raises `OSError` when the file cannot be read. The
checks are also available on byte strings: `is_valid_text`,
`is_valid_utf8` and `number_of_null_bytes`.

## What it does not do

- It does not walk directories or apply ignore files; you supply the
  list of files and their contents.
- It has no command-line program and does not copy the default template
  anywhere.
- It does not fill in the `<tree>`, `<all-file-paths>` or
  `<total-file-size>` tags in headers and footers (the default template
  uses `<tree>` and `<total-file-size>`); they are left as written unless
  you replace them yourself.