"""Parsing of the tag-based template text."""

from __future__ import annotations

from .template import PartTemplate, PromptTemplate, Template

__all__ = [
    "TemplateParseError",
    "parse_template",
    "text_inside_tag",
    "trim_indentation",
]


class TemplateParseError(ValueError):
    """Raised when the template text is missing a tag or has tags out of order."""


def parse_template(text: str) -> Template:
    """Parse a complete template string into a Template."""
    template_content = text_inside_tag(text, "template")
    prompt_content = text_inside_tag(template_content, "prompt")
    part_content = text_inside_tag(template_content, "part")
    prompt = _parse_prompt_section(prompt_content)
    part = _parse_part_section(part_content)
    return Template(prompt=prompt, part=part)


def _parse_part_section(content: str) -> PartTemplate:
    return PartTemplate(
        header=text_inside_tag(content, "header"),
        footer=text_inside_tag(content, "footer"),
        pending=text_inside_tag(content, "pending"),
    )


def _parse_prompt_section(content: str) -> PromptTemplate:
    return PromptTemplate(
        header=text_inside_tag(content, "header"),
        file=text_inside_tag(content, "file"),
        footer=text_inside_tag(content, "footer"),
    )


def text_inside_tag(text: str, tag: str) -> str:
    """Return the text between the first opening and the last closing tag, de-indented."""
    opening = f"<{tag}>"
    closing = f"</{tag}>"

    start = text.find(opening)
    if start < 0:
        raise TemplateParseError(f"Opening tag <{tag}> not found in the provided text.")

    end = text.rfind(closing)
    if end < 0:
        raise TemplateParseError(f"Closing tag </{tag}> not found in the provided text.")

    if end < start:
        raise TemplateParseError(
            f"Closing tag </{tag}> found before opening tag <{tag}>."
        )

    return trim_indentation(text[start + len(opening):end])


def _leading_whitespace(line: str) -> int:
    stripped = line.lstrip()
    return len(line) - len(stripped)


def trim_indentation(content: str) -> str:
    """Remove the whitespace indentation common to all non-blank lines."""
    lines = content.split("\n")
    indents = [_leading_whitespace(line) for line in lines if line.strip()]
    min_indent = min(indents, default=0)

    def trim(line: str) -> str:
        if len(line) >= min_indent:
            return line[min_indent:]
        if not line.strip():
            return ""
        return line

    return "\n".join(trim(line) for line in lines)