"""Data structures describing a prompt template."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["PartTemplate", "PromptTemplate", "Template"]


@dataclass
class PromptTemplate:
    """The prompt section: global header, per-file template and global footer."""

    header: str = ""
    file: str = ""
    footer: str = ""


@dataclass
class PartTemplate:
    """The part section used when the output is split into several parts."""

    header: str = ""
    footer: str = ""
    pending: str = ""


@dataclass
class Template:
    """The whole template: the prompt section and the part section."""

    prompt: PromptTemplate = field(default_factory=PromptTemplate)
    part: PartTemplate = field(default_factory=PartTemplate)