"""Parse tag-based prompt templates, render files with them and split the result into size-limited parts."""

__version__ = "0.1.0"