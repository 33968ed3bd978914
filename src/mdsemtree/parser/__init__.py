"""Markdown parsing utilities."""

from .markdown import parse_markdown, parse_inline

__all__ = ["parse_markdown", "parse_inline"]
