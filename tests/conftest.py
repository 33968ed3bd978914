"""Shared test fixtures for mdsemtree tests."""

import pytest

from mdsemtree.nodes import Heading, List, ListItem, Paragraph, Root, Text


def _paragraph(value: str) -> Paragraph:
    return Paragraph(children=[Text(value)])


@pytest.fixture
def flat_tree():
    """Return a flat document tree with nested heading levels and a trailing list."""
    return Root(children=[
        Heading(depth=1, children=[Text("Heading 1")]),
        _paragraph("Paragraph under heading 1"),
        Heading(depth=2, children=[Text("Heading 2")]),
        _paragraph("Paragraph under heading 2"),
        Heading(depth=3, children=[Text("Heading 3")]),
        _paragraph("Paragraph under heading 3"),
        Heading(depth=2, children=[Text("Another Heading 2")]),
        _paragraph("Paragraph under another heading 2"),
        List(children=[
            ListItem(children=[_paragraph("List item 1")]),
            ListItem(children=[_paragraph("List item 2")]),
        ]),
    ])


@pytest.fixture
def sample_markdown():
    """Return sample markdown content with multiple heading levels."""
    return """# Getting Started

Welcome to the documentation. It is short!

## Installation

Install with pip:

```bash
pip install my-package
```

## Configuration

### Basic Config

Set environment variables:

- `API_KEY`: Your API key.
- `DEBUG`: Enable debug mode.

### Advanced Config

For production use, configure the server. Version 2.0 is required.

## API Reference

Use Bearer tokens for API calls.
"""


@pytest.fixture
def sample_file(tmp_path, sample_markdown):
    """Write the sample markdown to a temporary file."""
    path = tmp_path / "README.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path
