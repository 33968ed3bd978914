"""MCP Server for sentence segmentation and semantic markdown trees."""

import asyncio
import json
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .tools.segment import (
    segment_sentences as do_segment_sentences,
    render_html as do_render_html,
)
from .tools.outline import (
    get_semantic_tree as do_get_semantic_tree,
    get_heading_content as do_get_heading_content,
    get_subtree as do_get_subtree,
)


# Create MCP server
server = Server("mdsemtree")

_CONTENT_PROPERTY = {
    "type": "string",
    "description": "Markdown source text",
}

_HEADING_PROPERTY = {
    "type": "string",
    "description": "Exact heading text to look up (e.g. 'Installation')",
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="segment_sentences",
            description="""Split the prose of a markdown document into sentences.

Text is broken after '.', '!' or '?' when followed by whitespace, the end
of the text, a quote or a closing bracket. Returns the document tree with
sentence and sentenceDelimiter nodes, plus the sentence count.""",
            inputSchema={
                "type": "object",
                "properties": {"content": _CONTENT_PROPERTY},
                "required": ["content"],
            },
        ),
        Tool(
            name="render_html",
            description="""Render a markdown document to HTML with sentence spans.

Each sentence is wrapped in <span class="sentence"> and its delimiter in
<span class="sentence-delimiter">.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "content": _CONTENT_PROPERTY,
                    "split": {
                        "type": "boolean",
                        "description": "Split sentences before conversion (default: true)",
                        "default": True,
                    },
                    "include_tree": {
                        "type": "boolean",
                        "description": "Also return the annotated output tree",
                        "default": False,
                    },
                },
                "required": ["content"],
            },
        ),
        Tool(
            name="get_semantic_tree",
            description="""Nest a markdown document under its headings.

Every heading contains the content and deeper headings that follow it,
until a heading of equal or shallower depth appears.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "content": _CONTENT_PROPERTY,
                    "preserve_list_structure": {
                        "type": "boolean",
                        "description": "Copy lists and their items as atomic units (default: true)",
                    },
                },
                "required": ["content"],
            },
        ),
        Tool(
            name="get_heading_content",
            description="""Get the content that belongs to one heading.

Returns the blocks under the first heading whose text matches exactly,
excluding nested headings.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "content": _CONTENT_PROPERTY,
                    "heading": _HEADING_PROPERTY,
                },
                "required": ["content", "heading"],
            },
        ),
        Tool(
            name="get_subtree",
            description="""Get a heading with everything nested under it as a standalone tree.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "content": _CONTENT_PROPERTY,
                    "heading": _HEADING_PROPERTY,
                },
                "required": ["content", "heading"],
            },
        ),
    ]


def dispatch_tool(name: str, arguments: dict[str, Any]) -> dict:
    """Run a tool by name and return its result dict."""
    if name == "segment_sentences":
        return do_segment_sentences(content=arguments["content"])
    elif name == "render_html":
        return do_render_html(
            content=arguments["content"],
            split=arguments.get("split", True),
            include_tree=arguments.get("include_tree", False),
        )
    elif name == "get_semantic_tree":
        return do_get_semantic_tree(
            content=arguments["content"],
            preserve_list_structure=arguments.get("preserve_list_structure"),
        )
    elif name == "get_heading_content":
        return do_get_heading_content(
            content=arguments["content"],
            heading=arguments["heading"],
        )
    elif name == "get_subtree":
        return do_get_subtree(
            content=arguments["content"],
            heading=arguments["heading"],
        )
    return {"error": f"Unknown tool: {name}"}


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        result = dispatch_tool(name, arguments)
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        error_result = {"error": str(e)}
        return [TextContent(type="text", text=json.dumps(error_result, indent=2))]


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main():
    """Entry point for the MCP server."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
