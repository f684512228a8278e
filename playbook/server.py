"""HTTP and MCP server for the Frontend Playbook exports.

Serves the plain-text exports over HTTP and exposes them as MCP tools and
resources so agents can read the playbook directly.

HTTP routes:
    - GET /llms.txt: Table of contents
    - GET /llms-full.txt: Every ordered page in one file
    - GET /{category}/{slug}.md: A single page

Tools:
    - list_pages: Show every page with a markdown export
    - get_page: Read a single page

Resources:
    - llms://index: Same as /llms.txt
    - llms://full: Same as /llms-full.txt
"""

import argparse
from pathlib import Path

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from playbook import config
from playbook.core.content import ContentError, Document, get_documents
from playbook.exports import ExportResponse, LlmsFullExport, LlmsIndexExport, PageExport

# Overridden by `serve --content`
CONTENT_DIR = config.CONTENT_DIR

page_export = PageExport()
index_export = LlmsIndexExport()
full_export = LlmsFullExport()


def load_documents() -> list[Document]:
    """Load the docs collection for a single request."""
    return get_documents(CONTENT_DIR)


def _to_response(export: ExportResponse) -> Response:
    return Response(content=export.body, headers={"Content-Type": export.content_type})


def _error_response(e: Exception) -> Response:
    return PlainTextResponse(f"Error loading docs: {e}\n", status_code=500)


def render_index() -> ExportResponse:
    docs = load_documents()
    return index_export.render(docs, index_export.get_routes(docs)[0])


def render_full() -> ExportResponse:
    docs = load_documents()
    return full_export.render(docs, full_export.get_routes(docs)[0])


def render_page(path: str) -> ExportResponse | None:
    """Render the page export at path, or None when no page is served there."""
    docs = load_documents()
    route = page_export.find_route(docs, path)
    if route is None:
        return None
    return page_export.render(docs, route)


# Create the MCP server
mcp = FastMCP(
    name="Frontend Playbook",
    instructions="""
    This server provides the Applifting Frontend Playbook as plain markdown.

    WHEN TO USE THIS SERVER:
    - User asks how frontend code should be written, structured or reviewed
    - User needs the team's conventions for naming, styling, testing or tooling

    HOW TO READ:
    1. Read the llms://index resource or call list_pages() to see every page
    2. Call get_page(path) with a path such as "guides/naming.md"
    3. Read llms://full to load the whole playbook at once
    """
)


# =============================================================================
# HTTP ROUTES - Plain-text exports
# =============================================================================

@mcp.custom_route("/llms.txt", methods=["GET"])
async def llms_txt(request: Request) -> Response:
    try:
        return _to_response(render_index())
    except (FileNotFoundError, ContentError) as e:
        return _error_response(e)


@mcp.custom_route("/llms-full.txt", methods=["GET"])
async def llms_full_txt(request: Request) -> Response:
    try:
        return _to_response(render_full())
    except (FileNotFoundError, ContentError) as e:
        return _error_response(e)


async def _page(path: str) -> Response:
    try:
        export = render_page(path)
    except (FileNotFoundError, ContentError) as e:
        return _error_response(e)

    if export is None:
        return PlainTextResponse("Not found\n", status_code=404)
    return _to_response(export)


@mcp.custom_route("/{name}.md", methods=["GET"])
async def top_level_page(request: Request) -> Response:
    return await _page(f"{request.path_params['name']}.md")


@mcp.custom_route("/{category}/{slug:path}", methods=["GET"])
async def page(request: Request) -> Response:
    params = request.path_params
    return await _page(f"{params['category']}/{params['slug']}")


# =============================================================================
# TOOLS
# =============================================================================

def list_pages() -> str:
    """
    List every playbook page that has a markdown export.

    Returns:
        Markdown list of pages with the path to pass to get_page and the
        page description.
    """
    try:
        docs = load_documents()
    except (FileNotFoundError, ContentError) as e:
        return f"Error loading docs: {e}"

    routes = page_export.get_routes(docs)
    if not routes:
        return "No pages found."

    output = ["# Frontend Playbook Pages\n"]
    for route in routes:
        doc = route.document
        line = f"- `{route.path}`: {doc.title}"
        if doc.description:
            line += f" ({doc.description})"
        output.append(line)

    return "\n".join(output)


def get_page(path: str) -> str:
    """
    Read a single playbook page as markdown.

    Args:
        path: Page path as shown by list_pages, e.g. "guides/naming.md"

    Returns:
        The page title as a heading followed by its content, with MDX
        imports removed.
    """
    try:
        export = render_page(path)
    except (FileNotFoundError, ContentError) as e:
        return f"Error loading docs: {e}"

    if export is None:
        return f"Error: Unknown page '{path}'. Use list_pages() to see available pages."
    return export.body


# =============================================================================
# RESOURCES
# =============================================================================

def index_resource() -> str:
    """Table of contents of the playbook (llms.txt)."""
    try:
        return render_index().body
    except (FileNotFoundError, ContentError) as e:
        return f"Error loading docs: {e}"


def full_resource() -> str:
    """The whole playbook in one document (llms-full.txt)."""
    try:
        return render_full().body
    except (FileNotFoundError, ContentError) as e:
        return f"Error loading docs: {e}"


# Registered by call so the handlers stay plain functions
mcp.tool(list_pages)
mcp.tool(get_page)
mcp.resource("llms://index", mime_type="text/plain")(index_resource)
mcp.resource("llms://full", mime_type="text/plain")(full_resource)


# =============================================================================
# MAIN
# =============================================================================

def run(transport: str = "stdio", host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run the server with the given transport."""
    if transport == "http":
        print(f"Starting HTTP server at http://{host}:{port}")
        print("\nAvailable endpoints:")
        print(f"  Exports:   GET  http://{host}:{port}/llms.txt")
        print(f"             GET  http://{host}:{port}/llms-full.txt")
        print(f"             GET  http://{host}:{port}/<category>/<slug>.md")
        print(f"  MCP:       POST http://{host}:{port}/mcp")
        mcp.run(transport="http", host=host, port=port, log_level="WARNING")
    else:
        mcp.run(log_level="WARNING")


def main():
    """Run the server."""
    global CONTENT_DIR

    parser = argparse.ArgumentParser(
        description="Frontend Playbook export server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run with STDIO (for MCP clients)
  python -m playbook.server

  # Serve llms.txt and the page exports over HTTP
  python -m playbook.server --transport http --port 8000
        """
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport protocol (default: stdio)"
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host for HTTP transport (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for HTTP transport (default: 8000)"
    )
    parser.add_argument(
        "--content",
        type=Path,
        default=None,
        help="Docs content directory (default: content/docs)"
    )

    args = parser.parse_args()
    if args.content is not None:
        CONTENT_DIR = args.content

    run(transport=args.transport, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
