"""CLI entry point for the Frontend Playbook exports."""

import argparse
import sys
from pathlib import Path

from playbook import config
from playbook.core.changelog import sync_changelog
from playbook.core.content import ContentError, Document, get_documents
from playbook.exports import BaseExport, LlmsFullExport, LlmsIndexExport, PageExport

EXPORTS: list[BaseExport] = [LlmsIndexExport(), LlmsFullExport(), PageExport()]


def _load(content_dir: Path) -> list[Document]:
    """Load the docs collection or exit with an error."""
    try:
        docs = get_documents(content_dir)
    except (FileNotFoundError, ContentError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Loaded {len(docs)} documents from {content_dir}")
    return docs


def build_exports(docs: list[Document], output_dir: Path) -> list[Path]:
    """Write every route of every export under output_dir.

    Args:
        docs: The docs collection
        output_dir: Destination directory, created if missing

    Returns:
        Paths of the written files
    """
    written = []
    for export in EXPORTS:
        for route in export.get_routes(docs):
            response = export.render(docs, route)
            filepath = output_dir / route.path
            filepath.parent.mkdir(parents=True, exist_ok=True)
            filepath.write_text(response.body, encoding="utf-8")
            written.append(filepath)
    return written


def build_command(args):
    """Handle the build subcommand."""
    docs = _load(args.content)

    print(f"\nWriting exports to {args.output}...")
    written = build_exports(docs, args.output)
    for filepath in written:
        print(f"  {filepath.relative_to(args.output).as_posix()}")

    print(f"\nDone! Wrote {len(written)} files to {args.output}")


def list_command(args):
    """Handle the list subcommand."""
    docs = _load(args.content)
    export = PageExport()
    routes = export.get_routes(docs)

    if not routes:
        print("No pages marked for LLMs.")
        return

    print()
    for route in routes:
        doc = route.document
        order = "-" if doc.sidebar_order is None else f"{doc.sidebar_order:g}"
        print(f"[{order}] {route.path}: {doc.title}")


def sync_changelog_command(args):
    """Handle the sync-changelog subcommand."""
    if not args.changelog.exists():
        print(f"Error: Changelog not found: {args.changelog}", file=sys.stderr)
        sys.exit(1)

    dest = sync_changelog(args.changelog, args.content)
    print(f"Synced {args.changelog.name} -> {dest}")


def serve_command(args):
    """Handle the serve subcommand."""
    from playbook import server

    server.CONTENT_DIR = args.content
    server.run(transport=args.transport, host=args.host, port=args.port)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Plain-text exports of the Frontend Playbook for LLMs",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--content",
        type=Path,
        default=config.CONTENT_DIR,
        help="Docs content directory (default: content/docs)"
    )

    # Create subparsers for different commands
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Build subcommand
    build_parser = subparsers.add_parser(
        "build",
        help="Write llms.txt, llms-full.txt and per-page markdown files"
    )
    build_parser.add_argument(
        "-o", "--output",
        type=Path,
        default=config.OUTPUT_DIR,
        help="Output directory (default: dist)"
    )
    build_parser.set_defaults(func=build_command)

    # List subcommand
    list_parser = subparsers.add_parser(
        "list",
        help="List pages that have a markdown export"
    )
    list_parser.set_defaults(func=list_command)

    # Sync-changelog subcommand
    changelog_parser = subparsers.add_parser(
        "sync-changelog",
        help="Copy CHANGELOG.md into the docs collection"
    )
    changelog_parser.add_argument(
        "--changelog",
        type=Path,
        default=config.CHANGELOG_PATH,
        help="Changelog to copy (default: CHANGELOG.md)"
    )
    changelog_parser.set_defaults(func=sync_changelog_command)

    # Serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve the exports over HTTP or MCP"
    )
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport protocol (default: stdio)"
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host for HTTP transport (default: 127.0.0.1)"
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for HTTP transport (default: 8000)"
    )
    serve_parser.set_defaults(func=serve_command)

    args = parser.parse_args(argv)

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
