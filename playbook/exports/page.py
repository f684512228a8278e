"""Per-page plain-text export (/{category}/{slug}.md)."""

from playbook.core.content import Document
from playbook.core.sanitizer import remove_imports
from playbook.exports.base import BaseExport, ExportResponse, Route


class PageExport(BaseExport):
    """One markdown file per page that is marked for LLMs."""

    SUFFIX = ".md"

    @property
    def name(self) -> str:
        return "pages"

    def route_path(self, doc: Document) -> str:
        """Path of a page's export, e.g. guides/naming.md."""
        if not doc.slug:
            return f"{doc.category}{self.SUFFIX}"
        return f"{doc.category}/{doc.slug}{self.SUFFIX}"

    def get_routes(self, docs: list[Document]) -> list[Route]:
        return [
            Route(path=self.route_path(doc), document=doc)
            for doc in docs
            if doc.is_in_llms
        ]

    def find_route(self, docs: list[Document], path: str) -> Route | None:
        """Look up the route for a requested path, ignoring a leading slash."""
        path = path.lstrip("/")
        for route in self.get_routes(docs):
            if route.path == path:
                return route
        return None

    def render(self, docs: list[Document], route: Route) -> ExportResponse:
        doc = route.document
        cleaned = remove_imports(doc.body) or ""
        return ExportResponse(body=f"# {doc.title}\n\n{cleaned}\n")
