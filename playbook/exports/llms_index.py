"""Table of contents export (llms.txt)."""

from urllib.parse import quote, urljoin

from playbook import config
from playbook.core.content import Document
from playbook.exports.base import BaseExport, ExportResponse, Route, ordered


class LlmsIndexExport(BaseExport):
    """Lists every ordered LLM page with an absolute link to its export."""

    def __init__(
        self,
        site_url: str = config.SITE_URL,
        base_path: str = config.BASE_PATH,
        title: str = config.SITE_TITLE,
        description: str = config.SITE_DESCRIPTION
    ):
        self.site_url = site_url
        self.base_path = base_path
        self.title = title
        self.description = description

    @property
    def name(self) -> str:
        return "llms.txt"

    def link(self, doc: Document) -> str:
        """Absolute URL of a page's markdown export."""
        base = "/" + self.base_path.strip("/")
        path = f"{base.rstrip('/')}/{doc.id}.md"
        return urljoin(self.site_url, quote(path))

    def select(self, docs: list[Document]) -> list[Document]:
        # Only pages that also have a per-page export, so every link resolves
        return [doc for doc in ordered(docs) if doc.is_in_llms]

    def get_routes(self, docs: list[Document]) -> list[Route]:
        return [Route(path=self.name)]

    def render(self, docs: list[Document], route: Route) -> ExportResponse:
        lines = [
            f"# {self.title}",
            "",
            f"> {self.description}",
            "",
            "## Table of contents",
            "",
        ]
        for doc in self.select(docs):
            lines.append(f"- [{doc.title}]({self.link(doc)}): {doc.description}")

        return ExportResponse(body="\n".join(lines) + "\n")
