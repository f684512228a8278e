"""Full-text export (llms-full.txt)."""

from playbook import config
from playbook.core.content import Document
from playbook.exports.base import BaseExport, ExportResponse, Route, ordered


class LlmsFullExport(BaseExport):
    """Every ordered page, raw body included, in sidebar order."""

    def __init__(self, title: str = config.SITE_TITLE):
        self.title = title

    @property
    def name(self) -> str:
        return "llms-full.txt"

    def get_routes(self, docs: list[Document]) -> list[Route]:
        return [Route(path=self.name)]

    def render(self, docs: list[Document], route: Route) -> ExportResponse:
        parts = [f"# {self.title} - Full\n\n"]
        for doc in ordered(docs):
            parts.append(f"# {doc.title}\n\n{doc.body or ''}\n\n")
        return ExportResponse(body="".join(parts))
