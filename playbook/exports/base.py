"""Abstract base class for plain-text exports."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from playbook import config
from playbook.core.content import Document


@dataclass
class Route:
    """A path served by an export, with the document it renders if any."""
    path: str
    document: Optional[Document] = None


@dataclass
class ExportResponse:
    """Rendered export body and its content type."""
    body: str
    content_type: str = config.CONTENT_TYPE


class BaseExport(ABC):
    """Base class that all exports must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Export name (e.g., 'llms.txt')."""
        pass

    @abstractmethod
    def get_routes(self, docs: list[Document]) -> list[Route]:
        """Return every path this export serves for the given collection."""
        pass

    @abstractmethod
    def render(self, docs: list[Document], route: Route) -> ExportResponse:
        """
        Render one route of the export.

        Args:
            docs: The full docs collection, loaded for this request
            route: One of the routes returned by get_routes()
        """
        pass


def ordered(docs: list[Document]) -> list[Document]:
    """Documents with a sidebar order, ascending; the rest are dropped."""
    return sorted(
        (doc for doc in docs if doc.sidebar_order is not None),
        key=lambda doc: doc.sidebar_order
    )
