"""Plain-text exports of the docs collection."""

from .base import BaseExport, ExportResponse, Route
from .llms_full import LlmsFullExport
from .llms_index import LlmsIndexExport
from .page import PageExport

__all__ = [
    "BaseExport",
    "ExportResponse",
    "LlmsFullExport",
    "LlmsIndexExport",
    "PageExport",
    "Route",
]
