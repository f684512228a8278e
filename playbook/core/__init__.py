"""Docs collection loading and text cleanup."""

from .content import ContentError, Document, get_documents
from .sanitizer import remove_imports

__all__ = ["ContentError", "Document", "get_documents", "remove_imports"]
