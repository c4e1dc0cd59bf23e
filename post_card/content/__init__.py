from .content_index import ContentIndex, Document, LocalContentSource

__all__ = ["ContentIndex", "Document", "LocalContentSource"]
