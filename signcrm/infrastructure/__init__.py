"""Infrastructure layer implementations."""

from signcrm.infrastructure import pdf, storage

__all__ = ["storage", "pdf"]
