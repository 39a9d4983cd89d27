"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from findingdesk.db.models.finding import FindingRow

__all__ = ["FindingRow"]
