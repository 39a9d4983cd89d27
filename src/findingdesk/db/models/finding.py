"""Findings table: one JSON document per row, addressed by its object id."""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from findingdesk.db.base import Base, TimestampMixin


class FindingRow(Base, TimestampMixin):
    __tablename__ = "findings"

    finding_id: Mapped[str] = mapped_column(String(24), primary_key=True)
    document: Mapped[dict] = mapped_column(JSON, nullable=False)
