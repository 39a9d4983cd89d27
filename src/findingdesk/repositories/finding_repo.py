"""Finding repository: typed gateway to the finding document store."""

import logging
from abc import ABC, abstractmethod

import pydantic
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from findingdesk.db.models.finding import FindingRow
from findingdesk.errors.exceptions import NotFoundError, TransportError
from findingdesk.models.finding import Finding, FindingDocument
from findingdesk.repositories.base import BaseRepository
from findingdesk.services.id_generator import generate_object_id, is_object_id

logger = logging.getLogger(__name__)


class FindingStore(ABC):
    """What the editor needs from persistence. No retries, no business logic."""

    @abstractmethod
    async def fetch_by_id(self, finding_id: str) -> Finding:
        """Return the finding stored under ``finding_id``.

        Raises:
            NotFoundError: No document matches.
            TransportError: The store could not be reached or the document
                could not be decoded.
        """
        ...

    @abstractmethod
    async def create(self, document: FindingDocument) -> Finding:
        """Insert a new document and return it with its store-assigned id.

        Raises:
            TransportError: The insert failed.
        """
        ...

    @abstractmethod
    async def update(self, finding_id: str, document: FindingDocument) -> None:
        """Replace the stored body of ``finding_id`` in a single write.

        Raises:
            NotFoundError: The identifier no longer exists.
            TransportError: The write failed.
        """
        ...


class FindingRepository(BaseRepository, FindingStore):
    def __init__(self, session: AsyncSession):
        super().__init__(session, FindingRow)

    async def get(self, finding_id: str) -> FindingRow | None:
        return await self.get_by_id("finding_id", finding_id)

    async def _require(self, finding_id: str) -> FindingRow:
        if not is_object_id(finding_id):
            raise NotFoundError("Finding", finding_id)
        try:
            row = await self.get(finding_id)
        except SQLAlchemyError as exc:
            logger.error("finding_fetch_failed", extra={"finding_id": finding_id, "error": str(exc)})
            raise TransportError("Could not read finding", details={"finding_id": finding_id}) from exc
        if row is None:
            raise NotFoundError("Finding", finding_id)
        return row

    async def fetch_by_id(self, finding_id: str) -> Finding:
        row = await self._require(finding_id)
        try:
            return Finding.model_validate({**row.document, "_id": row.finding_id})
        except pydantic.ValidationError as exc:
            raise TransportError(
                "Stored finding could not be decoded",
                details={"finding_id": finding_id, "errors": exc.errors(include_url=False, include_context=False)},
            ) from exc

    async def create(self, document: FindingDocument) -> Finding:
        finding_id = generate_object_id()
        body = document.to_store()
        try:
            await super().create(finding_id=finding_id, document=body)
        except SQLAlchemyError as exc:
            logger.error("finding_create_failed", extra={"error": str(exc)})
            raise TransportError("Could not insert finding") from exc
        logger.info("finding_created", extra={"finding_id": finding_id})
        return Finding.model_validate({**body, "_id": finding_id})

    async def update(self, finding_id: str, document: FindingDocument) -> None:
        row = await self._require(finding_id)
        try:
            await super().update(row, document=document.to_store())
        except SQLAlchemyError as exc:
            logger.error("finding_update_failed", extra={"finding_id": finding_id, "error": str(exc)})
            raise TransportError("Could not update finding", details={"finding_id": finding_id}) from exc
        logger.info("finding_updated", extra={"finding_id": finding_id, "history_length": len(document.history)})
