"""Finding editor API routes.

Each request runs one editor session: load, apply the submitted edits, save.
Notifications the editor emitted are returned with the response.
"""

from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from findingdesk.dependencies import CurrentActor, DBSession
from findingdesk.editor.finding_editor import FindingEditor
from findingdesk.errors.exceptions import TransportError
from findingdesk.models.finding import Finding, SupplierCall
from findingdesk.repositories.finding_repo import FindingRepository
from findingdesk.services import presentation
from findingdesk.services.actor import ActorProvider
from findingdesk.services.navigation import RecordingNavigator
from findingdesk.services.notifications import CollectingNotifier

router = APIRouter(prefix="/findings", tags=["Findings"])


class FindingEditRequest(BaseModel):
    changes: dict[str, Any] = Field(default_factory=dict)
    supplier_calls: list[SupplierCall] | None = Field(None, alias="supplierCalls")


class _Session:
    """Editor wired to the request's store, actor and collecting sinks."""

    def __init__(self, request: Request, db: AsyncSession, actor_provider: ActorProvider):
        self.db = db
        self.notifier = CollectingNotifier()
        self.navigator = RecordingNavigator()
        self.editor = FindingEditor(
            FindingRepository(db),
            actor_provider,
            self.notifier,
            self.navigator,
        )
        request.state.notifications = None

    def sync_notifications(self, request: Request) -> list[dict]:
        notes = self.notifier.as_dicts()
        request.state.notifications = notes
        return notes

    async def load(self, request: Request, finding_id: str | None = None) -> Finding:
        draft = await self.editor.load(finding_id)
        self.sync_notifications(request)
        if draft is None:
            raise self.editor.last_error
        return draft

    def apply(self, body: FindingEditRequest) -> None:
        for name, value in body.changes.items():
            self.editor.update_field(name, value)
        if body.supplier_calls is not None:
            self.editor.update_calls(body.supplier_calls)

    async def save(self, request: Request) -> dict:
        saved = await self.editor.save()
        notes = self.sync_notifications(request)
        if not saved:
            await self.db.rollback()
            raise self.editor.last_error or TransportError("Finding was not saved")
        await self.db.commit()
        draft = self.editor.draft
        return {
            "finding_id": draft.id,
            "finding": _dump(draft),
            "notifications": notes,
            "redirect": self.navigator.path,
        }


def _dump(finding: Finding) -> dict:
    return finding.model_dump(mode="json", by_alias=True, exclude_none=True)


def _session(
    request: Request,
    db: DBSession,
    actor_provider: CurrentActor,
) -> _Session:
    return _Session(request, db, actor_provider)


@router.get("/new")
async def new_finding(request: Request, session: _Session = Depends(_session)) -> dict:
    """Default draft for a finding that does not exist yet."""
    draft = await session.load(request)
    return {"finding": _dump(draft)}


@router.get("/{finding_id}")
async def get_finding(finding_id: str, request: Request, session: _Session = Depends(_session)) -> dict:
    draft = await session.load(request, finding_id)
    return {"finding": _dump(draft)}


@router.get("/{finding_id}/view")
async def view_finding(finding_id: str, request: Request, session: _Session = Depends(_session)) -> dict:
    """Read-only panels of the supplier form, history newest first."""
    draft = await session.load(request, finding_id)
    return {
        "title": presentation.ticket_title(draft),
        "test_date": presentation.format_test_date(draft.test_date),
        "screenshot_name": presentation.screenshot_name(draft),
        "summary": presentation.summary_lines(draft),
        "feedback": presentation.feedback_lines(draft),
        "supplier_calls": [call.model_dump(mode="json", by_alias=True) for call in draft.supplier_calls],
        "history": presentation.history_overview(draft),
    }


@router.post("", status_code=201)
async def create_finding(
    body: FindingEditRequest, request: Request, session: _Session = Depends(_session)
) -> dict:
    await session.load(request)
    session.apply(body)
    return await session.save(request)


@router.patch("/{finding_id}")
async def update_finding(
    finding_id: str, body: FindingEditRequest, request: Request, session: _Session = Depends(_session)
) -> dict:
    await session.load(request, finding_id)
    session.apply(body)
    return await session.save(request)
