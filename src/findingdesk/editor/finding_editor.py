"""Editing session for a single supplier finding.

The editor owns the in-memory draft. A session runs ``load`` once, then any
number of ``update_field`` / ``update_calls`` calls, then ``save``. Saving an
existing finding appends a history entry holding the fields as saved, stamped
with the current actor. A successful save ends the session; a failed save
leaves the draft exactly as it was so the user can retry.

States::

    idle -> loading -> ready -> saving -> saved
                |                 |
           load_failed            +-> ready (on failure)

``cancel`` and ``close`` move any state to ``closed``. A store call that
completes after ``close`` is discarded.
"""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

import pydantic

from findingdesk.config import settings
from findingdesk.errors.exceptions import EditorStateError, FindingDeskError, ValidationError
from findingdesk.models.enums import EditorState, FindingType, NotificationKind, Priority, Status
from findingdesk.models.finding import TEXT_FIELDS, Finding, HistoryEntry, SupplierCall, resolve_field_name
from findingdesk.repositories.finding_repo import FindingStore
from findingdesk.services import notifications
from findingdesk.services.actor import ActorProvider
from findingdesk.services.navigation import Navigator
from findingdesk.services.notifications import Notifier
from findingdesk.services.text import capitalize_first_letter

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FindingEditor:
    def __init__(
        self,
        store: FindingStore,
        actor_provider: ActorProvider,
        notifier: Notifier,
        navigator: Navigator,
        *,
        clock: Callable[[], datetime] | None = None,
        default_supplier: str | None = None,
        overview_path: str | None = None,
        unknown_email: str | None = None,
    ):
        self._store = store
        self._actor_provider = actor_provider
        self._notifier = notifier
        self._navigator = navigator
        self._clock = clock or _utcnow
        self._default_supplier = default_supplier or settings.default_supplier
        self._overview_path = overview_path or settings.overview_path
        self._unknown_email = unknown_email or settings.unknown_actor_email

        self.state = EditorState.IDLE
        self.last_error: FindingDeskError | None = None
        self.show_history = False
        self._draft: Finding | None = None

    @property
    def draft(self) -> Finding | None:
        """Current draft. Each edit replaces it; earlier drafts never change."""
        return self._draft

    @property
    def closed(self) -> bool:
        return self.state == EditorState.CLOSED

    def _require_ready(self, operation: str) -> Finding:
        if self.state != EditorState.READY or self._draft is None:
            raise EditorStateError(operation, str(self.state))
        return self._draft

    # -- load ---------------------------------------------------------------

    def new_finding(self) -> Finding:
        """Draft for a finding that does not exist yet."""
        return Finding(
            description="",
            status=Status.OPEN.value,
            type=FindingType.BUG.value,
            priority=Priority.LOW.value,
            supplier_calls=(),
            supplier=self._default_supplier,
            test_date=self._clock(),
            history=(),
        )

    def _with_load_defaults(self, stored: Finding) -> Finding:
        changes = {}
        if not stored.status:
            changes["status"] = Status.OPEN.value
        if not stored.test_date:
            changes["test_date"] = self._clock()
        if not changes:
            return stored
        return stored.replace(**changes)

    async def load(self, finding_id: str | None = None) -> Finding | None:
        """Start the session with a fresh draft or the stored finding.

        Returns the draft, or None when the finding could not be loaded (an
        error notification has then been sent) or the session was closed
        while loading.
        """
        if self.state not in (EditorState.IDLE, EditorState.LOAD_FAILED):
            raise EditorStateError("load", str(self.state))
        self.state = EditorState.LOADING
        self.last_error = None

        if finding_id is None:
            draft = self.new_finding()
        else:
            try:
                stored = await self._store.fetch_by_id(finding_id)
            except FindingDeskError as exc:
                if self.closed:
                    return None
                self.last_error = exc
                self.state = EditorState.LOAD_FAILED
                logger.warning(
                    "finding_load_failed",
                    extra={"finding_id": finding_id, "code": exc.code, "reason": exc.message},
                )
                self._notifier.notify(NotificationKind.ERROR, notifications.LOAD_FAILED)
                return None
            if self.closed:
                return None
            draft = self._with_load_defaults(stored)

        self._draft = draft
        self.state = EditorState.READY
        return draft

    # -- edits --------------------------------------------------------------

    def update_field(self, field_name: str, raw_value) -> Finding:
        """Store ``raw_value`` under ``field_name``; free text gets a capital first letter.

        Accepts the stored camelCase name or the attribute name. The
        identifier, history and supplier calls are not editable here.
        """
        draft = self._require_ready("update field")
        attr = resolve_field_name(str(field_name))
        if attr is None:
            raise ValidationError(
                f"Field '{field_name}' cannot be edited",
                details={"field": str(field_name)},
            )
        value = raw_value
        if attr in TEXT_FIELDS and isinstance(raw_value, str):
            value = capitalize_first_letter(raw_value)
        try:
            self._draft = draft.replace(**{attr: value})
        except pydantic.ValidationError as exc:
            raise ValidationError(
                f"Invalid value for '{field_name}'",
                details=exc.errors(include_url=False, include_context=False),
            ) from exc
        return self._draft

    def update_calls(self, calls: Iterable[SupplierCall]) -> Finding:
        """Replace the supplier call log wholesale, keeping its order."""
        draft = self._require_ready("update calls")
        try:
            self._draft = draft.replace(supplier_calls=tuple(calls))
        except pydantic.ValidationError as exc:
            raise ValidationError(
                "Invalid supplier calls",
                details=exc.errors(include_url=False, include_context=False),
            ) from exc
        return self._draft

    def toggle_history(self) -> bool:
        self.show_history = not self.show_history
        return self.show_history

    # -- save ---------------------------------------------------------------

    def _history_entry(self, finding: Finding) -> HistoryEntry:
        actor = self._actor_provider.current_actor()
        return HistoryEntry(
            finding=finding.fields(),
            created_on=self._clock(),
            created_by=actor.as_history_actor(self._unknown_email),
        )

    async def _persist(self, draft: Finding) -> tuple[Finding, str]:
        pending = draft.replace(last_updated_by_supplier=True)
        if draft.is_new:
            created = await self._store.create(pending.document())
            return created, notifications.FINDING_CREATED

        pending = pending.replace(history=(*pending.history, self._history_entry(pending)))
        await self._store.update(draft.id, pending.document())
        return pending, notifications.FINDING_UPDATED

    async def save(self) -> bool:
        """Persist the draft and end the session.

        A no-op returning False when there is no draft or the editor is not
        ready; no store call is made and nothing is notified. Returns True
        once the store accepted the write.
        """
        draft = self._draft
        if draft is None or self.state != EditorState.READY:
            logger.debug("finding_save_ignored", extra={"state": str(self.state)})
            return False

        self.state = EditorState.SAVING
        try:
            saved, message = await self._persist(draft)
        except FindingDeskError as exc:
            if self.closed:
                return False
            self.last_error = exc
            self._draft = draft
            self.state = EditorState.READY
            logger.warning(
                "finding_save_failed",
                extra={"finding_id": draft.id, "code": exc.code, "reason": exc.message},
            )
            self._notifier.notify(NotificationKind.ERROR, notifications.SAVE_FAILED)
            return False

        if self.closed:
            return True
        self._draft = saved
        self.state = EditorState.SAVED
        logger.info(
            "finding_saved",
            extra={"finding_id": saved.id, "history_length": len(saved.history)},
        )
        self._notifier.notify(NotificationKind.SUCCESS, message)
        self._navigator.go_to(self._overview_path)
        return True

    # -- leaving ------------------------------------------------------------

    def cancel(self) -> None:
        """Leave without saving."""
        self.state = EditorState.CLOSED
        self._navigator.go_back()

    def close(self) -> None:
        """Tear the session down; late store results are ignored."""
        self.state = EditorState.CLOSED
