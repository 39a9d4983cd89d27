"""Ordered supplier call log nested inside a finding."""

from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from findingdesk.errors.exceptions import NotFoundError
from findingdesk.models.finding import SupplierCall
from findingdesk.services.id_generator import generate_object_id

CallsListener = Callable[[tuple[SupplierCall, ...]], object]


class SupplierCallList:
    """Keeps the calls in chronological order and reports every change.

    The list never persists anything; ``on_change`` receives the full new
    sequence, normally ``FindingEditor.update_calls``.
    """

    def __init__(self, calls: Iterable[SupplierCall] = (), on_change: CallsListener | None = None):
        self._calls: tuple[SupplierCall, ...] = tuple(calls)
        self._on_change = on_change

    @property
    def calls(self) -> tuple[SupplierCall, ...]:
        return self._calls

    def __len__(self) -> int:
        return len(self._calls)

    def __iter__(self):
        return iter(self._calls)

    def _index(self, call_id: str) -> int:
        for i, call in enumerate(self._calls):
            if call.id == call_id:
                return i
        raise NotFoundError("SupplierCall", call_id)

    def _emit(self, calls: tuple[SupplierCall, ...]) -> tuple[SupplierCall, ...]:
        self._calls = calls
        if self._on_change is not None:
            self._on_change(calls)
        return calls

    def add(self, call: SupplierCall) -> tuple[SupplierCall, ...]:
        return self._emit((*self._calls, call))

    def new_call(self, description: str, date: datetime | None = None) -> SupplierCall:
        """Log a call made now (or at ``date``) and append it."""
        call = SupplierCall(
            id=generate_object_id(),
            date=date or datetime.now(timezone.utc),
            description=description,
        )
        self.add(call)
        return call

    def edit(self, call_id: str, **changes) -> tuple[SupplierCall, ...]:
        """Replace the fields of one call; its position does not change."""
        index = self._index(call_id)
        current = self._calls[index]
        updated = SupplierCall.model_validate({**current.model_dump(), **changes, "id": current.id})
        return self._emit((*self._calls[:index], updated, *self._calls[index + 1:]))

    def remove(self, call_id: str) -> tuple[SupplierCall, ...]:
        index = self._index(call_id)
        return self._emit((*self._calls[:index], *self._calls[index + 1:]))
