"""Pydantic models for the Finding document and its audit history.

Models are frozen: every edit produces a new instance, so a draft held by a
caller stays a valid snapshot after the editor moves on. Sequences are tuples
for the same reason. Stored documents use camelCase keys and ``_id``.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from findingdesk.models.enums import FindingFieldName

_DOCUMENT_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class SupplierCall(BaseModel):
    """A call-log entry with the supplier. Unknown keys are carried as-is."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: str = Field(..., alias="_id")
    date: datetime
    description: str | None = None


class FindingFields(BaseModel):
    """Every editable field of a finding; the body of a history snapshot."""

    model_config = _DOCUMENT_CONFIG

    description: str | None = None
    supplier: str | None = None
    type: str | None = None
    priority: str | None = None
    feature_request_description: str | None = None
    feature_request_proposal: str | None = None
    information_request_description: str | None = None
    theme: str | None = None
    expected_result: str | None = None
    actual_result: str | None = None
    additional_info: str | None = None
    browser: str | None = None
    status: str | None = None
    feedback_team: str | None = None
    feedback_product_owner: str | None = None
    feedback_contract_management: str | None = None
    feedback_supplier: str | None = None
    test_date: datetime | None = None
    user_email: str | None = None
    supplier_calls: tuple[SupplierCall, ...] = ()
    last_updated_by_supplier: bool | None = None


class HistoryActor(BaseModel):
    model_config = _DOCUMENT_CONFIG

    id: str = Field(..., alias="_id")
    email: str


class HistoryEntry(BaseModel):
    """Point-in-time snapshot of a finding, stamped with who saved it and when."""

    model_config = _DOCUMENT_CONFIG

    finding: FindingFields
    created_on: datetime
    created_by: HistoryActor


class FindingDocument(FindingFields):
    """The stored document body. Addressed by, never containing, its identifier."""

    history: tuple[HistoryEntry, ...] = ()

    def to_store(self) -> dict[str, Any]:
        """Serialize to the JSON document kept in the store."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"id"})


class Finding(FindingDocument):
    id: str | None = Field(None, alias="_id")

    @property
    def is_new(self) -> bool:
        return self.id is None

    def fields(self) -> FindingFields:
        """Copy of the editable fields, without history and identifier."""
        return FindingFields.model_validate(_field_values(self, FindingFields))

    def document(self) -> FindingDocument:
        """The body to persist, without the identifier."""
        return FindingDocument.model_validate(_field_values(self, FindingDocument))

    def replace(self, **changes: Any) -> "Finding":
        """Return a validated copy with ``changes`` applied; self is untouched."""
        values = _field_values(self, Finding)
        values.update(changes)
        return Finding.model_validate(values)


def _field_values(model: BaseModel, target: type[BaseModel]) -> dict[str, Any]:
    return {name: getattr(model, name) for name in target.model_fields}


# supplierCalls goes through update_calls; the supplier flag is set by save only.
EDITABLE_FIELDS: frozenset[str] = frozenset(FindingFields.model_fields) - {
    "supplier_calls",
    "last_updated_by_supplier",
}

_ALIASES = {to_camel(name): name for name in FindingFields.model_fields}

# Free-text inputs; only these are normalized on edit.
TEXT_FIELDS: frozenset[str] = frozenset(_ALIASES[name.value] for name in FindingFieldName)


def resolve_field_name(name: str) -> str | None:
    """Map a stored (camelCase) or attribute name to an editable attribute name."""
    attr = _ALIASES.get(name, name)
    if attr in EDITABLE_FIELDS:
        return attr
    return None
