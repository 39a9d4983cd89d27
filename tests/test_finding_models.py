"""Finding document models and their stored form."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from findingdesk.models.finding import TEXT_FIELDS, Finding, FindingDocument, HistoryEntry, resolve_field_name


def _stored_document() -> dict:
    return {
        "description": "Knop reageert niet",
        "supplier": "ivention",
        "type": "bug",
        "priority": "low",
        "testDate": "2024-01-09T10:30:00Z",
        "feedbackSupplier": "Opgelost in 1.2",
        "supplierCalls": [
            {"_id": "65f1c0de9a3b4c5d6e7f8091", "date": "2024-02-01T09:00:00Z", "contact": "Jan"},
        ],
        "history": [
            {
                "finding": {"description": "Knop reageert niet", "history": [{"nested": True}]},
                "createdOn": "2024-01-10T09:00:00Z",
                "createdBy": {"_id": "staff-1", "email": "po@rivm.nl"},
            }
        ],
    }


class TestFindingDocument:
    def test_reads_camel_case_document(self):
        finding = Finding.model_validate({**_stored_document(), "_id": "65f1c0de9a3b4c5d6e7f8000"})
        assert finding.id == "65f1c0de9a3b4c5d6e7f8000"
        assert finding.feedback_supplier == "Opgelost in 1.2"
        assert finding.test_date == datetime(2024, 1, 9, 10, 30, tzinfo=timezone.utc)
        assert finding.supplier_calls[0].id == "65f1c0de9a3b4c5d6e7f8091"
        assert finding.history[0].created_by.email == "po@rivm.nl"

    def test_snapshot_never_carries_history(self):
        finding = Finding.model_validate(_stored_document())
        assert "history" not in finding.history[0].finding.model_dump()
        assert "history" not in finding.fields().model_dump(by_alias=True)

    def test_store_form_has_no_identifier(self):
        finding = Finding.model_validate({**_stored_document(), "_id": "65f1c0de9a3b4c5d6e7f8000"})
        stored = finding.document().to_store()
        assert "_id" not in stored
        assert "id" not in stored
        assert stored["feedbackSupplier"] == "Opgelost in 1.2"
        assert stored["supplierCalls"][0]["contact"] == "Jan"
        assert stored["supplierCalls"][0]["_id"] == "65f1c0de9a3b4c5d6e7f8091"
        assert isinstance(stored["history"][0], dict)

    def test_models_are_frozen(self):
        finding = Finding.model_validate(_stored_document())
        with pytest.raises(ValidationError):
            finding.description = "anders"

    def test_replace_returns_new_instance(self):
        finding = Finding.model_validate(_stored_document())
        changed = finding.replace(description="Anders")
        assert finding.description == "Knop reageert niet"
        assert changed.description == "Anders"
        assert changed.history == finding.history

    def test_document_type_excludes_identifier(self):
        assert "id" not in FindingDocument.model_fields
        assert "history" in FindingDocument.model_fields
        assert "history" not in HistoryEntry.model_fields["finding"].annotation.model_fields


class TestResolveFieldName:
    @pytest.mark.parametrize("name,expected", [
        ("feedbackSupplier", "feedback_supplier"),
        ("feedback_supplier", "feedback_supplier"),
        ("testDate", "test_date"),
        ("status", "status"),
    ])
    def test_editable(self, name, expected):
        assert resolve_field_name(name) == expected

    @pytest.mark.parametrize("name", ["_id", "history", "supplierCalls", "lastUpdatedBySupplier", "unknown"])
    def test_not_editable(self, name):
        assert resolve_field_name(name) is None

    def test_only_free_text_fields_are_text(self):
        assert {"description", "feedback_supplier", "browser", "theme"} <= TEXT_FIELDS
        assert TEXT_FIELDS.isdisjoint({"status", "type", "priority", "supplier", "user_email", "test_date"})
