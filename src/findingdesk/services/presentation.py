"""Read-only rendering helpers for the supplier finding form."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from findingdesk.models.finding import Finding

UNKNOWN_AUTHOR = "onbekend"
DISPLAY_TZ = ZoneInfo("Europe/Amsterdam")

# Form order; labels as shown to suppliers.
SUMMARY_LABELS: list[tuple[str, str]] = [
    ("description", "Omschrijving"),
    ("supplier", "Leverancier"),
    ("type", "Type"),
    ("priority", "Prioriteit"),
    ("feature_request_description", "Beschrijving van de verbetering"),
    ("feature_request_proposal", "Oplossingsrichting"),
    ("information_request_description", "Vraag aan de leverancier"),
    ("theme", "Thema"),
    ("expected_result", "Verwachte uitkomst"),
    ("actual_result", "Daadwerkelijke uitkomst"),
    ("additional_info", "Extra informatie"),
    ("browser", "Browser"),
    ("status", "Status"),
]

FEEDBACK_LABELS: list[tuple[str, str]] = [
    ("status", "Status"),
    ("feedback_team", "Terugkoppeling van het team"),
    ("feedback_product_owner", "Terugkoppeling van de product owner"),
    ("feedback_contract_management", "Terugkoppeling van contractmanagement"),
    ("feedback_supplier", "Terugkoppeling vanuit de leverancier"),
]


def format_test_date(value: datetime | None) -> str:
    """Dutch short date and time in Amsterdam local time, e.g. ``05-03-2024 15:07``.

    Naive values are taken as UTC, which is how the store keeps them.
    """
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(DISPLAY_TZ).strftime("%d-%m-%Y %H:%M")


def ticket_title(finding: Finding) -> str:
    if finding.supplier:
        return f"Ticket voor {finding.supplier}"
    return "Ticket"


def screenshot_name(finding: Finding) -> str:
    """Name under which screenshots for this finding are filed."""
    return f"{format_test_date(finding.test_date)} - {finding.user_email or UNKNOWN_AUTHOR}"


def _labelled(finding: Finding, labels: list[tuple[str, str]]) -> list[dict[str, str]]:
    lines = []
    for field, label in labels:
        value = getattr(finding, field)
        if value:
            lines.append({"label": label, "value": str(value)})
    return lines


def summary_lines(finding: Finding) -> list[dict[str, str]]:
    """Populated fields of the ticket panel, in form order."""
    return _labelled(finding, SUMMARY_LABELS)


def feedback_lines(finding: Finding) -> list[dict[str, str]]:
    return _labelled(finding, FEEDBACK_LABELS)


def history_overview(finding: Finding) -> list[dict[str, str]]:
    """One row per history entry, newest first."""
    rows = []
    for entry in reversed(finding.history):
        rows.append({
            "created_on": format_test_date(entry.created_on),
            "created_by": entry.created_by.email,
            "status": entry.finding.status or "",
            "description": entry.finding.description or "",
        })
    return rows
