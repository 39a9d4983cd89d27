"""String enums for finding vocabulary and editor lifecycle."""

from enum import StrEnum


class Status(StrEnum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class FindingType(StrEnum):
    BUG = "bug"
    FEATURE_REQUEST = "feature_request"
    INFORMATION_REQUEST = "information_request"


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Supplier(StrEnum):
    IVENTION = "ivention"


class FindingFieldName(StrEnum):
    """Free-text fields a form binds to, by their stored (camelCase) name."""

    DESCRIPTION = "description"
    FEATURE_REQUEST_DESCRIPTION = "featureRequestDescription"
    FEATURE_REQUEST_PROPOSAL = "featureRequestProposal"
    INFORMATION_REQUEST_DESCRIPTION = "informationRequestDescription"
    THEME = "theme"
    EXPECTED_RESULT = "expectedResult"
    ACTUAL_RESULT = "actualResult"
    ADDITIONAL_INFO = "additionalInfo"
    BROWSER = "browser"
    FEEDBACK_TEAM = "feedbackTeam"
    FEEDBACK_PRODUCT_OWNER = "feedbackProductOwner"
    FEEDBACK_CONTRACT_MANAGEMENT = "feedbackContractManagement"
    FEEDBACK_SUPPLIER = "feedbackSupplier"


class NotificationKind(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


class EditorState(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    SAVING = "saving"
    SAVED = "saved"
    LOAD_FAILED = "load_failed"
    CLOSED = "closed"
