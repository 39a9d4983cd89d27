"""Exception classes for the finding editor and its store."""


class FindingDeskError(Exception):
    """Base exception for findingdesk."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class ValidationError(FindingDeskError):
    """Field value or field name rejected by the editor."""

    def __init__(self, message: str, details=None):
        super().__init__("VALIDATION_ERROR", message, details, status_code=400)


class NotFoundError(FindingDeskError):
    """Resource not found."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            "NOT_FOUND",
            f"{resource} '{resource_id}' not found",
            status_code=404,
        )


class TransportError(FindingDeskError):
    """Connectivity or serialization failure at the document store boundary."""

    def __init__(self, message: str, details=None):
        super().__init__("TRANSPORT_ERROR", message, details, status_code=502)


class EditorStateError(FindingDeskError):
    """Operation requested while the editor is not in a state that allows it."""

    def __init__(self, operation: str, state: str):
        super().__init__(
            "EDITOR_STATE",
            f"Cannot {operation} while editor is {state}",
            details={"operation": operation, "state": state},
            status_code=409,
        )
