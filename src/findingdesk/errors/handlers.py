"""FastAPI exception handlers producing the ErrorResponse body."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from findingdesk.errors.exceptions import FindingDeskError
from findingdesk.models.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(FindingDeskError)
    async def findingdesk_error_handler(request: Request, exc: FindingDeskError):
        trace_id = getattr(request.state, "trace_id", "unknown")
        if exc.status_code >= 500:
            logger.error(
                "store_failure",
                extra={"path": request.url.path, "trace_id": trace_id, "code": exc.code},
            )
        error_response = ErrorResponse(
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
                trace_id=trace_id,
                timestamp=datetime.now(timezone.utc),
            ),
            notifications=getattr(request.state, "notifications", None),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump(mode="json", exclude_none=True),
        )
