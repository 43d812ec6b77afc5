from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from utils.logger import get_logger

logger = get_logger("Global_Exception")


class DomainError(Exception):
    """Base class for failures raised by the service layer."""
    status_code = 400
    code = "domain_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    status_code = 404
    code = "not_found"


class ReservationStateError(DomainError):
    status_code = 409
    code = "invalid_reservation_state"


class GiftCardError(DomainError):
    status_code = 400
    code = "gift_card_error"


class InactiveCardError(GiftCardError):
    code = "inactive_card"


class ExpiredCardError(GiftCardError):
    code = "expired_card"


class InsufficientBalanceError(GiftCardError):
    code = "insufficient_balance"


class CodeGenerationError(DomainError):
    status_code = 503
    code = "code_generation_failed"


class AppException(HTTPException):
    def __init__(self, status_code: int, detail: str, code: str | None = None):
        super().__init__(status_code=status_code, detail=detail)
        self.code = code


async def app_exception_handler(request: Request, exc: AppException):
    content = {"detail": exc.detail}
    if exc.code:
        content["code"] = exc.code
    return JSONResponse(status_code=exc.status_code, content=content)


async def domain_exception_handler(request: Request, exc: DomainError):
    logger.warning(f"{exc.code}: {exc.message}", extra={"path": request.url.path})
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code}
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # report offending field paths, dropping the "body"/"path"/"query" location prefix
    errors = [
        {"path": [str(p) for p in err.get("loc", ())[1:]], "message": err.get("msg")}
        for err in exc.errors()
    ]
    logger.info("Request validation failed", extra={"path": request.url.path, "errors": errors})
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": errors}
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={"path": request.url.path}
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )
