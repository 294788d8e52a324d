from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class FormValidationError(AppException):
    def __init__(self, message: str, fields: list[str] | None = None):
        self.fields = list(fields or [])
        super().__init__(message, status_code=422)


class VisitRequestNotFound(AppException):
    def __init__(self, request_id: str):
        self.request_id = request_id
        super().__init__(f"Visit request {request_id} not found", status_code=404)


class InvalidStatusTransition(AppException):
    def __init__(self, request_id: str, current: str, target: str):
        self.request_id = request_id
        self.current = current
        self.target = target
        super().__init__(
            f"Visit request {request_id} cannot move from {current} to {target}",
            status_code=409,
        )


class AuthError(AppException):
    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, status_code=401)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(FormValidationError)
    async def _form_validation_handler(_: Request, exc: FormValidationError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message, "fields": exc.fields},
        )

    @app.exception_handler(AppException)
    async def _app_exception_handler(_: Request, exc: AppException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
        )

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(_: Request, exc: Exception):
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error", "detail": str(exc)},
        )
