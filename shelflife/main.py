import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import auth as auth_router
from .api import reviews as reviews_router
from .api import sessions as sessions_router
from .api import users as users_router
from .api import works as works_router
from .core.config import get_settings
from .core.errors import ShelfLifeError
from .core.logging import setup_logging
from .database import engine
from .schemas.error import ErrorResponse

setup_logging()
logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(title="Shelf Life API", version="0.1.0")

origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
)

app.include_router(auth_router.router)
app.include_router(users_router.router)
app.include_router(works_router.router)
app.include_router(sessions_router.router)
app.include_router(reviews_router.router)


@app.get("/health", tags=["meta"])
def health():
    return {"status": "ok", "environment": settings.environment}


@app.get("/health/db", tags=["meta"])
def health_db():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return {"status": "ok", "database": "reachable"}
    except Exception:
        logger.exception("Database health check failed")
        return {"status": "error", "database": "unreachable"}


# Global error handlers

def _error_response(
    request: Request,
    status_code: int,
    message: str,
    errors: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    try:
        reason = HTTPStatus(status_code).phrase
    except ValueError:
        reason = "Error"
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        error=reason,
        message=message,
        path=request.url.path,
        errors=errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


@app.exception_handler(ShelfLifeError)
async def domain_exception_handler(request: Request, exc: ShelfLifeError):
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _error_response(request, exc.status_code, exc.message, getattr(exc, "errors", None), headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors: Dict[str, str] = {}
    for err in exc.errors():
        # drop the "body"/"query"/"path" prefix, keep the client's field name
        loc = [str(part) for part in err.get("loc", ())[1:]] or [str(p) for p in err.get("loc", ())]
        field = ".".join(loc) or "request"
        errors.setdefault(field, err.get("msg", "invalid value"))
    return _error_response(request, 400, "Validation failed", errors)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(request, exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(request, 500, "Unexpected error")
