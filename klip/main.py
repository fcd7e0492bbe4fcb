from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from klip.api.routers import auth, feed, users, video
from klip.core.config import get_settings
from klip.core.errors import KlipError
from klip.core.logging import logger
from klip.db import init_db

settings = get_settings()

app = FastAPI(title=settings.PROJECT_NAME)

@app.on_event("startup")
def on_startup():
    init_db()
    logger.info(f"{settings.PROJECT_NAME} started")

@app.exception_handler(KlipError)
async def klip_exception_handler(request: Request, exc: KlipError):
    logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": exc.code, "message": exc.message},
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in errors
    ) or "Invalid request"
    return JSONResponse(
        status_code=400,
        content={"code": "INVALID_INPUT", "message": message},
    )

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"code": "INTERNAL_ERROR", "message": "Internal server error"},
    )

app.include_router(auth.router)
app.include_router(feed.router)
app.include_router(video.router)
app.include_router(users.router)
