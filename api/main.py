import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from categories import router as categories_router
from commands import router as commands_router
from core import db, envelope, errors, settings
from core.logging_config import configure_logging
from stats import router as stats_router
from tips import router as tips_router

logger = logging.getLogger("commandlib.api")

STATIC_SUBDIRS = ("stylesheets", "scripts", "images")


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    logger.info("Starting Linux Command Library API")
    # Open the shared connection once per process; failure aborts startup.
    db.init_connection()
    try:
        yield
    finally:
        db.close_connection()


app = FastAPI(title="Linux Command Library API", lifespan=lifespan)

if settings.cors_enabled():
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


@app.exception_handler(errors.AppError)
async def app_error_handler(_: Request, exc: errors.AppError) -> JSONResponse:
    logger.error("Application error (%s): %s", type(exc).__name__, exc.detail)
    return JSONResponse(status_code=exc.status_code, content=envelope.failure(exc.public_message))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Routing misses (unknown path, wrong method) still answer with the envelope.
    logger.warning("%s %s rejected: %d %s", request.method, request.url.path, exc.status_code, exc.detail)
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content=envelope.failure(message), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected request parameters: %s", exc.errors())
    error = errors.InvalidInput()
    return JSONResponse(status_code=error.status_code, content=envelope.failure(error.public_message))


@app.exception_handler(Exception)
async def unhandled_error_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error: %s", exc)
    error = errors.InternalError()
    return JSONResponse(status_code=error.status_code, content=envelope.failure(error.public_message))


app.include_router(stats_router, tags=["stats"])
app.include_router(categories_router, tags=["categories"])
app.include_router(commands_router, tags=["commands"])
app.include_router(tips_router, tags=["tips"])

_static_root = Path(settings.static_dir())
for _subdir in STATIC_SUBDIRS:
    if (_static_root / _subdir).is_dir():
        app.mount(f"/{_subdir}", StaticFiles(directory=_static_root / _subdir), name=_subdir)


@app.get("/health")
def health() -> dict:
    return envelope.ok("Service is healthy")


@app.get("/", response_model=None)
def root() -> FileResponse | dict:
    index = _static_root / "index.html"
    if index.is_file():
        return FileResponse(index, media_type="text/html; charset=utf-8")
    return {"message": "linux command library api"}


def run() -> None:
    import uvicorn

    configure_logging()
    host, port = settings.bind_host_port()
    logger.info("Starting Linux Command Library API server on http://%s:%d", host, port)
    logger.info("CORS enabled: %s", settings.cors_enabled())
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    run()
