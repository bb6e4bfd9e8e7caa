import os
import sys
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import FileResponse, JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import APP_NAME, DATABASE_URL, FRONTEND_DIR, HOST, LOG_LEVEL, PORT
from database import Database
from errors import WellnessError
from middleware import log_requests, security_headers
from routes.auth_routes import router as auth_router
from routes.plan_routes import router as plan_router
from routes.profile_routes import router as profile_router

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the connection pool on startup and release it on shutdown."""
    app.state.database = None
    app.state.db_ready = False
    try:
        database = Database(app.state.database_url)
        app.state.database = database
        database.init()
        app.state.db_ready = True
        logger.info("Database initialized successfully (%s).", database.dialect)
    except Exception:
        # Keep serving; store-backed endpoints answer 503 until restart
        logger.exception("Database init failed")

    yield

    if app.state.database is not None:
        app.state.database.dispose()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(WellnessError)
    async def wellness_error_handler(request: Request, exc: WellnessError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
        return _error(400, "Invalid request")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(OperationalError)
    async def store_unreachable_handler(request: Request, exc: OperationalError):
        logger.exception("Database unreachable during %s %s", request.method, request.url.path)
        return _error(503, "Database unavailable")

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Database error during %s %s", request.method, request.url.path)
        return _error(500, "Internal server error")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception during %s %s", request.method, request.url.path)
        return _error(500, "Internal server error")


def mount_frontend(app: FastAPI, frontend_dir: str):
    """Serve the single-page client for every GET that is not an API route."""
    frontend_root = os.path.realpath(frontend_dir)

    if os.path.isdir(frontend_root):
        @app.get("/{full_path:path}", include_in_schema=False)
        async def serve_spa(full_path: str):
            if full_path == "api" or full_path.startswith("api/"):
                return _error(404, "Not found")

            candidate = os.path.realpath(os.path.join(frontend_root, full_path))
            inside = os.path.commonpath([frontend_root, candidate]) == frontend_root
            if full_path and inside and os.path.isfile(candidate):
                return FileResponse(candidate)

            index_file = os.path.join(frontend_root, "index.html")
            if os.path.exists(index_file):
                return FileResponse(index_file)
            return _error(404, "Frontend not found")
    else:
        @app.get("/", include_in_schema=False)
        async def fallback():
            return {"status": f"{APP_NAME} is running, but frontend folder not found."}


def create_app(database_url: str | None = None, frontend_dir: str | None = None) -> FastAPI:
    app = FastAPI(title=APP_NAME, lifespan=lifespan)
    app.state.database_url = database_url or DATABASE_URL
    app.state.database = None
    app.state.db_ready = False

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Last added runs outermost: headers wrap the log, which catches errors
    app.middleware("http")(log_requests)
    app.middleware("http")(security_headers)

    register_exception_handlers(app)

    @app.get("/api/health")
    async def health(request: Request):
        database = request.app.state.database
        return {
            "status": "ok",
            "message": f"{APP_NAME} is running",
            "database": database.dialect if database is not None else "unconfigured",
            "platform": sys.platform,
            "dbReady": bool(request.app.state.db_ready),
        }

    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(plan_router)

    # Must come last so it only catches what the API routes did not
    mount_frontend(app, frontend_dir or FRONTEND_DIR)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=HOST, port=PORT)
