# backend/ledger/main.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .api import projects_router, files_router, todos_router, hours_router
from .config import settings
from .database import Database
from .exceptions import LedgerError
from .utils.logging import api_logger


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the API. The database handle is opened on startup and closed on shutdown."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database(settings.DATABASE_URL)
        db.create_all()
        app.state.database = db
        yield
        db.dispose()

    app = FastAPI(title="Freelance Ledger API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.mount("/uploads", StaticFiles(directory=str(settings.UPLOADS_PATH)), name="uploads")

    app.include_router(projects_router)
    app.include_router(files_router)
    app.include_router(todos_router)
    app.include_router(hours_router)

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError):
        log = api_logger.error if exc.status_code >= 500 else api_logger.warning
        log(exc.message, extra={
            "path": request.url.path,
            "error_type": type(exc).__name__
        })
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.get("/")
    async def root():
        return {"message": "Freelance Ledger API is running"}

    return app


app = create_app()
