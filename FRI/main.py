import logging
import logging.handlers
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Core imports
from packages.fri_core.config import FRIConfig
from packages.fri_core.logging import get_logger

# API Routers
from FRI.api.admin import router as admin_router
from FRI.api.health import router as health_router
from FRI.api.roles import router as roles_router
from FRI.api.session import router as session_router

# Configuration Load
config = FRIConfig.load()
logger = get_logger("fri.main")

def setup_runtime_logging():
    """
    Configure runtime logging to logs/runtime/.
    Adds a file handler specifically for runtime logs.
    """
    base_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../"))
    log_dir = os.environ.get("FRI_LOG_DIR", os.path.join(base_dir, "logs"))
    runtime_dir = os.path.join(log_dir, "runtime")
    os.makedirs(runtime_dir, exist_ok=True)

    log_file = os.path.join(runtime_dir, "runtime.log")
    root = logging.getLogger()
    if any(getattr(h, "baseFilename", None) == log_file for h in root.handlers):
        return

    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=30,
        encoding="utf-8"
    )

    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] [%(name)s] [%(filename)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.INFO)

    # Attach to root logger to capture all events including uvicorn
    root.addHandler(file_handler)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_runtime_logging()
    logger.info(f"Starting {config.PROJECT_NAME} v{config.VERSION}...")

    yield

    # Shutdown
    logger.info("Server shutting down...")

def create_app() -> FastAPI:
    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None
    )

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(health_router, prefix="", tags=["Status"])
    app.include_router(roles_router, prefix="/api/v1")
    app.include_router(session_router, prefix="/api/v1")
    app.include_router(admin_router, prefix="/api/v1")

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("FRI.main:app", host="0.0.0.0", port=8000, reload=True)
