"""
Apiary - FastAPI Application Entry Point

Exposes variable resolution, request export and auth config defaults
to the desktop client.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import APP_NAME, APP_VERSION, get_log_file, get_log_level
from .exceptions import register_exception_handlers
from .logging_setup import configure_logging
from .routers import auth, export, variables


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    # Startup: configure logging from the environment
    configure_logging(get_log_level(), get_log_file())
    yield


app = FastAPI(
    title=APP_NAME,
    description="Variable resolution and request export for the Apiary API client",
    version=APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Configure CORS middleware
# The desktop client serves its UI from a local origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register global exception handlers
register_exception_handlers(app)


@app.get("/")
async def root():
    """Root endpoint returning API information."""
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register routers
app.include_router(variables.router)
app.include_router(export.router)
app.include_router(auth.router)
