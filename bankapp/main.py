"""
Main FastAPI application entry point.
Sets up the API, middleware, error handlers and routes.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bankapp.core.config import settings
from bankapp.core.errors import register_error_handlers
from bankapp.core.logging_config import setup_logging
from bankapp.database import engine, Base
from bankapp.api import accounts, loans, transactions, transfers

setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    Base.metadata.create_all(bind=engine)
    log.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield
    engine.dispose()


# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    docs_url="/docs",  # Swagger UI
    redoc_url="/redoc",  # ReDoc UI
    lifespan=lifespan
)

# CORS middleware (allows frontend to call API)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/")
def root():
    """
    Root endpoint - service banner.
    """
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "accounts": f"{settings.API_V1_PREFIX}/accounts",
            "transactions": f"{settings.API_V1_PREFIX}/transactions",
            "transfers": f"{settings.API_V1_PREFIX}/transfers",
            "bill_payments": f"{settings.API_V1_PREFIX}/bill-payments",
            "loans": f"{settings.API_V1_PREFIX}/loans",
            "loan_applications": f"{settings.API_V1_PREFIX}/admin/loan-applications"
        }
    }


@app.get("/health")
def health_check():
    """
    Health check endpoint for monitoring.
    """
    return {
        "status": "healthy",
        "database": "connected"
    }


# Include API routers
app.include_router(accounts.router, prefix=settings.API_V1_PREFIX)
app.include_router(transactions.router, prefix=settings.API_V1_PREFIX)
app.include_router(transfers.router, prefix=settings.API_V1_PREFIX)
app.include_router(loans.router, prefix=settings.API_V1_PREFIX)
app.include_router(loans.admin_router, prefix=settings.API_V1_PREFIX)
