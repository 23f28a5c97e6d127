# main.py
# Role: Application entry point for the transaction ledger.
#       Initializes the FastAPI app, creates database tables,
#       mounts static assets, and registers all route modules.

"""
Main FastAPI app for the monthly transaction ledger.

Here we only:
- create the FastAPI app
- set up static files
- create DB tables
- include route modules
"""

import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from db import Base, engine
import models  # noqa: F401  (registers tables on Base.metadata)
from app.logging_setup import get_logger
from app.routes_root import router as root_router
from app.routes_transactions import router as transactions_router
from app.routes_tasks import router as tasks_router
from app.routes_dashboard import router as dashboard_router

logger = get_logger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "app", "static")


# -------------------------------------------------------------------
# App & DB setup
# -------------------------------------------------------------------

# Create database tables (only if they don't exist yet).
# This is safe to run on startup for SQLite and development usage.
Base.metadata.create_all(bind=engine)

# FastAPI application instance
app = FastAPI(title="Transaction Ledger")

# Serve static files (CSS) from /static
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# -------------------------------------------------------------------
# Include routers
# -------------------------------------------------------------------

# Root / landing routes
app.include_router(root_router)

# Month listings, summary, available months, inserts
app.include_router(transactions_router)

# To-do tasks
app.include_router(tasks_router)

# Dashboard (month navigation, filters, summary counters)
app.include_router(dashboard_router)

logger.info("Transaction ledger app initialised")
