# db.py
# Role: Database bootstrap for the transaction ledger.
#       Defines the SQLAlchemy engine, session factory, and declarative Base.
#       Also ensures the on-disk database directory exists for the default SQLite URL.

"""
Database setup for the transaction ledger.

- Uses DATABASE_URL from config (SQLite at <project_root>/database/finance.db by default)
- Ensures the 'database' folder exists when the default SQLite file is used.
"""

import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

import config

if config.DATABASE_URL.startswith("sqlite:///") and config.DB_DIR in config.DATABASE_URL:
    os.makedirs(config.DB_DIR, exist_ok=True)  # ensure folder exists

# For SQLite, we need check_same_thread=False for FastAPI (threaded request handling)
connect_args = {"check_same_thread": False} if config.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    config.DATABASE_URL,
    connect_args=connect_args,
)

# Standard session factory used via dependency injection (see app/deps.py:get_db)
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Declarative base class for ORM models
Base = declarative_base()
