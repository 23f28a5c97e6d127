# config.py
# Role: Central configuration for the transaction ledger.
#       Loads environment variables (optionally from a .env file)
#       and exposes them as typed module-level constants.

"""
Application configuration.

All settings come from environment variables; a local `.env` file is read
on import so development setups don't need to export anything.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Base directory of the project (where this module lives)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_truthy(name: str, default: str = "0") -> bool:
    v = os.getenv(name, default)
    return str(v).strip().lower() in ("1", "true", "yes", "y", "on")


# ── Database ──────────────────────────────────────────────
# Folder for the default SQLite DB (created by db.py if missing)
DB_DIR: str = os.path.join(BASE_DIR, "database")
DATABASE_URL: str = os.getenv(
    "DATABASE_URL",
    f"sqlite:///{os.path.join(DB_DIR, 'finance.db')}",
)

# ── Identity provider ─────────────────────────────────────
# Secret used to verify session tokens. Empty = auth disabled (dev mode).
AUTH_SECRET: str = os.getenv("AUTH_SECRET", "")
AUTH_ALGORITHM: str = os.getenv("AUTH_ALGORITHM", "HS256")
AUTH_COOKIE_NAME: str = os.getenv("AUTH_COOKIE_NAME", "__session")

# ── Development helpers ───────────────────────────────────
ENABLE_SEED: bool = _env_truthy("ENABLE_SEED", "0")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
