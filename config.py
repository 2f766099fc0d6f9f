"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.

MONGODB_URI is mandatory: importing this module without it raises,
so the process fails at start instead of on the first query.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def require_env(name: str) -> str:
    """
    Read a mandatory environment variable.

    Raises:
        RuntimeError: If the variable is unset or blank.
    """
    value = os.getenv(name, "").strip()
    if not value:
        raise RuntimeError(
            f"Please define the {name} environment variable inside .env"
        )
    return value


# ── MongoDB ───────────────────────────────────────────────
MONGODB_URI: str = require_env("MONGODB_URI")
MONGODB_DB_NAME: str = os.getenv("MONGODB_DB_NAME", "event_booking")

# ── Collections ───────────────────────────────────────────
EVENTS_COLLECTION: str = "events"
BOOKINGS_COLLECTION: str = "bookings"

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
