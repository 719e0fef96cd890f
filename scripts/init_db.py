"""
Database initialization script.

Run this script to create the database tables on a fresh development
database (Alembic migrations are the normal path).

Usage:
    python scripts/init_db.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

from app.db.init_db import init_db

logger = logging.getLogger("init_db")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s:%(levelname)s] %(message)s")

    try:
        init_db()
        sys.exit(0)

    except Exception:
        logger.exception("Database initialization failed")
        sys.exit(1)
