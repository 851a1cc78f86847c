import os
from typing import Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

DATABASE_URL = os.getenv("DATABASE_URL", "").strip()

def get_engine(url: Optional[str] = None) -> Optional[Engine]:
    """None when no database is configured: callers run without durable storage."""
    url = (url or DATABASE_URL).strip()
    if not url:
        return None
    return create_engine(url, pool_pre_ping=True)
