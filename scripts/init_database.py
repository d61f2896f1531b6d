#!/usr/bin/env python3
"""
Create the profiles, contracts and jobs tables.

Uses DATABASE_URL (or the database url in config/app_config.yml).
Does NOT drop existing tables.
"""

from __future__ import annotations
import sys
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

# Make sure the package is on sys.path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError

from contracts_api.database.store import Store
from contracts_api.utils.config_loader import load_app_config


def main() -> int:
    cfg = load_app_config()

    try:
        store = Store(cfg.database.url, pool_size=cfg.database.pool_size, max_overflow=cfg.database.max_overflow)
        store.ping()
        print("✅ Database connection OK")

        # Create all tables (only missing ones will be added)
        store.create_tables()
        tables = inspect(store.engine).get_table_names()
        print("✅ App tables now exist:", sorted(tables))
        return 0

    except OperationalError as e:
        print(f"❌ Failed to connect to database: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
