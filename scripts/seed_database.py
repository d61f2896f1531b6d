#!/usr/bin/env python3
"""
Drop and recreate the app tables, then load the sample profiles, contracts and jobs.

Uses DATABASE_URL (or the database url in config/app_config.yml).
"""

from __future__ import annotations
import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

sys.path.insert(0, str(Path(__file__).parent.parent))

from contracts_api.database.seed import CONTRACTS, JOBS, PROFILES, seed
from contracts_api.database.store import Store
from contracts_api.utils.config_loader import load_app_config


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the contracts database with sample data")
    parser.add_argument("--yes", action="store_true", help="Do not ask before dropping existing tables")
    args = parser.parse_args()

    cfg = load_app_config()
    store = Store(cfg.database.url, pool_size=cfg.database.pool_size, max_overflow=cfg.database.max_overflow)
    target = store.engine.url.render_as_string(hide_password=True)

    if not args.yes:
        answer = input(f"This drops all tables in {target}. Continue? [y/N] ").strip().lower()
        if answer not in ("y", "yes"):
            print("Aborted")
            return 1

    seed(store)
    print(f"Seeded {target}: {len(PROFILES)} profiles, {len(CONTRACTS)} contracts, {len(JOBS)} jobs")
    return 0


if __name__ == "__main__":
    sys.exit(main())
