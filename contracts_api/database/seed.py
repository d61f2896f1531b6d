"""
Sample profiles, contracts and jobs for local development.
Loaded by scripts/seed_database.py.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy import text

from contracts_api.database.models import Contract, Job, Profile

SEEDED_TABLES = (Profile.__tablename__, Contract.__tablename__, Job.__tablename__)

PROFILES: List[Dict[str, Any]] = [
    {"id": 1, "first_name": "Harry", "last_name": "Potter", "profession": "Wizard", "balance": 1150, "type": "client"},
    {"id": 2, "first_name": "Mr", "last_name": "Robot", "profession": "Hacker", "balance": 231.11, "type": "client"},
    {"id": 3, "first_name": "John", "last_name": "Snow", "profession": "Knows nothing", "balance": 451.3, "type": "client"},
    {"id": 4, "first_name": "Ash", "last_name": "Kethcum", "profession": "Pokemon master", "balance": 1.3, "type": "client"},
    {"id": 5, "first_name": "John", "last_name": "Lenon", "profession": "Musician", "balance": 64, "type": "contractor"},
    {"id": 6, "first_name": "Linus", "last_name": "Torvalds", "profession": "Programmer", "balance": 1214, "type": "contractor"},
    {"id": 7, "first_name": "Alan", "last_name": "Turing", "profession": "Programmer", "balance": 22, "type": "contractor"},
    {"id": 8, "first_name": "Aragorn", "last_name": "II Elessar Telcontarion", "profession": "Fighter", "balance": 314, "type": "contractor"},
]

CONTRACTS: List[Dict[str, Any]] = [
    {"id": 1, "terms": "bla bla bla", "status": "terminated", "client_id": 1, "contractor_id": 5},
    {"id": 2, "terms": "bla bla bla", "status": "in_progress", "client_id": 1, "contractor_id": 6},
    {"id": 3, "terms": "bla bla bla", "status": "in_progress", "client_id": 2, "contractor_id": 6},
    {"id": 4, "terms": "bla bla bla", "status": "in_progress", "client_id": 2, "contractor_id": 7},
    {"id": 5, "terms": "bla bla bla", "status": "new", "client_id": 3, "contractor_id": 8},
    {"id": 6, "terms": "bla bla bla", "status": "in_progress", "client_id": 3, "contractor_id": 7},
    {"id": 7, "terms": "bla bla bla", "status": "in_progress", "client_id": 4, "contractor_id": 7},
    {"id": 8, "terms": "bla bla bla", "status": "in_progress", "client_id": 4, "contractor_id": 6},
    {"id": 9, "terms": "bla bla bla", "status": "in_progress", "client_id": 4, "contractor_id": 8},
]

JOBS: List[Dict[str, Any]] = [
    {"description": "work", "price": 200, "contract_id": 1},
    {"description": "work", "price": 201, "contract_id": 2},
    {"description": "work", "price": 202, "contract_id": 3},
    {"description": "work", "price": 200, "contract_id": 4},
    {"description": "work", "price": 200, "contract_id": 7},
    {"description": "work", "price": 2020, "paid": True, "payment_date": datetime(2020, 8, 15, 19, 11, 26), "contract_id": 7},
    {"description": "work", "price": 200, "paid": True, "payment_date": datetime(2020, 8, 15, 19, 11, 26), "contract_id": 2},
    {"description": "work", "price": 200, "paid": True, "payment_date": datetime(2020, 8, 16, 19, 11, 26), "contract_id": 3},
    {"description": "work", "price": 200, "paid": True, "payment_date": datetime(2020, 8, 17, 19, 11, 26), "contract_id": 1},
    {"description": "work", "price": 200, "paid": True, "payment_date": datetime(2020, 8, 17, 19, 11, 26), "contract_id": 5},
    {"description": "work", "price": 21, "paid": True, "payment_date": datetime(2020, 8, 10, 19, 11, 26), "contract_id": 1},
    {"description": "work", "price": 21, "paid": True, "payment_date": datetime(2020, 8, 15, 19, 11, 26), "contract_id": 2},
    {"description": "work", "price": 121, "paid": True, "payment_date": datetime(2020, 8, 15, 19, 11, 26), "contract_id": 3},
    {"description": "work", "price": 121, "paid": True, "payment_date": datetime(2020, 8, 14, 23, 11, 26), "contract_id": 3},
]


def seed(store) -> None:
    """Recreate all tables and load the sample rows."""
    store.drop_tables()
    store.create_tables()
    with store.session() as s:
        s.add_all(Profile(**p) for p in PROFILES)
        s.flush()
        s.add_all(Contract(**c) for c in CONTRACTS)
        s.flush()
        s.add_all(Job(**j) for j in JOBS)
        s.flush()
        reset_sequences(s, store.engine.dialect.name)


def reset_sequences(s, dialect_name: str) -> None:
    """Move Postgres id sequences past the explicitly inserted ids."""
    if dialect_name != "postgresql":
        return
    for table in SEEDED_TABLES:
        s.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"COALESCE((SELECT MAX(id) FROM {table}), 1))"
            )
        )
