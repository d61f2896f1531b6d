"""Tests for the sample data loader."""

from contracts_api.database.seed import PROFILES, SEEDED_TABLES, reset_sequences


class RecordingSession:
    def __init__(self):
        self.statements = []

    def execute(self, stmt):
        self.statements.append(str(stmt))


def test_new_rows_get_ids_after_seeded_ones(store, factory):
    new_id = factory.profile(first_name="New")
    assert new_id == len(PROFILES) + 1


def test_reset_sequences_on_postgres():
    s = RecordingSession()
    reset_sequences(s, "postgresql")
    assert len(s.statements) == len(SEEDED_TABLES)
    for table, sql in zip(SEEDED_TABLES, s.statements):
        assert f"pg_get_serial_sequence('{table}', 'id')" in sql
        assert f"SELECT MAX(id) FROM {table}" in sql


def test_reset_sequences_skipped_elsewhere():
    s = RecordingSession()
    reset_sequences(s, "sqlite")
    assert s.statements == []
