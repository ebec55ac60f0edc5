"""Alembic 마이그레이션 테스트.

Migration tests — the head revision matches the ORM metadata and the
downgrade removes every table again.
"""

from pathlib import Path

import pytest
from alembic import command
from alembic.autogenerate import compare_metadata
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy import create_engine, inspect

from prac_query.config import settings
from prac_query.database import Base

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def migration_db(tmp_path, monkeypatch):
    """임시 SQLite 파일을 DATABASE_URL로 지정합니다."""
    db_file = tmp_path / "migrate.db"
    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite+aiosqlite:///{db_file}")

    cfg = Config()
    cfg.set_main_option("script_location", str(ROOT / "alembic"))

    engine = create_engine(f"sqlite:///{db_file}")
    yield cfg, engine
    engine.dispose()


def test_head_matches_models(migration_db):
    cfg, engine = migration_db
    command.upgrade(cfg, "head")

    with engine.connect() as conn:
        diff = compare_metadata(MigrationContext.configure(conn), Base.metadata)
    assert diff == []


def test_downgrade_drops_tables(migration_db):
    cfg, engine = migration_db
    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
