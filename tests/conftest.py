import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event

# Ensure project root is importable during pytest collection
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# main builds a module-level app on import; keep it off any real MySQL server
os.environ.setdefault('MILN_DATABASE_URL', 'sqlite://')

from config.settings import Settings
from main import create_app


@pytest.fixture
def settings(tmp_path):
    """Settings for a throwaway sqlite database with the table created on startup."""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'collector.sqlite3'}",
        generate_schemas=True,
        log_file=str(tmp_path / 'collector.log'),
        log_info=True,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_connections(app):
    """Count DBAPI connections opened by the app's engine."""
    opened = []
    event.listen(app.state.engine, 'connect', lambda dbapi_conn, record: opened.append(dbapi_conn))
    return opened


@pytest.fixture
def fetch_row(app):
    """Read a playthrough row straight from the database: None, or (id, payload)."""
    from sqlalchemy import select
    from apps.collector.models import Playthrough

    def _fetch(playthrough_id):
        with app.state.session_factory() as db:
            row = db.scalars(select(Playthrough).where(Playthrough.id == playthrough_id)).first()
            if row is None:
                return None
            return row.id, row.playthrough

    return _fetch
