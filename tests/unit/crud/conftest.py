"""Shared fixtures for crud unit tests"""

import pytest
from sqlalchemy import create_engine
from sqlmodel import SQLModel, Session

from mdconvert.core.utils.hashing import sha256
from mdconvert.crud.models import Conversion


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Fresh session per test; changes are not committed."""
    with Session(engine) as s:
        yield s


@pytest.fixture(name="conversion")
def conversion_fixture(session):
    """A minimal Conversion persisted to the session."""
    c = Conversion(
        source_path="docs/hello.md",
        markdown="# Hello",
        html="<h1>Hello</h1>",
        hash=sha256("# Hello"),
    )
    session.add(c)
    session.flush()
    return c
