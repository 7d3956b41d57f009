"""Shared fixtures for core unit tests"""

import pytest
from sqlalchemy import create_engine
from sqlmodel import SQLModel

from mdconvert.crud.models import Conversion  # noqa: F401  registers the table


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("hello")
```
"""


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
