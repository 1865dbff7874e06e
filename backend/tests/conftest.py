from pathlib import Path
import os
import tempfile
import pytest
from sqlmodel import Session

# Must be set before the application package is imported.
TEST_DB = Path(tempfile.gettempdir()) / "student_management_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB}"


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test empty tables."""
    from student_management.database import create_db_and_tables, drop_db_and_tables
    drop_db_and_tables()
    create_db_and_tables()
    yield


@pytest.fixture
def session():
    from student_management.database import engine
    with Session(engine) as s:
        yield s
