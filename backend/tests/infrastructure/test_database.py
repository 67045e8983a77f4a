"""Database Session Manager — verifies error mapping and rollback.

Tests:
    - Integrity violations surface as DatabaseError(operation="commit")
    - Any other SQLAlchemy failure surfaces as DatabaseError(operation="execute")
    - A failed session leaves nothing behind
"""

import pytest
from sqlalchemy import func, select, text

from wallride.core.errors import DatabaseError
from wallride.db.base import Base
from wallride.infrastructure.database import DatabaseSessionManager
from wallride.models.custom_field import CustomField
import wallride.models  # noqa: F401


@pytest.fixture
async def manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'wallride.db'}")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


async def test_duplicate_code_is_integrity_error(manager):
    async with manager.session() as db:
        db.add(CustomField(code="price", name="Price", field_type="number"))
        await db.commit()

    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            db.add(CustomField(code="price", name="Price again", field_type="number"))
            await db.commit()
    assert exc_info.value.operation == "commit"
    assert exc_info.value.http_status == 503


async def test_bad_statement_is_execute_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.operation == "execute"


async def test_failed_session_is_rolled_back(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            db.add(CustomField(code="a", name="A", field_type="text"))
            await db.flush()
            await db.execute(text("SELECT * FROM no_such_table"))

    async with manager.session() as db:
        assert await db.scalar(select(func.count()).select_from(CustomField)) == 0
