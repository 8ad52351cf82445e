"""Unit tests for the repositories without a database."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from noteful.core.exceptions import StoreError
from noteful.core.models import Folder, Note
from noteful.core.repositories import FolderRepository, NoteRepository


class FakeScalarResult:
    def __init__(self, scalar=None, scalars_list=None):
        self._scalar = scalar
        self._scalars_list = scalars_list or []

    def scalar_one_or_none(self):
        return self._scalar

    def scalars(self):
        class _It:
            def __init__(self, data):
                self._data = data
            def all(self):
                return self._data
        return _It(self._scalars_list)


class FakeSession:
    def __init__(self, results_iter=(), fail_on=None):
        self._results = list(results_iter)
        self.fail_on = fail_on
        self.executed = []
        self.added = []
        self.deleted = []
        self.commits = 0
        self.rollbacks = 0
        self.refreshed = []

    def _maybe_fail(self, op):
        if self.fail_on == op:
            raise OperationalError("stmt", {}, Exception("db down"))

    async def execute(self, stmt):
        self.executed.append(stmt)
        self._maybe_fail("execute")
        return self._results.pop(0) if self._results else FakeScalarResult(None)

    def add(self, obj):
        self.added.append(obj)

    async def commit(self):
        self._maybe_fail("commit")
        self.commits += 1

    async def rollback(self):
        self.rollbacks += 1

    async def refresh(self, obj, attrs=None):
        self.refreshed.append(obj)

    async def delete(self, obj):
        self.deleted.append(obj)


async def test_list_all_orders_by_id():
    folders = [Folder(id=1, folder_name="a"), Folder(id=2, folder_name="b")]
    session = FakeSession([FakeScalarResult(scalars_list=folders)])
    result = await FolderRepository(session).list_all()
    assert result == folders
    assert "ORDER BY noteful_folders.id ASC" in str(session.executed[0])


async def test_get_by_id():
    note = Note(id=3, note_name="n", content="c", folder_id=1)
    session = FakeSession([FakeScalarResult(note)])
    repo = NoteRepository(session)
    assert await repo.get_by_id(3) is note
    assert await repo.get_by_id(4) is None


async def test_create_commits_and_refreshes():
    session = FakeSession()
    folder = await FolderRepository(session).create({"folder_name": "x"})
    assert isinstance(folder, Folder)
    assert session.added == [folder]
    assert session.commits == 1
    assert session.refreshed == [folder]


async def test_update_sets_attributes():
    note = Note(id=1, note_name="old", content="c", folder_id=1)
    session = FakeSession()
    updated = await NoteRepository(session).update(note, {"note_name": "new"})
    assert updated.note_name == "new"
    assert session.commits == 1


async def test_delete():
    folder = Folder(id=5, folder_name="x")
    session = FakeSession()
    await FolderRepository(session).delete(folder)
    assert session.deleted == [folder]
    assert session.commits == 1


async def test_read_failure_becomes_store_error():
    session = FakeSession(fail_on="execute")
    with pytest.raises(StoreError) as exc:
        await NoteRepository(session).list_all()
    assert exc.value.operation == "list"
    assert exc.value.message == "server error"
    assert isinstance(exc.value.__cause__, OperationalError)
    assert session.rollbacks == 1


async def test_write_failure_rolls_back():
    class IntegritySession(FakeSession):
        async def commit(self):
            raise IntegrityError("insert", {}, Exception("FOREIGN KEY constraint failed"))

    session = IntegritySession()
    with pytest.raises(StoreError) as exc:
        await NoteRepository(session).create({"note_name": "n", "content": "c", "folder_id": 99})
    assert exc.value.operation == "create"
    assert exc.value.context["table"] == "noteful_notes"
    assert session.rollbacks == 1
