import pytest
from sqlalchemy.exc import OperationalError

from institute_admin.errors import StorageUnavailable
from institute_admin.repositories import BatchRepository
from tests.conftest import make_batch


def _failing_query(db, failures):
    real_query = db.query
    calls = {"n": 0}

    def query(*args, **kwargs):
        calls["n"] += 1
        if calls["n"] <= failures:
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))
        return real_query(*args, **kwargs)

    return query, calls


def test_read_is_retried_once(db, manager, monkeypatch):
    make_batch(manager)
    query, calls = _failing_query(db, failures=1)
    monkeypatch.setattr(db, "query", query)

    batches = BatchRepository(db).list()

    assert [b.id for b in batches] == ["WDB1"]
    assert calls["n"] == 2


def test_persistent_failure_surfaces_as_storage_unavailable(db, monkeypatch):
    query, calls = _failing_query(db, failures=10)
    monkeypatch.setattr(db, "query", query)

    with pytest.raises(StorageUnavailable):
        BatchRepository(db).list()
    assert calls["n"] == 2


def test_storage_failure_maps_to_503(client, monkeypatch):
    def boom(*args, **kwargs):
        raise StorageUnavailable("Storage is unavailable.")

    monkeypatch.setattr(BatchRepository, "list", boom)
    resp = client.get("/api/batches")
    assert resp.status_code == 503
    assert resp.json()["code"] == "STORAGE_UNAVAILABLE"
