"""Tests for duplicates detected by the unique indexes at insert time.

Concurrent creates can both pass the $or lookup before either inserts. The
unique indexes must then reject the loser, and the API must report it as a
400 duplicate rather than a 201 or a 500.
"""

import threading

import pytest
from fastapi.testclient import TestClient

from mpocket.application.services.record_service import RecordService
from mpocket.domain.exceptions import DuplicateKeyError
from mpocket.domain.repositories.record_repository import RecordRepository
from mpocket.infrastructure.db.mongo_connection import MongoClientManager
from mpocket.infrastructure.db.mongo_record_repository import MongoRecordRepository
from tests.conftest import HEADERS, SAMPLE_RECORD


class BlindLookupRepository(MongoRecordRepository):
    """Repository whose lookup never sees existing records."""

    def find_one(self, predicate):
        return None


class BarrierRepository(MongoRecordRepository):
    """Holds every lookup until ``parties`` callers have finished theirs.

    Inserts are serialized, as the server serializes unique index checks.
    """

    def __init__(self, client, parties, collection_name=None):
        super().__init__(client, collection_name=collection_name)
        self._barrier = threading.Barrier(parties, timeout=5)
        self._insert_lock = threading.Lock()

    def find_one(self, predicate):
        found = super().find_one(predicate)
        self._barrier.wait()
        return found

    def insert(self, record):
        with self._insert_lock:
            return super().insert(record)


def _wire(container, repository):
    container.register_singleton(RecordRepository, repository)
    container.register_singleton(RecordService, RecordService(repository))


@pytest.fixture
def blind_client(app, container, settings):
    """Test client whose duplicate lookup always misses."""
    repository = BlindLookupRepository(
        container.get(MongoClientManager),
        collection_name=settings.records_collection,
    )
    _wire(container, repository)
    with TestClient(app) as test_client:
        yield test_client


class TestInsertTimeDuplicate:
    """Tests for the unique index fallback."""

    def test_insert_time_duplicate_is_400_with_error(self, blind_client, records_collection):
        first = blind_client.post("/products", json=SAMPLE_RECORD, headers=HEADERS)
        candidate = dict(SAMPLE_RECORD, mobile="1112223333", pancard="QQQQQ1111Q")
        second = blind_client.post("/products", json=candidate, headers=HEADERS)

        assert first.status_code == 201
        assert second.status_code == 400
        data = second.json()
        assert data["message"] == "❌ Duplicate key error"
        assert data["error"]["code"] == 11000
        assert "errmsg" in data["error"]
        assert records_collection.count_documents({"email": SAMPLE_RECORD["email"]}) == 1

    def test_insert_time_duplicate_differs_from_lookup_duplicate(self, blind_client):
        """Both are 400s; only the body tells them apart."""
        blind_client.post("/products", json=SAMPLE_RECORD, headers=HEADERS)
        race = blind_client.post("/products", json=SAMPLE_RECORD, headers=HEADERS)

        assert race.status_code == 400
        assert "error" in race.json()


class TestConcurrentCreates:
    """Two creates for the same email racing through the service."""

    def test_only_one_concurrent_create_wins(self, container, settings, records_collection):
        repository = BarrierRepository(
            container.get(MongoClientManager),
            parties=2,
            collection_name=settings.records_collection,
        )
        repository.ensure_connected()
        service = RecordService(repository)

        payloads = [
            dict(mobile="1000000001", pancard="AAAAA0001A"),
            dict(mobile="1000000002", pancard="AAAAA0002A"),
        ]
        results = []
        errors = []

        def create(overrides):
            try:
                results.append(
                    service.create_record(
                        mobile=overrides["mobile"],
                        name="Racer",
                        dob="2001-01-01",
                        email="same@x.com",
                        employee_type="staff",
                        pancard=overrides["pancard"],
                    )
                )
            except DuplicateKeyError as e:
                errors.append(e)

        threads = [threading.Thread(target=create, args=(p,)) for p in payloads]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert len(results) == 1
        assert len(errors) == 1
        assert errors[0].details["code"] == 11000
        assert records_collection.count_documents({"email": "same@x.com"}) == 1
