# tests/conftest.py
import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from main import app


def _matches(doc, query):
    return all(doc.get(key) == value for key, value in (query or {}).items())


def _sort_key(field):
    return lambda doc: (doc.get(field) is None, doc.get(field))


# In-memory stand-in for the subset of Motor the services use
class MockCursor:
    def __init__(self, docs):
        self._docs = docs
        self._skip = 0
        self._limit = 0

    def sort(self, field, direction=1):
        self._docs = sorted(self._docs, key=_sort_key(field), reverse=direction < 0)
        return self

    def skip(self, count):
        self._skip = count
        return self

    def limit(self, count):
        self._limit = count
        return self

    async def to_list(self, length=None):
        docs = self._docs[self._skip:]
        if self._limit:
            docs = docs[:self._limit]
        if length:
            docs = docs[:length]
        return copy.deepcopy(docs)


class MockCollection:
    def __init__(self, database, name):
        self.database = database
        self.name = name
        self.docs = []
        self.unique_indexes = {}  # field -> index name

    def _check_available(self):
        if self.database.unavailable:
            raise ServerSelectionTimeoutError("mock store unavailable")

    def _check_unique(self, doc, ignore=None):
        fields = {"_id": "_id_", **self.unique_indexes}
        for field, index_name in fields.items():
            if field not in doc:
                continue
            for other in self.docs:
                if other is not ignore and other.get(field) == doc[field]:
                    raise DuplicateKeyError(
                        f"E11000 duplicate key error collection: {self.name} index: {index_name}",
                        11000,
                        {"keyPattern": {field: 1}, "keyValue": {field: doc[field]}},
                    )

    def _first(self, query):
        return next((doc for doc in self.docs if _matches(doc, query)), None)

    def _apply(self, doc, update):
        updated = copy.deepcopy(doc)
        updated.update(update.get("$set", {}))
        for field, amount in update.get("$inc", {}).items():
            updated[field] = updated.get(field, 0) + amount
        return updated

    def _replace(self, doc, updated):
        self._check_unique(updated, ignore=doc)
        self.docs[self.docs.index(doc)] = updated

    def seed(self, docs):
        seeded = []
        for doc in docs:
            doc = dict(doc)
            doc.setdefault("_id", ObjectId())
            self.docs.append(doc)
            seeded.append(doc)
        return seeded

    async def create_index(self, keys, unique=False, name=None, **kwargs):
        self._check_available()
        if unique:
            self.unique_indexes[keys] = name or f"{keys}_1"
        return name

    def find(self, query=None, projection=None):
        self._check_available()
        return MockCursor([doc for doc in self.docs if _matches(doc, query)])

    async def find_one(self, query=None, projection=None, sort=None):
        self._check_available()
        docs = [doc for doc in self.docs if _matches(doc, query)]
        for field, direction in reversed(sort or []):
            docs = sorted(docs, key=_sort_key(field), reverse=direction < 0)
        return copy.deepcopy(docs[0]) if docs else None

    async def count_documents(self, query):
        self._check_available()
        return sum(1 for doc in self.docs if _matches(doc, query))

    async def insert_one(self, doc):
        self._check_available()
        doc.setdefault("_id", ObjectId())
        self._check_unique(doc)
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"], acknowledged=True)

    async def update_one(self, query, update):
        self._check_available()
        doc = self._first(query)
        if doc is None:
            return SimpleNamespace(matched_count=0, modified_count=0)
        updated = self._apply(doc, update)
        self._replace(doc, updated)
        return SimpleNamespace(matched_count=1, modified_count=int(updated != doc))

    async def find_one_and_update(self, query, update, return_document=False, upsert=False):
        self._check_available()
        doc = self._first(query)
        if doc is None:
            if not upsert:
                return None
            doc = {**query}
            doc.setdefault("_id", ObjectId())
            self.docs.append(doc)
        updated = self._apply(doc, update)
        self._replace(doc, updated)
        # ReturnDocument.AFTER is True
        return copy.deepcopy(updated if return_document else doc)

    async def delete_one(self, query):
        self._check_available()
        doc = self._first(query)
        if doc is None:
            return SimpleNamespace(deleted_count=0, acknowledged=True)
        self.docs.remove(doc)
        return SimpleNamespace(deleted_count=1, acknowledged=True)


class MockDatabase:
    name = "HeliverseDB"

    def __init__(self):
        self.collections = {}
        self.unavailable = False

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = MockCollection(self, name)
        return self.collections[name]

    async def command(self, name):
        if self.unavailable:
            raise ServerSelectionTimeoutError("mock store unavailable")
        return {"ok": 1.0}


def make_user(n=1, **overrides):
    user = {
        "first_name": f"First{n}",
        "last_name": f"Last{n}",
        "email": f"user{n}@example.com",
        "gender": "Male" if n % 2 else "Female",
        "avatar": f"https://robohash.org/user{n}.png?size=50x50",
        "domain": "Sales",
        "available": n % 3 != 0,
    }
    user.update(overrides)
    return user


@pytest.fixture
def db():
    return MockDatabase()


@pytest.fixture
def client(db):
    app.state.db = db
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user_payload():
    return make_user


@pytest.fixture
def seed_users(db):
    """Insert ``count`` users with ids 1..count, bypassing the API."""
    def seed(count):
        return db["Users"].seed(dict(make_user(n), id=n) for n in range(1, count + 1))
    return seed


@pytest.fixture
def seed_teams(db):
    def seed(*names):
        return db["Teams"].seed({"name": name, "members": []} for name in names)
    return seed
