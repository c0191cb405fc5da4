import copy
from types import SimpleNamespace

import pytest
import pytest_asyncio
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from versepost.app import create_app
from versepost.config import Settings
from versepost.core.connection import Connection
from versepost.core.store import DocumentStore
from versepost.models.post import Post
from versepost.services.posts import PostsService

TEST_URI = "mongodb://localhost:27017/versepost_test"


# --- In-memory stand-in for the parts of the async pymongo API the store uses ---


def _matches(doc, filter):
    return all(doc.get(key) == value for key, value in (filter or {}).items())


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs
        self._sort = []
        self._skip = 0
        self._limit = 0

    def sort(self, spec):
        self._sort = list(spec)
        return self

    def skip(self, n):
        if n < 0:
            raise ValueError("skip must be >= 0")
        self._skip = n
        return self

    def limit(self, n):
        self._limit = n
        return self

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        docs = list(self._docs)
        for key, direction in reversed(self._sort):
            docs.sort(key=lambda d: d.get(key), reverse=direction < 0)
        docs = docs[self._skip:]
        if self._limit:
            docs = docs[: abs(self._limit)]
        for doc in docs:
            yield copy.deepcopy(doc)


class FakeCollection:
    def __init__(self, name):
        self.name = name
        self.documents = []

    def find(self, filter=None, projection=None):
        return FakeCursor([d for d in self.documents if _matches(d, filter)])

    async def find_one(self, filter=None):
        for doc in self.documents:
            if _matches(doc, filter):
                return copy.deepcopy(doc)
        return None

    async def insert_many(self, documents):
        inserted_ids = []
        for doc in documents:
            doc.setdefault("_id", ObjectId())
            self.documents.append(copy.deepcopy(doc))
            inserted_ids.append(doc["_id"])
        return SimpleNamespace(inserted_ids=inserted_ids)

    async def find_one_and_delete(self, filter):
        for i, doc in enumerate(self.documents):
            if _matches(doc, filter):
                return self.documents.pop(i)
        return None

    async def count_documents(self, filter):
        return sum(1 for d in self.documents if _matches(d, filter))


class FakeDatabase:
    def __init__(self, name):
        self.name = name
        self._collections = {}

    def __getitem__(self, name):
        if name not in self._collections:
            self._collections[name] = FakeCollection(name)
        return self._collections[name]


class FakeMongoClient:
    def __init__(self, uri):
        self.uri = uri
        self.closed = False
        self._databases = {}

    def __getitem__(self, name):
        if name not in self._databases:
            self._databases[name] = FakeDatabase(name)
        return self._databases[name]

    async def close(self):
        self.closed = True


# --- Fixtures ---


@pytest_asyncio.fixture
async def connection():
    """An open connection backed by FakeMongoClient."""
    conn = Connection(TEST_URI, client_factory=FakeMongoClient)
    await conn.open()
    yield conn
    await conn.close()


@pytest.fixture
def post_store(connection):
    return DocumentStore.for_document(connection, Post)


@pytest.fixture
def posts_service(post_store):
    return PostsService(post_store)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        mongo_uri=TEST_URI,
        static_dir=str(tmp_path / "public"),
        upload_dir=str(tmp_path / "uploads"),
        log_level="DEBUG",
    )


@pytest.fixture
def app(settings):
    return create_app(settings, connection=Connection(TEST_URI, client_factory=FakeMongoClient))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def posts_collection(app, client):
    """The fake collection behind the running app's post store."""
    return app.state.connection.collection("posts")


@pytest_asyncio.fixture
async def live_connection():
    """A connection to a real MongoDB on localhost; skipped when none answers."""
    conn = Connection(
        TEST_URI,
        client_factory=lambda uri: AsyncMongoClient(uri, serverSelectionTimeoutMS=500),
    )
    db = await conn.open()
    try:
        await db.command("ping")
    except PyMongoError:
        await conn.close()
        pytest.skip("MongoDB is not reachable on localhost:27017")
    yield conn
    await db.drop_collection("posts")
    await conn.close()


@pytest.fixture
def unopened_connection():
    return Connection(TEST_URI, client_factory=FakeMongoClient)
