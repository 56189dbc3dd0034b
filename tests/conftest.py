"""
Pytest configuration and shared fixtures.

External services are never contacted: embeddings come from a keyword
counter and storage is an in-memory list.
"""
import math
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from rag_quickstart.interfaces import IEmbeddingService, IVectorStore
from rag_quickstart.models import Document, Query

KEYWORDS = [
    "chess", "club", "tournament", "gpa", "sophomore",
    "pizza", "founded", "campuses", "library",
]


class KeywordEmbeddingService(IEmbeddingService):
    """Deterministic embeddings: normalized keyword counts. Records every input."""

    def __init__(self):
        self.calls: List[str] = []

    async def embed(self, text: str) -> List[float]:
        self.calls.append(text)
        lowered = text.lower()
        counts = [float(lowered.count(kw)) for kw in KEYWORDS]
        norm = math.sqrt(sum(c * c for c in counts))
        if norm == 0:
            return counts
        return [c / norm for c in counts]


class InMemoryVectorStore(IVectorStore):
    """List-backed store with Euclidean nearest-neighbour lookup."""

    not_found_message = "No relevant information found."

    def __init__(self, embedding_service: IEmbeddingService):
        self.embedding_service = embedding_service
        self.rows: List[Document] = []
        self.reset_count = 0

    async def connect(self) -> None:
        pass

    async def reset(self) -> None:
        self.rows = []
        self.reset_count += 1

    async def insert(self, document: Document) -> Document:
        embedding = await self.embedding_service.embed(document.text)
        stored = document.model_copy(update={"embedding": embedding})
        self.rows.append(stored)
        return stored

    async def embed_query(self, text: str) -> Query:
        return Query(text=text, embedding=await self.embedding_service.embed(text))

    async def nearest(self, query: Query) -> Optional[Document]:
        if not self.rows:
            return None
        return min(self.rows, key=lambda d: math.dist(d.embedding, query.embedding))

    async def close(self) -> None:
        pass


def make_chat_completion(content: str) -> MagicMock:
    """Build an object shaped like an OpenAI chat completion response."""
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


def make_embedding_response(vector: List[float]) -> MagicMock:
    """Build an object shaped like an OpenAI embeddings response."""
    response = MagicMock()
    response.data = [MagicMock()]
    response.data[0].embedding = vector
    return response


@pytest.fixture
def embedding_service():
    return KeywordEmbeddingService()


@pytest.fixture
def memory_store(embedding_service):
    return InMemoryVectorStore(embedding_service)


@pytest.fixture
def mock_openai_client():
    """AsyncOpenAI stand-in with awaitable embeddings and chat completions."""
    client = MagicMock()
    client.embeddings.create = AsyncMock(return_value=make_embedding_response([0.1, 0.2, 0.3]))
    client.chat.completions.create = AsyncMock(return_value=make_chat_completion("The club meets weekly."))
    return client


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable Config.from_env reads and stop .env loading."""
    for var in [
        "OPENAI_API_KEY", "DATABASE_URL", "EMBEDDING_MODEL", "CHROMA_EMBEDDING_MODEL",
        "CHAT_MODEL", "EMBEDDING_DIM", "TABLE_NAME", "CHROMA_HOST", "CHROMA_PORT",
        "CHROMA_PERSIST_DIR", "COLLECTION_NAME",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("rag_quickstart.config.load_dotenv", lambda *a, **k: False)
    return monkeypatch
