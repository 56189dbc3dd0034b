"""
Postgres + pgvector implementation of the vector store.

One table with an auto-increment id, a text column and a fixed-width
vector column. Nearest-neighbour lookup uses the `<->` (Euclidean)
distance operator with LIMIT 1.
"""

import logging
from typing import Optional

import asyncpg
from pgvector.asyncpg import register_vector

from rag_quickstart.interfaces import IEmbeddingService, IVectorStore
from rag_quickstart.models import Document, Query

logger = logging.getLogger(__name__)


class PgVectorStore(IVectorStore):
    """Async Postgres vector store using a single asyncpg connection."""

    not_found_message = "No relevant document found."
    context_prompt = "Use this information: "

    def __init__(
        self,
        database_url: str,
        embedding_service: IEmbeddingService,
        table_name: str = "documents",
        embedding_dim: int = 1536,
    ):
        self.database_url = database_url
        self.embedding_service = embedding_service
        self.table_name = table_name
        self.embedding_dim = embedding_dim
        self.conn: Optional[asyncpg.Connection] = None

    async def connect(self) -> None:
        """Open the connection, enable the vector extension and register its codec."""
        try:
            self.conn = await asyncpg.connect(self.database_url)
        except Exception as e:
            logger.error(f"Failed to connect to Postgres: {e}")
            raise

        await self.conn.execute("CREATE EXTENSION IF NOT EXISTS vector")
        await register_vector(self.conn)
        logger.info("Connected to Postgres with pgvector enabled")

    def _connection(self) -> asyncpg.Connection:
        if self.conn is None:
            raise RuntimeError("PgVectorStore not connected. Call connect() first.")
        return self.conn

    async def reset(self) -> None:
        """Drop the documents table and recreate it empty."""
        conn = self._connection()
        await conn.execute(f"DROP TABLE IF EXISTS {self.table_name}")
        await conn.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {self.table_name} (
                id serial PRIMARY KEY,
                content TEXT,
                embedding vector({self.embedding_dim})
            )
            """
        )
        logger.info(f"Reset table '{self.table_name}' (vector width {self.embedding_dim})")

    def _check_dimension(self, embedding) -> None:
        if len(embedding) != self.embedding_dim:
            raise ValueError(
                f"Embedding dimension mismatch: got {len(embedding)}, "
                f"table expects {self.embedding_dim}"
            )

    async def insert(self, document: Document) -> Document:
        """Embed the document text and insert the (content, embedding) row."""
        conn = self._connection()
        embedding = await self.embedding_service.embed(document.text)
        self._check_dimension(embedding)

        await conn.execute(
            f"INSERT INTO {self.table_name} (content, embedding) VALUES ($1, $2)",
            document.text,
            embedding,
        )
        logger.info(f"Inserted document {document.doc_id} into '{self.table_name}'")
        return document.model_copy(update={"embedding": embedding})

    async def embed_query(self, text: str) -> Query:
        embedding = await self.embedding_service.embed(text)
        return Query(text=text, embedding=embedding)

    async def nearest(self, query: Query) -> Optional[Document]:
        """Return the row with the smallest Euclidean distance to the query embedding."""
        conn = self._connection()
        self._check_dimension(query.embedding)

        row = await conn.fetchrow(
            f"SELECT id, content FROM {self.table_name} ORDER BY embedding <-> $1 LIMIT 1",
            query.embedding,
        )
        if row is None or not row["content"]:
            logger.info("No documents found for query")
            return None

        logger.info(f"Nearest document: row {row['id']}")
        return Document(doc_id=str(row["id"]), text=row["content"])

    async def close(self) -> None:
        """Close the connection if it is open."""
        if self.conn is not None:
            await self.conn.close()
            logger.info("Postgres connection closed")
            self.conn = None
