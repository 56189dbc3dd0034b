"""
Configuration module for loading application settings.

Single Responsibility: This module is solely responsible for loading
and validating configuration from environment variables.
"""

import os
import re
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass
class Config:
    """
    Application configuration loaded from environment variables.

    Attributes:
        openai_api_key: OpenAI API key for embeddings and chat completions.
        database_url: Postgres connection string (pgvector backend only).
        embedding_model: OpenAI embedding model used by the pgvector backend.
        chroma_embedding_model: OpenAI embedding model used by the Chroma
            collection's embedding function.
        chat_model: OpenAI chat model used to answer questions.
        temperature: Sampling temperature for the chat model (always 0).
        embedding_dim: Width of the stored embedding vectors.
        table_name: Postgres table holding the documents.
        chroma_host: Host of the ChromaDB HTTP server.
        chroma_port: Port of the ChromaDB HTTP server.
        chroma_persist_dir: If set, use a local persistent Chroma client instead.
        collection_name: Name of the ChromaDB collection.
        distance_function: Chroma HNSW distance metric.
    """
    openai_api_key: str
    database_url: Optional[str] = None
    embedding_model: str = "text-embedding-ada-002"
    chroma_embedding_model: str = "text-embedding-3-small"
    chat_model: str = "gpt-3.5-turbo"
    temperature: float = 0.0
    embedding_dim: int = 1536
    table_name: str = "documents"
    chroma_host: str = "localhost"
    chroma_port: int = 8000
    chroma_persist_dir: Optional[str] = None
    collection_name: str = "personal-infos"
    distance_function: str = "l2"

    def __post_init__(self):
        """Validate configuration."""
        if self.embedding_dim <= 0:
            raise ValueError("embedding_dim must be positive")
        if not _IDENTIFIER_RE.match(self.table_name):
            raise ValueError(f"table_name is not a valid SQL identifier: {self.table_name!r}")
        if self.temperature != 0.0:
            raise ValueError("temperature must be 0 for deterministic answers")

    @classmethod
    def from_env(cls) -> "Config":
        """
        Load configuration from environment variables.

        Loads from a .env file if present, then reads environment variables.

        Returns:
            Config instance with loaded values.

        Raises:
            ValueError: If required environment variables are missing or malformed.
        """
        load_dotenv()

        openai_api_key = os.getenv("OPENAI_API_KEY")
        if not openai_api_key:
            raise ValueError(
                "OPENAI_API_KEY not found in environment. "
                "Please copy .env.example to .env and add your API key."
            )

        try:
            embedding_dim = int(os.getenv("EMBEDDING_DIM", cls.embedding_dim))
            chroma_port = int(os.getenv("CHROMA_PORT", cls.chroma_port))
        except ValueError as e:
            raise ValueError(f"Invalid numeric setting in environment: {e}") from e

        return cls(
            openai_api_key=openai_api_key,
            database_url=os.getenv("DATABASE_URL") or None,
            embedding_model=os.getenv("EMBEDDING_MODEL", cls.embedding_model),
            chroma_embedding_model=os.getenv("CHROMA_EMBEDDING_MODEL", cls.chroma_embedding_model),
            chat_model=os.getenv("CHAT_MODEL", cls.chat_model),
            embedding_dim=embedding_dim,
            table_name=os.getenv("TABLE_NAME", cls.table_name),
            chroma_host=os.getenv("CHROMA_HOST", cls.chroma_host),
            chroma_port=chroma_port,
            chroma_persist_dir=os.getenv("CHROMA_PERSIST_DIR") or None,
            collection_name=os.getenv("COLLECTION_NAME", cls.collection_name),
        )

    def require_database_url(self) -> str:
        """Return the Postgres connection string or fail if it is not configured."""
        if not self.database_url:
            raise ValueError(
                "DATABASE_URL not found in environment. "
                "It is required for the pgvector backend."
            )
        return self.database_url
