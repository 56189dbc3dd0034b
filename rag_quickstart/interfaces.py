"""
Abstract interfaces for the embedding, vector store, and chat components.

High-level modules depend on these abstractions, not on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from rag_quickstart.models import Answer, Document, Query


class IEmbeddingService(ABC):
    """Interface for embedding generation services."""

    @abstractmethod
    async def embed(self, text: str) -> List[float]:
        """
        Generate an embedding vector for the given text.

        Args:
            text: The input text to embed, passed to the model unmodified.

        Returns:
            A list of floats representing the embedding vector.
        """
        pass


class IVectorStore(ABC):
    """
    Interface for vector storage backends.

    A store persists (text, embedding) pairs and answers a single
    nearest-neighbour query.
    """

    not_found_message: str = "No relevant information found."
    context_prompt: str = "Answer the next question using this information: "

    @abstractmethod
    async def connect(self) -> None:
        """Open the backend connection."""
        pass

    @abstractmethod
    async def reset(self) -> None:
        """Drop and recreate storage so it is empty."""
        pass

    @abstractmethod
    async def insert(self, document: Document) -> Document:
        """Embed the document's text and store the pair."""
        pass

    @abstractmethod
    async def embed_query(self, text: str) -> Query:
        """Embed a question with the same embedding source used for documents."""
        pass

    @abstractmethod
    async def nearest(self, query: Query) -> Optional[Document]:
        """Return the single closest stored document, or None if storage is empty."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the backend connection."""
        pass


class IChatService(ABC):
    """Interface for context-grounded answer generation."""

    @abstractmethod
    async def answer(self, question: str, context: Optional[str]) -> Answer:
        """
        Answer the question using the given context passage.

        If context is empty, no model call is made and a not-found
        answer is returned.
        """
        pass
