"""
ChromaDB implementation of the vector store.

Uses a single named collection whose embedding function calls OpenAI,
so documents are added as plain text with explicit string ids.
"""

import logging
from typing import Optional

import chromadb
from chromadb.api.types import EmbeddingFunction
from chromadb.config import Settings
from chromadb.utils.embedding_functions import OpenAIEmbeddingFunction

from rag_quickstart.interfaces import IVectorStore
from rag_quickstart.models import Document, Query

logger = logging.getLogger(__name__)


class ChromaVectorStore(IVectorStore):
    """
    Vector store backed by a ChromaDB collection.

    Talks to a Chroma HTTP server by default; a persist directory switches
    to a local persistent client.
    """

    not_found_message = "No relevant information found."
    context_prompt = "Answer the next question using this information: "

    def __init__(
        self,
        collection_name: str,
        embedding_function: EmbeddingFunction,
        host: str = "localhost",
        port: int = 8000,
        persist_directory: Optional[str] = None,
        distance_function: str = "l2",
        client=None,
    ):
        self.collection_name = collection_name
        self.embedding_function = embedding_function
        self.host = host
        self.port = port
        self.persist_directory = persist_directory
        self.distance_function = distance_function
        self.client = client
        self.collection = None

    @classmethod
    def with_openai_embeddings(
        cls,
        api_key: str,
        model_name: str = "text-embedding-3-small",
        **kwargs,
    ) -> "ChromaVectorStore":
        """Build a store whose collection embeds text with an OpenAI model."""
        embedding_function = OpenAIEmbeddingFunction(api_key=api_key, model_name=model_name)
        return cls(embedding_function=embedding_function, **kwargs)

    async def connect(self) -> None:
        """Create the Chroma client if one was not injected."""
        if self.client is not None:
            return

        settings = Settings(anonymized_telemetry=False)
        if self.persist_directory:
            self.client = chromadb.PersistentClient(path=self.persist_directory, settings=settings)
            logger.info(f"Using persistent ChromaDB at {self.persist_directory}")
        else:
            self.client = chromadb.HttpClient(host=self.host, port=self.port, settings=settings)
            logger.info(f"Connected to ChromaDB server at {self.host}:{self.port}")

    def _existing_collection_names(self) -> list:
        # Depending on the chromadb release, list_collections yields names or Collection objects
        return [getattr(c, "name", c) for c in self.client.list_collections()]

    async def reset(self) -> None:
        """Delete the collection if it exists, then create it empty."""
        if self.client is None:
            raise RuntimeError("ChromaVectorStore not connected. Call connect() first.")

        if self.collection_name in self._existing_collection_names():
            self.client.delete_collection(name=self.collection_name)
            logger.info(f"Deleted existing collection '{self.collection_name}'")

        self.collection = self.client.create_collection(
            name=self.collection_name,
            embedding_function=self.embedding_function,
            metadata={"hnsw:space": self.distance_function},
        )
        logger.info(f"Created collection '{self.collection_name}'")

    def _get_collection(self):
        if self.collection is None:
            if self.client is None:
                raise RuntimeError("ChromaVectorStore not connected. Call connect() first.")
            self.collection = self.client.get_collection(
                name=self.collection_name,
                embedding_function=self.embedding_function,
            )
        return self.collection

    async def insert(self, document: Document) -> Document:
        """Add the document text; the collection's embedding function embeds it."""
        try:
            self._get_collection().add(
                ids=[document.doc_id],
                documents=[document.text],
            )
        except Exception as e:
            logger.error(f"Error adding document {document.doc_id} to ChromaDB: {e}")
            raise

        logger.info(f"Added document {document.doc_id} to '{self.collection_name}'")
        return document

    async def embed_query(self, text: str) -> Query:
        """Embed the question with the collection's embedding function."""
        vectors = self.embedding_function([text])
        return Query(text=text, embedding=[float(x) for x in vectors[0]])

    async def nearest(self, query: Query) -> Optional[Document]:
        """Return the single closest document in the collection."""
        try:
            results = self._get_collection().query(
                query_embeddings=[query.embedding],
                n_results=1,
            )
        except Exception as e:
            logger.error(f"Error querying ChromaDB: {e}")
            raise

        # Chroma returns lists of lists (one list per query embedding)
        ids = results.get("ids") or [[]]
        documents = results.get("documents") or [[]]
        if not ids[0] or not documents[0] or not documents[0][0]:
            logger.info("No documents found for query")
            return None

        logger.info(f"Nearest document: {ids[0][0]}")
        return Document(doc_id=ids[0][0], text=documents[0][0])

    async def close(self) -> None:
        # HTTP and persistent clients hold no connection that needs closing
        self.collection = None
