"""
Application orchestrator.

Single Responsibility: Coordinates the vector store and chat components
to prepare the example dataset and answer one question.

Depends on abstractions (IVectorStore, IChatService), not on concrete
implementations, so either storage backend can be plugged in.
"""

import logging
from typing import List, Optional

from rag_quickstart.corpus import example_documents
from rag_quickstart.interfaces import IChatService, IVectorStore
from rag_quickstart.models import Answer, Document

logger = logging.getLogger(__name__)


class RAGApplication:
    """
    High-level RAG workflow.

    1. Reset storage and insert the example passages
    2. Embed the question
    3. Retrieve the nearest passage
    4. Ask the chat model, using that passage as context
    """

    def __init__(self, vector_store: IVectorStore, chat_service: IChatService):
        """
        Initialize the application with injected dependencies.

        Args:
            vector_store: Store for persisting and searching passages.
            chat_service: Service that produces the final answer.
        """
        self.vector_store = vector_store
        self.chat_service = chat_service

    async def prepare_dataset(self, documents: Optional[List[Document]] = None) -> List[Document]:
        """
        Reset storage and insert the documents one at a time.

        Args:
            documents: Passages to store; defaults to the example corpus.

        Returns:
            The stored documents, in insertion order.
        """
        if documents is None:
            documents = example_documents()

        await self.vector_store.reset()

        stored = []
        for document in documents:
            stored.append(await self.vector_store.insert(document))

        logger.info(f"Prepared dataset with {len(stored)} documents")
        return stored

    async def ask(self, question: str) -> Answer:
        """
        Answer a question using the single nearest stored passage.

        Args:
            question: The user's question, used verbatim.

        Returns:
            The chat model's answer, or a not-found answer if nothing was retrieved.
        """
        query = await self.vector_store.embed_query(question)
        document = await self.vector_store.nearest(query)
        context = document.text if document is not None else None
        return await self.chat_service.answer(question, context)
