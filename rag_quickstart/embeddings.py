"""
Embedding service implementations.

Single Responsibility: This module is responsible for generating
embeddings using external APIs.
"""

import logging
from typing import List, Optional

import openai
from openai import AsyncOpenAI

from rag_quickstart.interfaces import IEmbeddingService

logger = logging.getLogger(__name__)


class OpenAIEmbeddingService(IEmbeddingService):
    """
    OpenAI embedding service.

    One API call per text. No batching and no retry: failures from the
    SDK (auth, network, rate limit) propagate to the caller.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "text-embedding-ada-002",
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model
        self.client = client or AsyncOpenAI(api_key=api_key)

        logger.info(f"Initialized OpenAI embedding service with model: {self.model}")

    async def embed(self, text: str) -> List[float]:
        """Generate an embedding for the literal input text."""
        logger.debug(f"Embedding text of {len(text)} characters")

        try:
            response = await self.client.embeddings.create(
                model=self.model,
                input=text,
            )
        except openai.APIError as e:
            logger.error(f"OpenAI API error while embedding: {e}")
            raise

        embedding = list(response.data[0].embedding)
        logger.debug(f"Received embedding vector of dimension: {len(embedding)}")
        return embedding
