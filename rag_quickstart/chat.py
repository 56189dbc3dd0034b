"""
Answer generation using OpenAI Chat Completions.

The retrieved passage is sent as an assistant message followed by the
user's question. Decoding is deterministic (temperature 0).
"""

import logging
from typing import Optional

import openai
from openai import AsyncOpenAI

from rag_quickstart.interfaces import IChatService
from rag_quickstart.models import Answer

logger = logging.getLogger(__name__)


class OpenAIChatService(IChatService):
    """RAG answer generator using OpenAI Chat Completions."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        not_found_message: str = "No relevant information found.",
        context_prompt: str = "Answer the next question using this information: ",
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model
        self.temperature = 0.0
        self.not_found_message = not_found_message
        self.context_prompt = context_prompt
        self.client = client or AsyncOpenAI(api_key=api_key)

    async def answer(self, question: str, context: Optional[str]) -> Answer:
        """Generate an answer grounded in the context passage."""
        if not context:
            logger.info("No context retrieved, skipping chat completion")
            return Answer(
                question=question,
                context=None,
                text=self.not_found_message,
                found=False,
            )

        messages = [
            {"role": "assistant", "content": f"{self.context_prompt}{context}"},
            {"role": "user", "content": question},
        ]

        logger.info(f"Requesting chat completion from {self.model}")
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                messages=messages,
            )
        except openai.APIError as e:
            logger.error(f"OpenAI API error during chat completion: {e}")
            raise

        content = response.choices[0].message.content or ""
        return Answer(question=question, context=context, text=content, found=True)
