"""
RAG domain models for documents, queries, and answers.

These models represent the entities flowing through the pipeline:
- Document: Stored passage with its embedding
- Query: User question with its embedding
- Answer: Model response (or the not-found message)
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class Document(BaseModel):
    """Represents a stored text passage."""

    doc_id: str
    text: str
    embedding: Optional[List[float]] = None


class Query(BaseModel):
    """Represents an embedded user question. Never persisted."""

    text: str
    embedding: List[float] = Field(default_factory=list)


class Answer(BaseModel):
    """Represents the response printed to the user."""

    question: str
    context: Optional[str] = None
    text: str
    found: bool = True
