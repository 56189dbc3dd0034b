"""
Minimal Retrieval-Augmented Generation (RAG) demo.

Embeds a handful of fixed passages, stores them in a vector-capable backend,
retrieves the single nearest passage for a user question and asks an OpenAI
chat model to answer using that passage.

Two interchangeable storage backends are provided:
- Postgres with the pgvector extension (asyncpg)
- ChromaDB collection with an OpenAI embedding function
"""

__version__ = "1.0.0"
