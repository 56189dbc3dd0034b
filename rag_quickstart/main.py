"""
Main entry point for the RAG demo.

USAGE INSTRUCTIONS:
-------------------

1. Setup:
   - Copy .env.example to .env and add your OpenAI API key:
     OPENAI_API_KEY=sk-your-actual-api-key-here

2. Start a backend:
   - pgvector: a Postgres with the vector extension available, DATABASE_URL set
   - chroma:   a ChromaDB server on localhost:8000 (or set CHROMA_PERSIST_DIR)

3. Run:
   $ rag-quickstart --backend pgvector
   $ rag-quickstart --backend chroma --question "When does the chess club meet?"
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from rag_quickstart.application import RAGApplication
from rag_quickstart.chat import OpenAIChatService
from rag_quickstart.chroma_store import ChromaVectorStore
from rag_quickstart.cli import CLI
from rag_quickstart.config import Config
from rag_quickstart.embeddings import OpenAIEmbeddingService
from rag_quickstart.interfaces import IVectorStore
from rag_quickstart.pgvector_store import PgVectorStore

logger = logging.getLogger(__name__)

BACKENDS = ("pgvector", "chroma")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Answer one question with retrieval-augmented generation."
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default="pgvector",
        help="Vector storage backend (default: pgvector).",
    )
    parser.add_argument(
        "--question",
        default=None,
        help="Question to ask. Read from stdin when omitted.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr).",
    )
    return parser.parse_args(argv)


def build_vector_store(backend: str, config: Config) -> IVectorStore:
    """Wire up the concrete store for the chosen backend."""
    if backend == "pgvector":
        embedding_service = OpenAIEmbeddingService(
            api_key=config.openai_api_key,
            model=config.embedding_model,
        )
        return PgVectorStore(
            database_url=config.require_database_url(),
            embedding_service=embedding_service,
            table_name=config.table_name,
            embedding_dim=config.embedding_dim,
        )

    if backend == "chroma":
        return ChromaVectorStore.with_openai_embeddings(
            api_key=config.openai_api_key,
            model_name=config.chroma_embedding_model,
            collection_name=config.collection_name,
            host=config.chroma_host,
            port=config.chroma_port,
            persist_directory=config.chroma_persist_dir,
            distance_function=config.distance_function,
        )

    raise ValueError(f"Unknown backend: {backend}")


async def run(backend: str, config: Config, question: Optional[str] = None) -> None:
    """Open the store, run one question through the pipeline and close the store."""
    vector_store = build_vector_store(backend, config)
    chat_service = OpenAIChatService(
        api_key=config.openai_api_key,
        model=config.chat_model,
        not_found_message=vector_store.not_found_message,
        context_prompt=vector_store.context_prompt,
    )
    app = RAGApplication(vector_store=vector_store, chat_service=chat_service)

    await vector_store.connect()
    try:
        await CLI(app).run(question)
    finally:
        await vector_store.close()


def main(argv: Optional[List[str]] = None) -> None:
    """
    Initialize and run the application.

    Configuration errors exit with status 1; any other failure propagates
    with its traceback.
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = Config.from_env()
        if args.backend == "pgvector":
            config.require_database_url()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    asyncio.run(run(args.backend, config, args.question))


if __name__ == "__main__":
    main()
