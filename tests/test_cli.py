"""Tests for the CLI and the main entry point."""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from rag_quickstart import main as main_module
from rag_quickstart.application import RAGApplication
from rag_quickstart.chat import OpenAIChatService
from rag_quickstart.chroma_store import ChromaVectorStore
from rag_quickstart.cli import CLI, PROMPT
from rag_quickstart.config import Config
from rag_quickstart.pgvector_store import PgVectorStore


@pytest.fixture
def app(memory_store, mock_openai_client):
    chat_service = OpenAIChatService(api_key="sk-test", client=mock_openai_client)
    return RAGApplication(vector_store=memory_store, chat_service=chat_service)


class TestCLI:
    """Test the single-question prompt."""

    @pytest.mark.asyncio
    async def test_reads_one_line_and_prints_answer(self, app, monkeypatch, capsys):
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return "Tell me about the chess club tournaments"

        monkeypatch.setattr("builtins.input", fake_input)

        await CLI(app).run()

        assert prompts == [PROMPT]
        assert capsys.readouterr().out == "The club meets weekly.\n"

    @pytest.mark.asyncio
    async def test_question_argument_skips_prompt(self, app, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", MagicMock(side_effect=AssertionError("prompted")))

        await CLI(app).run("What is the chess club?")

        assert capsys.readouterr().out == "The club meets weekly.\n"

    @pytest.mark.asyncio
    async def test_prints_not_found_message(self, memory_store, mock_openai_client, capsys):
        memory_store.insert = AsyncMock()  # nothing is stored
        chat_service = OpenAIChatService(api_key="sk-test", client=mock_openai_client)
        app = RAGApplication(vector_store=memory_store, chat_service=chat_service)

        await CLI(app).run("anything")

        assert capsys.readouterr().out == "No relevant information found.\n"
        mock_openai_client.chat.completions.create.assert_not_called()


class TestWiring:
    """Test backend construction and the entry point."""

    def test_build_pgvector_store(self):
        config = Config(openai_api_key="sk-test", database_url="postgresql://localhost/db")

        with patch("rag_quickstart.embeddings.AsyncOpenAI"):
            store = main_module.build_vector_store("pgvector", config)

        assert isinstance(store, PgVectorStore)
        assert store.embedding_dim == 1536
        assert store.embedding_service.model == "text-embedding-ada-002"

    def test_build_pgvector_store_requires_database_url(self):
        config = Config(openai_api_key="sk-test")

        with patch("rag_quickstart.embeddings.AsyncOpenAI"):
            with pytest.raises(ValueError, match="DATABASE_URL"):
                main_module.build_vector_store("pgvector", config)

    def test_build_chroma_store(self):
        config = Config(openai_api_key="sk-test")

        with patch("rag_quickstart.chroma_store.OpenAIEmbeddingFunction") as mock_ef:
            store = main_module.build_vector_store("chroma", config)

        mock_ef.assert_called_once_with(api_key="sk-test", model_name="text-embedding-3-small")
        assert isinstance(store, ChromaVectorStore)
        assert store.collection_name == "personal-infos"

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            main_module.build_vector_store("sqlite", Config(openai_api_key="sk-test"))

    def test_parse_args_defaults(self):
        args = main_module.parse_args([])

        assert args.backend == "pgvector"
        assert args.question is None

    def test_main_exits_on_configuration_error(self, clean_env, capsys):
        with pytest.raises(SystemExit) as exc:
            main_module.main(["--backend", "chroma"])

        assert exc.value.code == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_main_requires_database_url_for_pgvector(self, clean_env, capsys):
        clean_env.setenv("OPENAI_API_KEY", "sk-test")

        with pytest.raises(SystemExit) as exc:
            main_module.main([])

        assert exc.value.code == 1
        assert "DATABASE_URL" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_run_closes_store_when_pipeline_fails(self, memory_store):
        memory_store.connect = AsyncMock()
        memory_store.close = AsyncMock()
        memory_store.reset = AsyncMock(side_effect=ConnectionError("gone"))
        config = Config(openai_api_key="sk-test")

        with patch.object(main_module, "build_vector_store", return_value=memory_store), \
                patch("rag_quickstart.chat.AsyncOpenAI"):
            with pytest.raises(ConnectionError):
                await main_module.run("chroma", config, "q")

        memory_store.connect.assert_awaited_once()
        memory_store.close.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("backend,store_cls,prefix", [
        ("pgvector", PgVectorStore, "Use this information: "),
        ("chroma", ChromaVectorStore, "Answer the next question using this information: "),
    ])
    async def test_run_uses_backend_context_prompt(
        self, memory_store, mock_openai_client, backend, store_cls, prefix
    ):
        memory_store.context_prompt = store_cls.context_prompt
        memory_store.not_found_message = store_cls.not_found_message
        config = Config(openai_api_key="sk-test")

        with patch.object(main_module, "build_vector_store", return_value=memory_store), \
                patch("rag_quickstart.chat.AsyncOpenAI", return_value=mock_openai_client):
            await main_module.run(backend, config, "When does the chess club meet for tournaments?")

        messages = mock_openai_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages[0]["role"] == "assistant"
        assert messages[0]["content"].startswith(prefix)
        assert messages[0]["content"].endswith("improve members' skills.")
