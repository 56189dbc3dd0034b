"""
Command-line interface for the RAG demo.

Single Responsibility: Handle user interaction and display results.
"""

from typing import Optional

from rag_quickstart.application import RAGApplication

PROMPT = "What would you like to ask? "


class CLI:
    """
    Reads one question, runs it through the application and prints the answer.

    There is no loop: one question per run.
    """

    def __init__(self, app: RAGApplication):
        self.app = app

    def read_question(self) -> str:
        """Prompt on stdout and read a single line from stdin."""
        return input(PROMPT)

    async def run(self, question: Optional[str] = None) -> None:
        """
        Prepare the dataset, ask the question and print the answer text.

        Args:
            question: Question to ask; read from stdin when None.
        """
        await self.app.prepare_dataset()

        if question is None:
            question = self.read_question()

        answer = await self.app.ask(question)
        print(answer.text)
