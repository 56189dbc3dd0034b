"""Fixed example passages embedded and stored at start-up."""

from typing import List

from rag_quickstart.models import Document

STUDENT_INFO = """Alexandra Thompson, a 19-year-old computer science sophomore with a 3.7 GPA,
is a member of the programming and chess clubs who enjoys pizza, swimming, and hiking
in her free time in hopes of working at a tech company after graduating from the University of Washington."""

CLUB_INFO = """The university chess club provides an outlet for students to come together and enjoy playing
the classic strategy game of chess. Members of all skill levels are welcome, from beginners learning
the rules to experienced tournament players. The club typically meets a few times per week to play casual games,
participate in tournaments, analyze famous chess matches, and improve members' skills."""

UNIVERSITY_INFO = """The University of Washington, founded in 1861 in Seattle, is a public research university
with over 45,000 students across three campuses in Seattle, Tacoma, and Bothell.
As the flagship institution of the six public universities in Washington state,
UW encompasses over 500 buildings and 20 million square feet of space,
including one of the largest library systems in the world."""


def example_documents() -> List[Document]:
    """Return fresh Document instances for the three example passages, in insertion order."""
    return [
        Document(doc_id="id1", text=STUDENT_INFO),
        Document(doc_id="id2", text=CLUB_INFO),
        Document(doc_id="id3", text=UNIVERSITY_INFO),
    ]
