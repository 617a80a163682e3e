from typing import Dict, List

SESSION_KEY = "career_advisor_history"
# oldest turns drop off past this
MAX_TURNS = 40


class ConversationStore:
    """Chat history for one visitor, kept in their Django session."""

    def __init__(self, session, key: str = SESSION_KEY):
        self.session = session
        self.key = key

    def history(self) -> List[Dict[str, str]]:
        return list(self.session.get(self.key, []))

    def append(self, role: str, content: str) -> None:
        turns = self.history()
        turns.append({"role": role, "content": content})
        self.session[self.key] = turns[-MAX_TURNS:]
        self.session.modified = True

    def clear(self) -> None:
        self.session.pop(self.key, None)
        self.session.modified = True
