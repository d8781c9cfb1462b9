"""
Read-only access to the canned answers of the trained corpus.
"""

from typing import Dict, List, Mapping, Optional
from types import MappingProxyType


class ResponseRepository:
    """Intent label -> canned answer, as loaded from the corpus."""

    def __init__(self, responses: Mapping[str, str]):
        self._responses = MappingProxyType(dict(responses))

    def get(self, intent_label: str) -> Optional[str]:
        """Canned answer for an intent, or None when it has none (missing or blank)."""
        response = self._responses.get(intent_label)
        if response is None or not response.strip():
            return None
        return response

    def has_answer(self, intent_label: str) -> bool:
        return self.get(intent_label) is not None

    def intents(self) -> List[str]:
        """Known intent labels in corpus order."""
        return list(self._responses)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._responses)

    def __contains__(self, intent_label: object) -> bool:
        return intent_label in self._responses

    def __len__(self) -> int:
        return len(self._responses)
