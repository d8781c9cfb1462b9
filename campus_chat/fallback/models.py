from dataclasses import dataclass
from typing import Optional

GEMINI_SOURCE = "Gemini AI"
ERROR_SOURCE = "Error"


@dataclass(frozen=True)
class FallbackResult:
    """Answer produced by one fallback invocation."""

    answer_text: Optional[str]
    source_label: str

    @property
    def has_answer(self) -> bool:
        return bool(self.answer_text and self.answer_text.strip())
