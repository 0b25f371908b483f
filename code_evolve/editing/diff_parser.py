"""
Diff parser — splits a free-form LLM response into explanations and
SEARCH/REPLACE blocks.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# Markers
SEARCH_MARKER = "<<<<<<< SEARCH"
SEPARATOR = "======="
REPLACE_MARKER = ">>>>>>> REPLACE"

# Non-greedy so adjacent blocks never swallow each other
_BLOCK_PATTERN = re.compile(
    re.escape(SEARCH_MARKER) + r"\s*(.*?)\s*" + re.escape(SEPARATOR)
    + r"\s*(.*?)\s*" + re.escape(REPLACE_MARKER),
    re.DOTALL,
)


@dataclass
class Suggestion:
    """One explanation, optionally paired with a search/replace edit."""
    explanation: str = ""
    search_block: Optional[str] = None
    replace_block: Optional[str] = None

    @property
    def is_diff(self) -> bool:
        return self.search_block is not None and self.replace_block is not None


class DiffParser:
    """Parse SEARCH/REPLACE suggestions from LLM responses."""

    def parse(self, llm_response: str) -> list[Suggestion]:
        """Parse the response into an ordered list of suggestions.

        Parameters
        ----------
        llm_response:
            The raw LLM response text.

        Returns
        -------
        list[Suggestion]
            Suggestions in order of appearance. Text that does not form a
            complete marker triple is kept as explanation prose.
        """
        suggestions: list[Suggestion] = []
        last_end = 0

        for match in _BLOCK_PATTERN.finditer(llm_response):
            suggestions.append(Suggestion(
                explanation=llm_response[last_end:match.start()].strip(),
                search_block=match.group(1).strip(),
                replace_block=match.group(2).strip(),
            ))
            last_end = match.end()

        trailing = llm_response[last_end:].strip()
        if trailing:
            self._attach_trailing(suggestions, trailing)

        kept = [s for s in suggestions if s.explanation.strip() or s.is_diff]
        logger.debug(
            "[Parse] %d suggestion(s), %d with edits",
            len(kept), sum(1 for s in kept if s.is_diff),
        )
        return kept

    @staticmethod
    def _attach_trailing(suggestions: list[Suggestion], trailing: str) -> None:
        """Fold text after the last block into the suggestion list."""
        if not suggestions:
            suggestions.append(Suggestion(explanation=trailing))
            return

        last = suggestions[-1]
        if not last.is_diff:
            last.explanation = f"{last.explanation}\n\n{trailing}".strip()
        elif last.explanation == "":
            last.explanation = trailing
        else:
            suggestions.append(Suggestion(explanation=trailing))


def parse_ai_diff(llm_response: str) -> list[Suggestion]:
    """Shortcut for ``DiffParser().parse(llm_response)``."""
    return DiffParser().parse(llm_response)
