"""
Patch applier — applies parsed SEARCH/REPLACE suggestions to in-memory
file content, exact match first and line-trimmed fuzzy match second.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .diff_parser import Suggestion

logger = logging.getLogger(__name__)

METHOD_EXACT = "exact"
METHOD_FUZZY = "fuzzy"
METHOD_NONE = "none"


@dataclass
class SuggestionOutcome:
    """How a single diff suggestion fared."""
    index: int                 # position in the suggestion list
    method: str = METHOD_NONE
    message: str = ""

    @property
    def applied(self) -> bool:
        return self.method != METHOD_NONE


@dataclass
class ApplyResult:
    """Result of applying a suggestion list to one text."""
    original: str = ""
    content: str = ""
    outcomes: list[SuggestionOutcome] = field(default_factory=list)

    @property
    def applied(self) -> int:
        return sum(1 for o in self.outcomes if o.applied)

    @property
    def skipped(self) -> int:
        return sum(1 for o in self.outcomes if not o.applied)

    @property
    def changed(self) -> bool:
        return self.content != self.original

    @property
    def diagnostics(self) -> list[str]:
        return [o.message for o in self.outcomes if not o.applied]


class PatchApplier:
    """Apply SEARCH/REPLACE suggestions to text."""

    def __init__(self, fuzzy_match: bool = True) -> None:
        self._fuzzy_match = fuzzy_match

    def apply(
        self,
        original_text: str,
        suggestions: Iterable[Suggestion],
    ) -> ApplyResult:
        """Apply every diff suggestion, in order, to *original_text*.

        Each suggestion sees the text as left by the ones before it.
        Suggestions that cannot be located are skipped and reported in
        the result; nothing is raised.
        """
        result = ApplyResult(original=original_text, content=original_text)
        working = original_text

        for index, suggestion in enumerate(suggestions):
            if not suggestion.is_diff:
                continue

            outcome = SuggestionOutcome(index=index)
            patched = self._apply_one(working, suggestion, outcome)
            if patched is None:
                logger.warning(
                    "[Patch] Could not apply suggestion %d: %s",
                    index, outcome.message,
                )
            else:
                working = patched
            result.outcomes.append(outcome)

        result.content = working
        return result

    def apply_text(
        self,
        original_text: str,
        suggestions: Iterable[Suggestion],
    ) -> str:
        """Like :meth:`apply` but return only the patched text."""
        return self.apply(original_text, suggestions).content

    # ------------------------------------------------------------------
    # Single suggestion
    # ------------------------------------------------------------------

    def _apply_one(
        self,
        text: str,
        suggestion: Suggestion,
        outcome: SuggestionOutcome,
    ) -> Optional[str]:
        """Return the patched text, or None if the search block is not found."""
        search = suggestion.search_block or ""
        replace = suggestion.replace_block or ""

        if not search:
            outcome.message = "empty SEARCH block"
            return None

        if search in text:
            outcome.method = METHOD_EXACT
            outcome.message = "exact match"
            return text.replace(search, replace, 1)

        if self._fuzzy_match:
            block = self._find_fuzzy_block(text, search)
            if block is not None:
                logger.debug(
                    "[Patch] Fuzzy match for suggestion %d (%d lines)",
                    outcome.index, block.count("\n") + 1,
                )
                outcome.method = METHOD_FUZZY
                outcome.message = "whitespace-tolerant match"
                return text.replace(block, replace, 1)

        first_line = search.splitlines()[0]
        outcome.message = (
            f"SEARCH block not found or significantly altered: {first_line!r}"
        )
        return None

    @staticmethod
    def _find_fuzzy_block(text: str, search: str) -> Optional[str]:
        """Locate *search* in *text* ignoring per-line outer whitespace.

        Blank search lines are ignored. Returns the matched region rebuilt
        from the untrimmed text lines, or None.
        """
        pattern = [line.strip() for line in search.split("\n")]
        pattern = [line for line in pattern if line]
        if not pattern:
            return None

        lines = text.split("\n")
        span = len(pattern)
        for start in range(len(lines) - span + 1):
            if all(lines[start + j].strip() == pattern[j] for j in range(span)):
                return "\n".join(lines[start:start + span])
        return None


def apply_parsed_diffs(original_text: str, suggestions: Iterable[Suggestion]) -> str:
    """Shortcut for ``PatchApplier().apply_text(original_text, suggestions)``."""
    return PatchApplier().apply_text(original_text, suggestions)
