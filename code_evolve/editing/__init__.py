"""SEARCH/REPLACE editing — parse LLM suggestions and patch them into text."""

from .diff_parser import DiffParser, Suggestion, parse_ai_diff
from .patch_applier import (
    PatchApplier, ApplyResult, SuggestionOutcome, apply_parsed_diffs,
)

__all__ = [
    "DiffParser", "Suggestion", "parse_ai_diff",
    "PatchApplier", "ApplyResult", "SuggestionOutcome", "apply_parsed_diffs",
]
