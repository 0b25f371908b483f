"""
code_evolve — turn AI-suggested SEARCH/REPLACE edits into patched code.

Public API for library usage::

    from code_evolve import parse_ai_diff, apply_parsed_diffs

    suggestions = parse_ai_diff(response_text)
    patched = apply_parsed_diffs(source_text, suggestions)
"""

from .editing import (
    DiffParser, Suggestion, parse_ai_diff,
    PatchApplier, ApplyResult, apply_parsed_diffs,
)

__all__ = [
    "DiffParser", "Suggestion", "parse_ai_diff",
    "PatchApplier", "ApplyResult", "apply_parsed_diffs",
]
