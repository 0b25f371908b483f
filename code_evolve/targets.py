"""
Improvement targets — parses the JSON target list returned for the
project-analysis task.
"""

from __future__ import annotations

import json
import logging
import re
import uuid
from dataclasses import dataclass, field
from typing import Sequence

from .project import ProjectFile
from .prompts import TaskId

logger = logging.getLogger(__name__)

# A single fenced block wrapping the whole response, e.g. ```json ... ```
_FENCE_PATTERN = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)

_RAW_PREVIEW_CHARS = 200


@dataclass
class ProjectTarget:
    """One file/function-level area the assistant proposes to work on."""
    file_name: str
    area_description: str
    ai_suggestion: str
    recommended_task: TaskId = TaskId.ANALYZE_IMPROVE
    id: str = field(default_factory=lambda: uuid.uuid4().hex)


class TargetParseError(ValueError):
    """Raised internally when the response is not a valid target list."""


def strip_code_fence(text: str) -> str:
    """Remove one code fence surrounding the whole of *text*, if present."""
    stripped = text.strip()
    match = _FENCE_PATTERN.match(stripped)
    if match and match.group(2):
        return match.group(2).strip()
    return stripped


def _task_from(value) -> TaskId:
    try:
        return TaskId(value)
    except ValueError:
        logger.debug("[Targets] Unknown task id %r, using ANALYZE_IMPROVE", value)
        return TaskId.ANALYZE_IMPROVE


def _decode_targets(llm_response: str) -> list[ProjectTarget]:
    try:
        data = json.loads(strip_code_fence(llm_response))
    except json.JSONDecodeError as exc:
        raise TargetParseError(f"invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise TargetParseError("expected a JSON array")

    targets: list[ProjectTarget] = []
    for item in data:
        if not isinstance(item, dict):
            raise TargetParseError(f"expected an object, got {type(item).__name__}")
        targets.append(ProjectTarget(
            file_name=str(item.get("fileName", "")),
            area_description=str(item.get("areaDescription", "")),
            ai_suggestion=str(item.get("aiSuggestion", "")),
            recommended_task=_task_from(item.get("recommendedTaskId")),
        ))
    return targets


def fallback_target(llm_response: str,
                    files: Sequence[ProjectFile] = ()) -> ProjectTarget:
    """A generic review target used when the response cannot be parsed."""
    preview = llm_response[:_RAW_PREVIEW_CHARS]
    return ProjectTarget(
        file_name=files[0].name if files else "Project",
        area_description="General Project Review",
        ai_suggestion=(
            "AI analysis failed to return specific targets. "
            f"Raw AI Output: {preview}... Consider general improvements."
        ),
        recommended_task=TaskId.ANALYZE_IMPROVE,
    )


def parse_targets(llm_response: str,
                  files: Sequence[ProjectFile] = ()) -> list[ProjectTarget]:
    """Parse the target list from an LLM response.

    An empty JSON array yields an empty list. Malformed output never
    raises; it yields a single :func:`fallback_target`.
    """
    try:
        targets = _decode_targets(llm_response)
    except TargetParseError as exc:
        logger.warning("[Targets] Could not parse target list: %s", exc)
        return [fallback_target(llm_response, files)]

    logger.info("[Targets] Parsed %d target(s)", len(targets))
    return targets
