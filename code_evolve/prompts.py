"""
Prompt construction for the four assistant tasks: project summary,
improvement-target analysis, file improvement and test generation.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from .project import ProjectFile


class TaskId(str, Enum):
    ANALYZE_IMPROVE = "ANALYZE_IMPROVE"
    GENERATE_TESTS = "GENERATE_TESTS"
    PROJECT_SUMMARY = "PROJECT_SUMMARY"
    PROJECT_ANALYZE_TARGETS = "PROJECT_ANALYZE_TARGETS"


class PromptError(ValueError):
    """Raised when a prompt cannot be built for the requested task."""


def format_file_context(files: Sequence[ProjectFile]) -> str:
    """Render every file as a labelled, fenced block."""
    blocks = [
        f"\n--- File: {f.name} ({f.language}) ---\n"
        f"```{f.language}\n{f.content}\n```\n"
        for f in files
    ]
    return "\n".join(blocks)


def _intro(assistant_name: str) -> str:
    return f"You are {assistant_name}, an expert coding assistant."


def _summary_prompt(files: Sequence[ProjectFile], assistant_name: str) -> str:
    return f"""
{_intro(assistant_name)}
I have a project with the following files and content:
{format_file_context(files)}

Please provide a concise summary of this project. Describe its purpose, main components, and technologies used based on the file contents.
Keep the summary to 2-3 paragraphs.
"""


def _targets_prompt(files: Sequence[ProjectFile], assistant_name: str) -> str:
    improve = TaskId.ANALYZE_IMPROVE.value
    tests = TaskId.GENERATE_TESTS.value
    return f"""
{_intro(assistant_name)}
I have a project with the following files and content:
{format_file_context(files)}

Analyze the entire project and identify specific areas (files, functions, classes, or sections) that could be improved or benefit from further action (e.g., refactoring, optimization, test generation).

For each identified area, suggest a concrete action.
You MUST return your suggestions as a JSON array of objects. Each object in the array should have the following EXACT keys:
- "fileName": string (exact name of the file, e.g., "utils.js")
- "areaDescription": string (specific function, class, or section name, or "entire file" if applicable, e.g., "function processData", "class Calculator")
- "aiSuggestion": string (a brief, actionable description of what to do, e.g., "Refactor for clarity and efficiency.", "Generate unit tests for edge cases.")
- "recommendedTaskId": string (the most appropriate TaskId for this action, choose one from: "{improve}", "{tests}")

Example of a valid JSON output:
```json
[
  {{
    "fileName": "calculator.py",
    "areaDescription": "function divide",
    "aiSuggestion": "Improve error handling for division by zero and clarify return types.",
    "recommendedTaskId": "{improve}"
  }},
  {{
    "fileName": "calculator.py",
    "areaDescription": "entire file",
    "aiSuggestion": "Generate comprehensive unit tests covering all functions.",
    "recommendedTaskId": "{tests}"
  }}
]
```
Do NOT include any other text, explanations, or markdown formatting outside of this single JSON array.
If no specific improvement targets are identified, return an empty JSON array: [].
"""


def _improve_prompt(files: Sequence[ProjectFile], target: ProjectFile,
                    assistant_name: str) -> str:
    overview = ", ".join(f.name for f in files)
    return f"""
{_intro(assistant_name)}
The project contains the following files: {overview}.
The user wants to improve the file "{target.name}" ({target.language}).
Current file content:
```{target.language}
{target.content}
```
Please analyze this code for potential improvements, optimizations, and adherence to best practices.
If you suggest code changes, you MUST provide them ONLY in the following diff format:
<<<<<<< SEARCH
# Original code block to be found and replaced
# (Ensure this block is an EXACT match from the provided code)
=======
# New code block to replace the original
>>>>>>> REPLACE
For each set of changes, provide a brief explanation BEFORE the diff block.
If multiple distinct changes are suggested, use multiple diff blocks, each preceded by its explanation.
If no significant changes are needed, state that the code is already good or make minor stylistic suggestions with explanations but without diff blocks.
Focus on correctness, efficiency, readability, and maintainability.
Do not invent new functionality, only improve the existing code.
"""


def _tests_prompt(files: Sequence[ProjectFile], target: ProjectFile,
                  assistant_name: str) -> str:
    overview = ", ".join(f.name for f in files)
    return f"""
{_intro(assistant_name)}
The project contains the following files: {overview}.
The user wants to generate unit tests for the file "{target.name}" ({target.language}).
Current file content:
```{target.language}
{target.content}
```
Please generate unit tests for the provided code.
The tests should cover various scenarios, including edge cases.
Provide the tests as a single code block in the same language ({target.language}) if idiomatic (e.g., pytest for Python, Jest/Mocha for JavaScript), or describe the test cases clearly.
Start with a brief explanation of your testing strategy.
Adapt the test structure to the provided code.
"""


def build_prompt(
    task: TaskId,
    files: Sequence[ProjectFile],
    target_file: ProjectFile | None = None,
    assistant_name: str = "AlphaEvolve",
) -> str:
    """Build the prompt text for *task*.

    Project-level tasks use every file in *files*; file-level tasks
    (improve, generate tests) require *target_file* and raise
    :class:`PromptError` without it.
    """
    task = TaskId(task)
    if task is TaskId.PROJECT_SUMMARY:
        return _summary_prompt(files, assistant_name)
    if task is TaskId.PROJECT_ANALYZE_TARGETS:
        return _targets_prompt(files, assistant_name)

    if target_file is None:
        raise PromptError(f"Target file is required for {task.value} task.")
    if task is TaskId.ANALYZE_IMPROVE:
        return _improve_prompt(files, target_file, assistant_name)
    return _tests_prompt(files, target_file, assistant_name)
