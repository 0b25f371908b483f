"""Tests for prompt construction."""

import pytest

from code_evolve.project import ProjectFile
from code_evolve.prompts import TaskId, PromptError, build_prompt, format_file_context


FILES = [
    ProjectFile.create("calculator.py", "def add(x, y):\n    return x + y\n"),
    ProjectFile.create("utils.js", "function noop() {}\n"),
]


def test_file_context_fences_each_file():
    context = format_file_context(FILES)

    assert "--- File: calculator.py (python) ---" in context
    assert "```python\ndef add(x, y):" in context
    assert "--- File: utils.js (javascript) ---" in context


def test_summary_prompt():
    prompt = build_prompt(TaskId.PROJECT_SUMMARY, FILES)

    assert prompt.strip().startswith("You are AlphaEvolve, an expert coding assistant.")
    assert "concise summary" in prompt
    assert "function noop() {}" in prompt


def test_targets_prompt_lists_schema_and_task_ids():
    prompt = build_prompt(TaskId.PROJECT_ANALYZE_TARGETS, FILES)

    for key in ("fileName", "areaDescription", "aiSuggestion", "recommendedTaskId"):
        assert f'"{key}"' in prompt
    assert '"ANALYZE_IMPROVE"' in prompt
    assert '"GENERATE_TESTS"' in prompt
    assert "return an empty JSON array: []" in prompt


def test_improve_prompt_describes_diff_format():
    prompt = build_prompt(TaskId.ANALYZE_IMPROVE, FILES, FILES[0])

    assert 'improve the file "calculator.py" (python)' in prompt
    assert "The project contains the following files: calculator.py, utils.js." in prompt
    assert "<<<<<<< SEARCH" in prompt
    assert "=======" in prompt
    assert ">>>>>>> REPLACE" in prompt


def test_tests_prompt_targets_file():
    prompt = build_prompt(TaskId.GENERATE_TESTS, FILES, FILES[1])

    assert 'generate unit tests for the file "utils.js"' in prompt
    assert "```javascript\nfunction noop() {}" in prompt


@pytest.mark.parametrize("task", [TaskId.ANALYZE_IMPROVE, TaskId.GENERATE_TESTS])
def test_file_tasks_require_target(task):
    with pytest.raises(PromptError, match="Target file is required"):
        build_prompt(task, FILES)


def test_task_accepts_plain_string_and_custom_name():
    prompt = build_prompt("PROJECT_SUMMARY", FILES, assistant_name="Reviewer")

    assert "You are Reviewer, an expert coding assistant." in prompt
