"""
Language detection for project files, based on file extensions.
"""

import os


# ── Extension → Language mapping ──

EXTENSION_MAP = {
    ".py": "python",
    ".js": "javascript",
    ".ts": "typescript",
    ".jsx": "javascript",
    ".tsx": "typescript",
    ".go": "go",
    ".rs": "rust",
    ".java": "java",
    ".rb": "ruby",
    ".cs": "csharp",
    ".cpp": "cpp",
    ".c": "c",
    ".h": "c",
    ".hpp": "cpp",
    ".swift": "swift",
    ".kt": "kotlin",
    ".php": "php",
    ".scala": "scala",
    ".r": "r",
    ".lua": "lua",
    ".sh": "bash",
    ".html": "html",
    ".css": "css",
    ".json": "json",
    ".md": "markdown",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".sql": "sql",
}

DEFAULT_LANGUAGE = "plaintext"


def detect_file_language(filename: str) -> str:
    """Return the language key for *filename*, or ``"plaintext"``."""
    _, ext = os.path.splitext(filename)
    return EXTENSION_MAP.get(ext.lower(), DEFAULT_LANGUAGE)

