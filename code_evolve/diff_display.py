"""
Diff display — compute and show colored unified diffs of patched content
before it is written anywhere.
"""

from __future__ import annotations

import difflib


def compute_diff(name: str, old_content: str, new_content: str) -> str | None:
    """Return a unified diff string, or None if the content is unchanged."""
    if old_content == new_content:
        return None

    old_lines = old_content.splitlines(keepends=True)
    new_lines = new_content.splitlines(keepends=True)

    diff = difflib.unified_diff(
        old_lines, new_lines,
        fromfile=f"a/{name}",
        tofile=f"b/{name}",
    )
    diff_text = "".join(diff)
    return diff_text if diff_text.strip() else None


def format_colored_diff(diff_text: str) -> str:
    """Add ANSI colors to a unified diff string.

    Green for additions (+), red for deletions (-), cyan for @@ hunks.
    """
    lines = diff_text.splitlines()
    colored: list[str] = []
    for line in lines:
        if line.startswith("+++") or line.startswith("---"):
            colored.append(f"\033[1m{line}\033[0m")  # bold
        elif line.startswith("@@"):
            colored.append(f"\033[36m{line}\033[0m")  # cyan
        elif line.startswith("+"):
            colored.append(f"\033[32m{line}\033[0m")  # green
        elif line.startswith("-"):
            colored.append(f"\033[31m{line}\033[0m")  # red
        else:
            colored.append(line)
    return "\n".join(colored)


def show_diff(name: str, old_content: str, new_content: str,
              log_only: bool = False) -> str | None:
    """Compute and display the diff for one file.

    When *log_only* is True, the diff is logged but not printed.
    Returns the plain diff text (None if unchanged).
    """
    from .cli_display import log

    diff_text = compute_diff(name, old_content, new_content)
    if diff_text is None:
        if not log_only:
            print(f"\n  No changes for {name}")
        return None

    if log_only:
        log.info(f"Diff for {name}:\n{diff_text}")
    else:
        print(f"\n{'─' * 60}")
        print(format_colored_diff(diff_text))
    return diff_text


def prompt_apply_approval(name: str, auto: bool = False) -> bool:
    """Ask on the console whether to write the patched *name*.

    Returns ``True`` in auto mode without prompting.
    """
    from .cli_display import log

    if auto:
        log.info(f"[auto] Approved changes to {name}")
        return True

    try:
        answer = input(f"\n  Write changes to {name}? [y/N] ").strip().lower()
    except EOFError:
        answer = ""
    approved = answer in ("y", "yes")
    log.info(f"Changes to {name} {'approved' if approved else 'rejected'}")
    return approved
