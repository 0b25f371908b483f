"""
`code-evolve` command-line interface.

Works on AI responses saved to local files; it never calls an AI provider.

Commands
--------
code-evolve parse   RESPONSE                 -- list the suggestions in a response
code-evolve apply   RESPONSE FILE            -- preview the patched FILE
code-evolve apply   RESPONSE FILE --write    -- ...and write it back after approval
code-evolve prompt  TASK [--dir D] [--target NAME]
code-evolve targets RESPONSE [--dir D]       -- list parsed improvement targets
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .cli_display import print_error, print_status, setup_logger
from .config import Config
from .diff_display import prompt_apply_approval, show_diff
from .editing.diff_parser import DiffParser
from .editing.patch_applier import PatchApplier
from .language import detect_file_language
from .project import Project, ProjectError, ProjectFile, load_project
from .prompts import TaskId, PromptError, build_prompt
from .targets import parse_targets

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _read_text(path: str) -> str:
    """Read a UTF-8 text file, or '-' for stdin."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _load(args: argparse.Namespace, cfg: Config) -> Project:
    return load_project(args.dir, max_file_size=cfg.MAX_FILE_SIZE)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _cmd_parse(args: argparse.Namespace, cfg: Config) -> int:
    suggestions = DiffParser().parse(_read_text(args.response))
    if not suggestions:
        print("  (no suggestions)")
        return 0

    for i, s in enumerate(suggestions, 1):
        kind = "edit" if s.is_diff else "note"
        print(f"\n[{i}] {kind}")
        if s.explanation:
            print(s.explanation)
        if s.is_diff:
            print(f"--- SEARCH\n{s.search_block}\n+++ REPLACE\n{s.replace_block}")
    return 0


def _cmd_apply(args: argparse.Namespace, cfg: Config) -> int:
    suggestions = DiffParser().parse(_read_text(args.response))
    original = _read_text(args.file)

    project = Project([ProjectFile(
        name=args.file, language=detect_file_language(args.file),
        content=original,
        original_content=original,
    )])
    applier = PatchApplier(fuzzy_match=cfg.FUZZY_MATCH)
    result = project.apply_suggestions(args.file, suggestions, applier)

    for outcome in result.outcomes:
        print_status(outcome.method, f"suggestion {outcome.index + 1}: {outcome.message}")
    print(f"\n  {result.applied} applied, {result.skipped} skipped")

    if not result.changed:
        return 0

    show_diff(args.file, original, result.content,
              log_only=args.no_diff or not cfg.SHOW_DIFF)

    if args.write and prompt_apply_approval(args.file, auto=args.auto):
        with open(args.file, "w", encoding="utf-8") as f:
            f.write(result.content)
        print(f"  Wrote {args.file}")
    return 0


def _cmd_prompt(args: argparse.Namespace, cfg: Config) -> int:
    project = _load(args, cfg)
    target = project.get(args.target) if args.target else None
    try:
        text = build_prompt(TaskId(args.task), project.files, target,
                            assistant_name=cfg.ASSISTANT_NAME)
    except PromptError as exc:
        print_error(str(exc))
        return 1
    print(text)
    return 0


def _cmd_targets(args: argparse.Namespace, cfg: Config) -> int:
    project = _load(args, cfg)
    targets = parse_targets(_read_text(args.response), project.files)
    if not targets:
        print("  (no targets)")
        return 0
    for i, t in enumerate(targets, 1):
        print(f"\n[{i}] {t.file_name} — {t.area_description} ({t.recommended_task.value})")
        print(f"    {t.ai_suggestion}")
    return 0


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="code-evolve",
        description="Parse and apply SEARCH/REPLACE suggestions from AI responses",
    )
    parser.add_argument("--config", default=None,
                        help="Path to .code_evolve.yaml config file")
    subparsers = parser.add_subparsers(dest="cmd", metavar="COMMAND")
    subparsers.required = True

    # --- parse ---
    parse_p = subparsers.add_parser("parse", help="List suggestions in a response")
    parse_p.add_argument("response", help="File holding the AI response ('-' for stdin)")
    parse_p.set_defaults(func=_cmd_parse)

    # --- apply ---
    apply_p = subparsers.add_parser("apply", help="Apply a response's edits to a file")
    apply_p.add_argument("response", help="File holding the AI response ('-' for stdin)")
    apply_p.add_argument("file", help="File to patch")
    apply_p.add_argument("--write", action="store_true",
                         help="Write the patched content back to FILE")
    apply_p.add_argument("--auto", action="store_true",
                         help="Write without asking for approval")
    apply_p.add_argument("--no-diff", action="store_true",
                         help="Log the diff instead of printing it")
    apply_p.set_defaults(func=_cmd_apply)

    # --- prompt ---
    prompt_p = subparsers.add_parser("prompt", help="Print the prompt for a task")
    prompt_p.add_argument("task", choices=[t.value for t in TaskId])
    prompt_p.add_argument("--dir", default=".", help="Project directory")
    prompt_p.add_argument("--target", default=None,
                          help="Target file name for file-level tasks")
    prompt_p.set_defaults(func=_cmd_prompt)

    # --- targets ---
    targets_p = subparsers.add_parser("targets", help="List improvement targets")
    targets_p.add_argument("response", help="File holding the AI response ('-' for stdin)")
    targets_p.add_argument("--dir", default=".", help="Project directory")
    targets_p.set_defaults(func=_cmd_targets)

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    cfg = Config.load(args.config)
    setup_logger(cfg.LOG_DIR)
    logger.info("Command: %s", args.cmd)

    try:
        return args.func(args, cfg)
    except (ProjectError, OSError, UnicodeDecodeError) as exc:
        logger.error("Command %s failed: %s", args.cmd, exc)
        print_error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
