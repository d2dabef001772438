"""
Terminal and JSON reporting.

Text output is rendered with rich (colors can be disabled); JSON output is a
single document written once every file has been processed.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from config_logging import SpellchkError

from .checker import ADD_TO_DICTIONARY, PromptCallback
from .models import CheckResult, TextSpan

MAX_DISPLAYED_SUGGESTIONS = 5
MAX_PROMPT_SUGGESTIONS = 9
OUTPUT_FORMATS = ('text', 'json')


def make_console(color: bool = True, stderr: bool = False) -> Console:
    return Console(no_color=not color, highlight=False, stderr=stderr)


class Reporter:
    """Collects per-file results and prints them in the chosen format."""

    def __init__(self, console: Console, output_format: str = 'text', fix_mode: bool = False):
        self.console = console
        self.output_format = output_format
        self.fix_mode = fix_mode
        self.files_checked = 0
        self.total_errors = 0
        self.total_fixed = 0
        self.files_with_errors = 0
        self.files_fixed = 0
        self._json_errors: List[Dict[str, Any]] = []
        self._failures: List[Dict[str, Any]] = []

    def report_file(self, path: Union[str, Path], result: CheckResult):
        self.files_checked += 1
        self.total_errors += result.error_count
        self.total_fixed += result.fixed_count
        if result.error_count:
            self.files_with_errors += 1
        if result.fixed_count:
            self.files_fixed += 1

        if self.output_format == 'json':
            for error in result.errors:
                self._json_errors.append({
                    'file': str(path),
                    'line': error.line,
                    'column': error.column,
                    'word': error.word,
                    'suggestions': list(error.suggestions),
                    'context': error.context,
                })
            return

        if not result.errors:
            return

        self.console.print(f"\n[bold]{escape(str(path))}[/bold]")
        for error in result.errors:
            self.console.print(
                f"  [dim]{error.line}:{error.column}[/dim] "
                f"[bold red]{escape(error.word)}[/bold red]  "
                f"[dim]{escape(error.context)}[/dim]"
            )
            if error.suggestions:
                shown = ", ".join(error.suggestions[:MAX_DISPLAYED_SUGGESTIONS])
                self.console.print(f"    [green]→ {escape(shown)}[/green]")

    def report_failure(self, path: Union[str, Path], error: SpellchkError):
        """A file that could not be processed."""
        self._failures.append({'file': str(path), **error.to_dict()['error']})
        if self.output_format != 'json':
            self.console.print(f"[yellow]⚠ {escape(str(path))}: {escape(error.message)}[/yellow]")

    def finish(self):
        """Print the JSON document or the text summary."""
        if self.output_format == 'json':
            document = {
                'files_checked': self.files_checked,
                'total_errors': self.total_errors,
                'errors': self._json_errors,
            }
            if self.fix_mode:
                document['total_fixed'] = self.total_fixed
            if self._failures:
                document['failures'] = self._failures
            self.console.out(json.dumps(document, indent=2, ensure_ascii=False), highlight=False)
            return

        if self.fix_mode:
            print_fix_summary(self.console, self.total_fixed, self.files_fixed)
        else:
            print_check_summary(self.console, self.total_errors, self.files_with_errors)


def print_check_summary(console: Console, total_errors: int, files_with_errors: int):
    if total_errors == 0:
        console.print("\n[bold green]✓ No spelling errors found![/bold green]")
    else:
        console.print(
            f"\n[bold red]✗ {total_errors} errors found in {files_with_errors} files[/bold red]"
        )


def print_fix_summary(console: Console, total_fixed: int, files_fixed: int):
    if total_fixed == 0:
        console.print("\n[yellow]No corrections needed![/yellow]")
    else:
        console.print(
            f"\n[bold green]✓ {total_fixed} corrections applied to {files_fixed} files[/bold green]"
        )


def interactive_prompt(console: Console, path: Optional[Union[str, Path]] = None) -> PromptCallback:
    """
    Build the prompt used by ``SpellChecker.fix_interactive``.

    Choices: ``s`` skip, ``1-9`` take a suggestion, ``a`` add to the personal
    dictionary, ``q`` quit immediately (exit status 0).
    """

    def prompt(span: TextSpan, suggestions: List[str]):
        location = f"{path}:" if path else ""
        console.print(
            f"\n[bold]{escape(location)}{span.line}:{span.column}[/bold] "
            f"[bold red]{escape(span.text)}[/bold red]"
        )
        if span.original_text:
            console.print(f"  [dim]{escape(span.original_text)}[/dim]")

        offered = suggestions[:MAX_PROMPT_SUGGESTIONS]
        for i, suggestion in enumerate(offered, start=1):
            console.print(f"  [cyan][{i}][/cyan] {escape(suggestion)}")
        console.print("  [cyan]\\[s][/cyan] Skip  [cyan]\\[a][/cyan] Add to dictionary  "
                      "[cyan]\\[q][/cyan] Quit")

        while True:
            answer = Prompt.ask("Choice", console=console, default="s").strip().lower()
            if answer in ('', 's'):
                return None
            if answer == 'a':
                return ADD_TO_DICTIONARY
            if answer == 'q':
                console.print("[yellow]Quitting.[/yellow]")
                sys.exit(0)
            if answer.isdigit() and 1 <= int(answer) <= len(offered):
                return offered[int(answer) - 1]
            console.print("[red]Invalid choice[/red]")

    return prompt
