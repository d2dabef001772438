"""
spellchk command line.

    spellchk [FILES...] [--fix [--interactive]] [-l LANG] [-o text|json] ...
    spellchk dict {list,download,update,info,build} ...

Exit status: 0 on success, 1 when spelling errors were found (check mode,
without --no-fail), 2 when configuration or dictionary loading failed.
"""

import argparse
import sys
from typing import List, Optional

from config_logging import SpellchkError, get_logger

from . import __version__
from . import dict_manager
from .checker import SpellChecker
from .config import data_dir, ensure_personal_dictionary, load_config
from .output import OUTPUT_FORMATS, Reporter, interactive_prompt, make_console

logger = get_logger('cli')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='spellchk',
        description='Spell checker for Markdown, source code comments and plain text.',
        epilog="Run 'spellchk dict --help' to manage dictionaries.",
    )
    parser.add_argument('files', nargs='*', metavar='FILE', help='Files to check')
    parser.add_argument('--fix', action='store_true', help='Apply corrections to the files')
    parser.add_argument('--interactive', action='store_true',
                        help='Choose each correction (requires --fix)')
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')
    parser.add_argument('--no-fail', action='store_true',
                        help='Exit with status 0 even when errors are found')
    parser.add_argument('-l', '--language', help='Dictionary language (default: en_US)')
    parser.add_argument('-o', '--format', choices=OUTPUT_FORMATS, default='text',
                        help='Output format')
    parser.add_argument('--add-to-dict', action='append', default=[], metavar='WORD',
                        help='Add a word to the personal dictionary (repeatable)')
    parser.add_argument('--ignore-pattern', action='append', default=[], metavar='REGEX',
                        help='Extra ignore pattern (repeatable)')
    parser.add_argument('--personal-dict', metavar='PATH', help='Personal dictionary file')
    parser.add_argument('--max-suggestions', type=int, metavar='N',
                        help='Maximum suggestions per word (default: 5)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def build_dict_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='spellchk dict', description='Manage dictionaries.')
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')
    sub = parser.add_subparsers(dest='action', metavar='ACTION')
    sub.required = True

    sub.add_parser('list', help='List installed dictionaries')
    download = sub.add_parser('download', help='Download a dictionary')
    download.add_argument('language')
    sub.add_parser('update', help='Re-download installed dictionaries')
    info = sub.add_parser('info', help='Show dictionary details')
    info.add_argument('language')
    build = sub.add_parser('build', help='Build a dictionary from a local word list')
    build.add_argument('language')
    build.add_argument('wordlist', help='Word list file, one word per line')
    return parser


def run_dict(args: argparse.Namespace) -> int:
    console = make_console(color=not args.no_color)
    err_console = make_console(color=not args.no_color, stderr=True)
    directory = data_dir()

    try:
        if args.action == 'list':
            installed = dict_manager.list_dictionaries(directory)
            if not installed:
                console.print("No dictionaries installed. Run 'spellchk dict download en_US'.")
            for entry in installed:
                console.print(f"  [bold]{entry['language']}[/bold]  {entry['size']} bytes  "
                              f"[dim]{entry['path']}[/dim]")

        elif args.action == 'download':
            with console.status(f"Downloading {args.language} word list..."):
                info = dict_manager.download_dictionary(args.language, directory)
            console.print(f"[green]✓[/green] {info['language']}: {info['word_count']} words "
                          f"(word list {info['version']})")

        elif args.action == 'update':
            with console.status("Updating dictionaries..."):
                updated = dict_manager.update_dictionaries(directory)
            if not updated:
                console.print("Nothing to update.")
            for info in updated:
                console.print(f"[green]✓[/green] {info['language']}: {info['word_count']} words")

        elif args.action == 'info':
            info = dict_manager.show_info(args.language, directory)
            console.print(f"Language:   {info['language']}")
            console.print(f"Path:       {info['path']}")
            console.print(f"Size:       {info['size']} bytes")
            console.print(f"Words:      {info['word_count']}")

        elif args.action == 'build':
            info = dict_manager.build_dictionary(args.language, args.wordlist, directory)
            console.print(f"[green]✓[/green] {info['language']}: {info['word_count']} words "
                          f"written to {info['path']}")

    except SpellchkError as e:
        logger.error("Dictionary command failed", action=args.action, error_code=e.code)
        err_console.print(f"[bold red]Error:[/bold red] {e.message}")
        return e.exit_code

    return 0


def run_check(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if args.interactive and not args.fix:
        parser.error("--interactive requires --fix")
    if not args.files and not args.add_to_dict:
        parser.error("no files given")

    console = make_console(color=not args.no_color)
    err_console = make_console(color=not args.no_color, stderr=True)

    try:
        config = load_config(
            language=args.language,
            personal_dictionary=args.personal_dict,
            extra_patterns=args.ignore_pattern,
            max_suggestions=args.max_suggestions,
        )
        ensure_personal_dictionary(config)
        checker = SpellChecker(config)
        if args.add_to_dict:
            added = checker.add_words(args.add_to_dict)
            console.print(f"[green]✓[/green] Added {added} words to the personal dictionary")
    except SpellchkError as e:
        logger.error("Startup failed", error_code=e.code)
        err_console.print(f"[bold red]Error:[/bold red] {e.message}")
        return e.exit_code

    if not args.files:
        return 0

    reporter = Reporter(console, args.format, fix_mode=args.fix)
    for path in args.files:
        try:
            if args.fix and args.interactive:
                result = checker.fix_interactive(path, interactive_prompt(console, path))
            elif args.fix:
                result = checker.fix_auto(path)
            else:
                result = checker.check(path)
        except SpellchkError as e:
            reporter.report_failure(path, e)
            continue
        reporter.report_file(path, result)

    reporter.finish()

    if reporter.total_errors > 0 and not args.fix and not args.no_fail:
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    if argv and argv[0] == 'dict':
        return run_dict(build_dict_parser().parse_args(argv[1:]))

    parser = build_parser()
    return run_check(parser.parse_args(argv), parser)


if __name__ == '__main__':
    sys.exit(main())
