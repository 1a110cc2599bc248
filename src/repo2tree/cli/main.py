"""Command-line interface for repo2tree.

This module provides the ``repo2tree`` command, which writes an annotated tree of
a repository to stdout or a file.

Exit Codes:
    0: Successful completion
    1: Runtime error, including an unwritable output destination
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Print the tree of a repository
    $ repo2tree /path/to/repo

    # Write it to a file and report counts on stderr
    $ repo2tree /path/to/repo -o tree.txt -s stderr
"""

import sys
from collections.abc import Mapping
from typing import Optional

from repo2tree.cli.argparser import create_parser, validate_args
from repo2tree.cli.logging_setup import configure_logging
from repo2tree.cli.safe_writer import SafeWriter
from repo2tree.cli.signal_handler import setup_signal_handling, signal_handler
from repo2tree.exceptions import OutputDestinationError, TokenizerNotAvailableError
from repo2tree.ignore_rules.rule_syntax import RuleSyntax
from repo2tree.repo2tree import RepoTree
from repo2tree.token_counter import tiktoken_available


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing the count metrics.

    Returns:
        A formatted string showing all counts with appropriate labels.

    Example:
        >>> print(format_counts({"directories": 2, "files": 5, "lines": 8, "characters": 120, "tokens": None}))
        Directories: 2
        Files: 5
        Lines: 8
        Characters: 120
    """
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Lines: {counts['lines']}",
        f"Characters: {counts['characters']}",
    ]

    if counts["tokens"] is not None:
        result.insert(3, f"Tokens: {counts['tokens']}")

    return "\n".join(result)


def main() -> None:
    """Main entry point for the repo2tree command-line interface."""
    setup_signal_handling()

    try:
        parser = create_parser()
        args = parser.parse_args()
        try:
            validate_args(args)
        except ValueError as e:
            # Usage errors exit with code 2, as argparse does
            parser.error(str(e))
        configure_logging(args.verbose)

        if args.tokenizer and not tiktoken_available():
            raise TokenizerNotAvailableError(
                "Token counting was requested with -t/--tokenizer, but the required tiktoken library is not installed."
            )

        tree = RepoTree(
            args.directory,
            rules_file=args.rules_file,
            rule_syntax=RuleSyntax(args.rule_syntax),
            ignore_rules=not args.no_ignore,
            track_imports=not args.no_imports,
            tokenizer_model=args.tokenizer,
        )

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                for line in tree.stream_tree():
                    safe_writer.write(line)

                if args.summary:
                    counts = {
                        "directories": tree.directory_count,
                        "files": tree.file_count,
                        "lines": tree.line_count,
                        "tokens": tree.token_count,
                        "characters": tree.character_count,
                    }
                    summary = format_counts(counts)

                    if args.summary == "file":
                        safe_writer.write("\n" + summary + "\n")
                    elif args.summary == "stdout":
                        print("\n" + summary, file=sys.stdout)
                    else:
                        print(summary, file=sys.stderr)

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except TokenizerNotAvailableError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        print("To enable token counting, install repo2tree with the 'token_counting' extra:", file=sys.stderr)
        print('    pip install "repo2tree[token_counting]"', file=sys.stderr)
        sys.exit(1)
    except OutputDestinationError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
