"""Command-line argument parsing for repo2tree."""

import argparse
from pathlib import Path

from repo2tree import __version__
from repo2tree.ignore_rules.rule_syntax import RuleSyntax
from repo2tree.repo2tree import DEFAULT_RULES_FILENAME


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with repo2tree's options.
    """
    description = f"""
    repo2tree: An annotated tree of a source repository for people and LLMs.

    The tree lists every file and directory of the repository. Directories matched
    by the ignore rules in {DEFAULT_RULES_FILENAME} are shown but not descended into,
    annotated with the comment preceding the matching rule. Python, JavaScript and
    TypeScript files are annotated with the local modules they import.

    Ignore-rule file format:
      # build artifacts        <- comment, becomes the annotation of the next rule
      /dist/                   <- anchored at the repository root, directories only
      node_modules             <- matches at any depth, no annotation
    """

    epilog = """
    Examples:
      # Print the tree of the current directory
      repo2tree

      # Write the tree of a project to a file
      repo2tree -o docs/tree.txt /path/to/project

      # Use an ignore-rule file from elsewhere, matching bare directory names
      repo2tree -r ~/ignore-dirs.txt -S directory /path/to/project

      # Show everything, without import annotations
      repo2tree -I -N /path/to/project

      # Print a summary with token counts to stderr
      repo2tree -s stderr -t gpt-4 /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="repo2tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"repo2tree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The repository to process (default: the current directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path; missing parent directories are created. If not specified, output goes to stdout.",
    )
    parser.add_argument(
        "-r",
        "--rules-file",
        type=Path,
        metavar="FILE",
        help=f"Ignore-rule file to use instead of {DEFAULT_RULES_FILENAME} in the repository root.",
    )
    parser.add_argument(
        "-S",
        "--rule-syntax",
        choices=[syntax.value for syntax in RuleSyntax],
        default=RuleSyntax.GLOB.value,
        help=(
            "How ignore rules match: 'glob' matches root-relative paths with *, ? and / anchoring; "
            "'directory' matches bare directory names case-insensitively (default: glob)."
        ),
    )
    parser.add_argument(
        "-I",
        "--no-ignore",
        action="store_true",
        help="Disable ignore processing and descend into every directory.",
    )
    parser.add_argument(
        "-N",
        "--no-imports",
        action="store_true",
        help="Disable local import annotations on source files.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print summary report. Valid destinations: stderr, stdout, file (requires -o)",
    )
    parser.add_argument(
        "-t",
        "--tokenizer",
        metavar="MODEL",
        help="Tokenizer model to use for counting report tokens (e.g., gpt-4). Specifying this enables token counting.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log ignored directories, unreadable entries and loaded rules to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")
