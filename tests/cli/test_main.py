"""Unit tests for the CLI main module."""

from unittest.mock import patch

import pytest

from repo2tree.cli.main import format_counts, main


@pytest.fixture(autouse=True)
def no_signal_setup():
    """Keep the test process's own signal handlers in place."""
    with patch("repo2tree.cli.main.setup_signal_handling"):
        yield


def run_main(argv):
    with patch("sys.argv", ["repo2tree", *argv]):
        main()


def test_format_counts():
    counts = {"directories": 6, "files": 8, "lines": 15, "tokens": None, "characters": 400}
    assert format_counts(counts) == "Directories: 6\nFiles: 8\nLines: 15\nCharacters: 400"


def test_format_counts_with_tokens():
    counts = {"directories": 1, "files": 2, "lines": 3, "tokens": 40, "characters": 50}
    assert format_counts(counts).splitlines() == [
        "Directories: 1",
        "Files: 2",
        "Lines: 3",
        "Tokens: 40",
        "Characters: 50",
    ]


def test_writes_tree_to_file(sample_repo, tmp_path):
    output = tmp_path / "out" / "tree.txt"
    run_main([str(sample_repo), "-o", str(output)])
    text = output.read_text(encoding="utf-8")
    assert text.startswith("repo/\n")
    assert "├── dist/  # build artifacts\n" in text
    assert "├── node_modules/  # (ignored)\n" in text
    assert "main.py  # references .util, config in imports\n" in text


def test_no_ignore_and_no_imports(sample_repo, tmp_path):
    output = tmp_path / "tree.txt"
    run_main([str(sample_repo), "-o", str(output), "-I", "-N"])
    text = output.read_text(encoding="utf-8")
    assert "bundle.js" in text
    assert "(ignored)" not in text
    assert "references" not in text


def test_summary_in_file(sample_repo, tmp_path):
    output = tmp_path / "tree.txt"
    run_main([str(sample_repo), "-o", str(output), "-s", "file"])
    text = output.read_text(encoding="utf-8")
    assert "\nDirectories: 6\nFiles: 8\nLines: 15\n" in text


def test_summary_to_stderr(sample_repo, tmp_path, capsys):
    run_main([str(sample_repo), "-o", str(tmp_path / "tree.txt"), "-s", "stderr"])
    err = capsys.readouterr().err
    assert "Directories: 6" in err
    assert "Files: 8" in err


def test_unwritable_output_exits_with_error(sample_repo, tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_text("\n")
    with pytest.raises(SystemExit) as excinfo:
        run_main([str(sample_repo), "-o", str(blocker / "tree.txt")])
    assert excinfo.value.code == 1
    assert "Error: Cannot write output to" in capsys.readouterr().err


def test_missing_directory_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_main([str(tmp_path / "missing")])
    assert excinfo.value.code == 1
    assert "Root path does not exist" in capsys.readouterr().err


def test_summary_file_without_output(sample_repo, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_main([str(sample_repo), "-s", "file"])
    assert excinfo.value.code == 2
    assert "--summary=file requires -o/--output" in capsys.readouterr().err


def test_tokenizer_without_tiktoken(sample_repo, capsys):
    with patch("repo2tree.cli.main.tiktoken_available", return_value=False):
        with pytest.raises(SystemExit) as excinfo:
            run_main([str(sample_repo), "-t", "gpt-4"])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "Error: Token counting was requested with -t/--tokenizer" in err
    assert 'pip install "repo2tree[token_counting]"' in err


def test_usage_error_exits_with_2():
    with pytest.raises(SystemExit) as excinfo:
        run_main(["-S", "regex"])
    assert excinfo.value.code == 2


def test_verbose_logs_ignored_directories(sample_repo, tmp_path, capsys):
    run_main([str(sample_repo), "-o", str(tmp_path / "tree.txt"), "-v"])
    err = capsys.readouterr().err
    assert "DEBUG: repo2tree.file_system_tree.tree_walker: Ignoring" in err
