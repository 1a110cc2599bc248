"""Unit tests for local import extraction."""

import os
from unittest.mock import patch

import pytest

from repo2tree.imports.base_scanner import ImportScanner
from repo2tree.imports.import_extractor import ImportExtractor, format_annotation


@pytest.fixture
def extractor():
    return ImportExtractor()


def test_relative_import_with_sibling(tmp_path, extractor):
    (tmp_path / "util.py").write_text("def helper(): pass\n")
    source = tmp_path / "a.py"
    source.write_text("from .util import helper\n")
    assert extractor.extract_file(source) == "references .util in imports"


def test_relative_import_does_not_need_sibling(tmp_path, extractor):
    source = tmp_path / "a.py"
    source.write_text("from .util import helper\n")
    assert extractor.extract_file(source) == "references .util in imports"


def test_external_import_without_local_file(tmp_path, extractor):
    source = tmp_path / "a.py"
    source.write_text("import numpy\n")
    assert extractor.extract_file(source) is None


def test_sibling_module_is_local(tmp_path, extractor):
    (tmp_path / "config.py").write_text("DEBUG = True\n")
    source = tmp_path / "main.py"
    source.write_text("import config\nimport numpy\n")
    assert extractor.extract_file(source) == "references config in imports"


def test_sibling_must_have_same_extension(tmp_path, extractor):
    (tmp_path / "config.js").write_text("module.exports = {};\n")
    source = tmp_path / "main.py"
    source.write_text("import config\n")
    assert extractor.extract_file(source) is None


def test_sibling_resolution_is_not_recursive(tmp_path, extractor):
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "config.py").write_text("\n")
    source = tmp_path / "main.py"
    source.write_text("import config\nfrom pkg import config\n")
    assert extractor.extract_file(source) is None


def test_tokens_are_deduplicated_in_order(tmp_path, extractor):
    (tmp_path / "b.py").write_text("\n")
    source = tmp_path / "a.py"
    source.write_text("from .x import y\nimport b\nfrom .x import z\nimport b\n")
    assert extractor.extract_file(source) == "references .x, b in imports"


def test_javascript_imports(tmp_path, extractor):
    (tmp_path / "store.js").write_text("\n")
    source = tmp_path / "app.js"
    source.write_text(
        "const api = require('./api');\n"
        "const lodash = require('lodash');\n"
        "import store from 'store';\n"
        "import React from 'react';\n"
    )
    assert extractor.extract_file(source) == "references ./api, store in imports"


def test_typescript_uses_ts_siblings(tmp_path, extractor):
    (tmp_path / "models.ts").write_text("\n")
    source = tmp_path / "index.ts"
    source.write_text("import { User } from 'models';\n")
    assert extractor.extract_file(source) == "references models in imports"


def test_unsupported_extension(tmp_path, extractor):
    source = tmp_path / "main.rs"
    source.write_text("use crate::util;\n")
    assert not extractor.supports(".rs")
    assert extractor.extract_file(source) is None
    assert extractor.extract(source, ".rs", "import util\n") is None


def test_unreadable_file(tmp_path, extractor):
    source = tmp_path / "a.py"
    source.write_text("from .util import helper\n")
    with patch("builtins.open", side_effect=PermissionError("denied")):
        assert extractor.extract_file(source) is None


def test_missing_file(tmp_path, extractor):
    assert extractor.extract_file(tmp_path / "gone.py") is None


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported on this platform")
def test_fifo_is_not_read(tmp_path, extractor):
    os.mkfifo(tmp_path / "pipe.py")
    with patch("builtins.open") as mock_open:
        assert extractor.extract_file(tmp_path / "pipe.py") is None
    mock_open.assert_not_called()


def test_directory_with_source_extension(tmp_path, extractor):
    (tmp_path / "pkg.py").mkdir()
    assert extractor.extract_file(tmp_path / "pkg.py") is None


def test_extract_from_content(tmp_path, extractor):
    annotation = extractor.extract(tmp_path / "a.py", ".py", "from .util import helper\nimport numpy\n")
    assert annotation == "references .util in imports"


def test_register_additional_scanner(tmp_path):
    class ShellSourceScanner(ImportScanner):
        extensions = frozenset({".sh"})

        def scan_line(self, line):
            if line.startswith("source "):
                yield line.split(maxsplit=1)[1]

    extractor = ImportExtractor()
    extractor.register(ShellSourceScanner())
    (tmp_path / "env.sh").write_text("\n")
    source = tmp_path / "run.sh"
    source.write_text("source env\nsource ./lib.sh\n")
    assert extractor.extract_file(source) == "references env, ./lib.sh in imports"


def test_format_annotation():
    assert format_annotation([".util"]) == "references .util in imports"
    assert format_annotation(["a", "b"]) == "references a, b in imports"
    assert format_annotation([]) is None
