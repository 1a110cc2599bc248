"""Test configuration and fixtures for repo2tree."""

import logging

import pytest

RULES_TEXT = "# build artifacts\n/dist/\nnode_modules\n"


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_repo(tmp_path):
    """Create a small repository with ignored directories and local imports.

    repo/
    ├── .git/HEAD
    ├── .repo2treeignore
    ├── README.md
    ├── dist/bundle.js
    ├── node_modules/left-pad/index.js
    └── src/
        ├── config.py
        ├── main.py
        ├── util.py
        └── web/
            ├── api.js
            ├── app.js
            ├── dist/out.js
            └── node_modules/x.js
    """
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / ".git").mkdir()
    (repo / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (repo / ".repo2treeignore").write_text(RULES_TEXT)
    (repo / "README.md").write_text("# Sample\n")

    (repo / "dist").mkdir()
    (repo / "dist" / "bundle.js").write_text("console.log('built');\n")
    (repo / "node_modules" / "left-pad").mkdir(parents=True)
    (repo / "node_modules" / "left-pad" / "index.js").write_text("module.exports = pad;\n")

    src = repo / "src"
    src.mkdir()
    (src / "config.py").write_text("DEBUG = False\n")
    (src / "main.py").write_text("from .util import helper\nimport numpy\nimport config\n")
    (src / "util.py").write_text("import os\n\n\ndef helper():\n    return os.getcwd()\n")

    web = src / "web"
    web.mkdir()
    (web / "api.js").write_text("import { get } from 'client';\n")
    (web / "app.js").write_text("const api = require('./api');\nconst lodash = require('lodash');\n")
    (web / "dist").mkdir()
    (web / "dist" / "out.js").write_text("\n")
    (web / "node_modules").mkdir()
    (web / "node_modules" / "x.js").write_text("\n")

    return repo


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a test's captured streams."""
    yield
    logger = logging.getLogger("repo2tree")
    for handler in list(logger.handlers):
        if getattr(handler, "_repo2tree_handler", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
