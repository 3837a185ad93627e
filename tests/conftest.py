"""Test configuration and fixtures for dirbundle."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption(
        "--run-cli-tests", action="store_true", default=False, help="Run CLI subprocess integration tests (slow)"
    )


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project tree with files that common exclusion rules target."""
    root = tmp_path / "project"
    (root / "src" / "utils").mkdir(parents=True)
    (root / "node_modules" / "pkg").mkdir(parents=True)
    (root / "build").mkdir()

    (root / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (root / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (root / "node_modules" / "pkg" / "index.js").write_text("module.exports = {}\n")
    (root / "build" / "output.min.js").write_text("console.log('test')\n")
    (root / "server.log").write_text("DEBUG: test log\n")
    (root / "secrets.env").write_text("API_KEY=123\n")
    (root / "README.md").write_text("# Test Project\n")
    return root
