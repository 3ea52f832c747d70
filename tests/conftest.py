import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'zarbiter'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from zarbiter.core.stdlib_logging import reset_logging_for_tests
from zarbiter.data import clear_caches


@pytest.fixture(autouse=True)
def _reset_logging_and_caches():
    """Each CLI invocation configures logging; undo it between tests."""
    yield
    reset_logging_for_tests()
    clear_caches()


@pytest.fixture
def isolated_project_env(tmp_path, monkeypatch):
    """
    Isolated project directory, also the current working directory.

    Tests that write a .zarbiter.yaml MUST use this fixture so the developer's
    own project config never leaks into assertions.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_project_config(isolated_project_env):
    """Write <project>/.zarbiter.yaml and return its path."""

    def _write(content: str) -> Path:
        path = isolated_project_env / ".zarbiter.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def stylesheet(isolated_project_env):
    """Write a CSS file inside the isolated project and return its path."""

    def _write(content: str, name: str = "styles.css") -> Path:
        path = isolated_project_env / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
