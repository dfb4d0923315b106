"""
Pytest fixtures for godecl tests.
"""

import logging
import sys
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Add project root to path for godecl imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


SAMPLE_GO_SOURCE = '''package main

import "fmt"

// No parameters and no results.
func Dummy() {}

// Parameter has anonymous struct type.
func GreetPerson(person struct {
	name, surname string
	age           int
}, id int) {
	fmt.Println("Hi ", person, id)
}

// Function where multiple parameters share type and which returns multiple results.
func SafeDivide(x, y int) (result int, ok bool) {
	if y == 0 {
		return 0, false
	}
	return x / y, true
}

// Generic function.
func Identity[T any](x T) T {
	return x
}

// Generic struct.
type KeyId[K comparable, I ~int | ~uint] struct {
	Key K
	Id  I
}
'''


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_go_source() -> str:
    """Go source covering functions, structs, multi-results and generics."""
    return SAMPLE_GO_SOURCE


@pytest.fixture
def sample_go_file(temp_dir: Path) -> Path:
    """Write the sample Go source to a file."""
    go_file = temp_dir / "sample.go"
    go_file.write_text(SAMPLE_GO_SOURCE)
    return go_file


@pytest.fixture
def isolated_env(monkeypatch, temp_dir: Path) -> Path:
    """Point config lookup at an empty directory and clear godecl env vars."""
    for name in ("GODECL_DEBUG", "GODECL_LOG_FILE", "GODECL_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GODECL_DATA_PATH", str(temp_dir / "data"))
    return temp_dir


@pytest.fixture(autouse=True)
def reset_godecl_logger() -> Generator[None, None, None]:
    """Drop handlers setup_logging() bound to a test's captured streams."""
    yield
    logger = logging.getLogger("godecl")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
