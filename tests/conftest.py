"""Pytest configuration and fixtures."""

import json
import logging
from pathlib import Path

import pytest
import structlog

from tanakhrange.config import reset_settings
from tanakhrange.loader import load_corpus_file, parse_corpus

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_CORPUS = FIXTURES_DIR / "corpus" / "sample_tanakh.json"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_test_environment(tmp_path, monkeypatch):
    """Keep settings, env vars and config files from leaking between tests."""
    for var in [
        "TANAKH_CORPUS_PATH",
        "TANAKH_CORPUS_URL",
        "TANAKH_FETCH_TIMEOUT",
        "TANAKH_CHAPTER_PREFIX",
        "TANAKH_SEPARATOR_WIDTH",
        "TANAKH_DEBUG",
        "TANAKH_LOG_LEVEL",
        "TANAKH_LOG_FORMAT",
        "TANAKH_LOG_FILE",
        "TANAKH_CONFIG",
    ]:
        monkeypatch.delenv(var, raising=False)

    # No user or project config files from the real machine
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)

    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers and levels installed by configure_logging."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    yield

    for handler in root_logger.handlers.copy():
        root_logger.removeHandler(handler)
        if handler not in original_handlers:
            handler.close()
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)
    structlog.reset_defaults()


@pytest.fixture
def sample_corpus_path():
    """Path to the two-book sample corpus file."""
    return SAMPLE_CORPUS


@pytest.fixture
def sample_corpus_data():
    """The sample corpus as decoded JSON."""
    return json.loads(SAMPLE_CORPUS.read_text(encoding="utf-8"))


@pytest.fixture
def sample_corpus(sample_corpus_path):
    """The sample corpus parsed into a Corpus."""
    return load_corpus_file(sample_corpus_path)


@pytest.fixture
def tiny_corpus():
    """Book "X" with one chapter "א" holding verses "א" and "ב"."""
    return parse_corpus(
        [
            {
                "book": "X",
                "chapters": {
                    "א": {
                        "א": {"text": "verse1"},
                        "ב": {"text": "verse2"},
                    }
                },
            }
        ]
    )
