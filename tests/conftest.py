"""
Pytest Configuration and Fixtures

This module provides:
- The test environment (APP_ENV=test, in-memory storage)
- Timestamped result file generation
- Shared fixtures for all tests
- Test category markers
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

# Must be set before ideabox.config is imported anywhere
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("IDEAS_STORAGE", "memory")

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.test_config import (
    CONFIG, EXPECTED, TEST_DATA, MESSAGES, TEST_CATEGORIES,
    get_sample_idea, get_all_sample_ideas,
)


# =============================================================================
# TEST RESULT FILE CONFIGURATION
# =============================================================================

RESULTS_DIR = PROJECT_ROOT / CONFIG["test_output_dir"]


def get_result_filename() -> str:
    """Generate timestamped result filename."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"test_results_{timestamp}.txt"


class TestResultCollector:
    """Collects test results for the report file."""

    __test__ = False

    def __init__(self):
        self.results: List[Dict[str, Any]] = []
        self.start_time: datetime = None
        self.end_time: datetime = None

    def add_result(self, nodeid: str, outcome: str, duration: float):
        """Add a test result."""
        filename = nodeid.split("::")[0].split("/")[-1]
        self.results.append({
            "nodeid": nodeid,
            "category": filename.replace("test_", "").replace(".py", ""),
            "outcome": outcome,
            "duration": duration,
        })

    def get_summary(self) -> Dict[str, int]:
        """Get test result summary."""
        return {
            "total": len(self.results),
            "passed": sum(1 for r in self.results if r["outcome"] == "passed"),
            "failed": sum(1 for r in self.results if r["outcome"] == "failed"),
            "skipped": sum(1 for r in self.results if r["outcome"] == "skipped"),
        }


_collector = TestResultCollector()


def generate_report(collector: TestResultCollector) -> str:
    """Generate a plain-text test report grouped by category."""
    summary = collector.get_summary()
    lines = [
        "=" * 80,
        "IDEA BOARD - TEST RESULTS REPORT",
        "=" * 80,
        f"Run Date:     {collector.start_time.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Total Tests:  {summary['total']}",
        f"Passed:       {summary['passed']}",
        f"Failed:       {summary['failed']}",
        f"Skipped:      {summary['skipped']}",
        "",
    ]

    categories: Dict[str, List[Dict[str, Any]]] = {}
    for result in collector.results:
        categories.setdefault(result["category"], []).append(result)

    for category, results in sorted(categories.items()):
        info = TEST_CATEGORIES.get(category, {"name": category.replace("_", " ").title()})
        passed = sum(1 for r in results if r["outcome"] == "passed")
        lines.append(f"{info['name']}: {passed}/{len(results)} passed")
        for result in results:
            if result["outcome"] == "failed":
                lines.append(f"    FAILED {result['nodeid']}")

    return "\n".join(lines)


# =============================================================================
# PYTEST HOOKS
# =============================================================================

def pytest_configure(config):
    """Register custom markers and start the collector."""
    config.addinivalue_line(
        "markers", "config_validation: Configuration validation tests"
    )
    config.addinivalue_line(
        "markers", "end_to_end: Full HTTP round-trip tests"
    )

    _collector.start_time = datetime.now()


def pytest_runtest_logreport(report):
    """Called after each test phase."""
    if report.when == "call":  # Only record the actual test call
        _collector.add_result(report.nodeid, report.outcome, report.duration)


def pytest_sessionfinish(session, exitstatus):
    """Write the report file once all tests complete."""
    _collector.end_time = datetime.now()
    if not _collector.results:
        return

    RESULTS_DIR.mkdir(exist_ok=True)
    filepath = RESULTS_DIR / get_result_filename()
    filepath.write_text(generate_report(_collector))


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def sample_idea():
    """Provide a single sample idea's submit fields."""
    return get_sample_idea(0)


@pytest.fixture
def sample_ideas():
    """Provide the submit fields of every sample idea."""
    return get_all_sample_ideas()


@pytest.fixture
def test_data():
    """Provide access to test data."""
    return TEST_DATA


@pytest.fixture
def memory_store():
    """A fresh in-memory record store."""
    from ideabox.storage import MemoryRecordStore
    return MemoryRecordStore()


@pytest.fixture
def sqlite_store():
    """A fresh SQLite record store that lives only in memory."""
    from ideabox.storage import SqliteRecordStore
    store = SqliteRecordStore(":memory:")
    yield store
    store.close()


@pytest.fixture
def service(sqlite_store):
    """An IdeaService over an isolated SQLite store."""
    from ideabox.api import IdeaService
    return IdeaService(sqlite_store, CONFIG["table"])


@pytest.fixture
def app(sqlite_store):
    """Flask app wired to an isolated SQLite store."""
    from web.app import create_app
    return create_app(store=sqlite_store, config={"TESTING": True})


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as client:
        yield client
