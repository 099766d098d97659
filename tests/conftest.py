"""Global pytest configuration"""
import os
import sys
import pytest
from typing import Any

# Add the project root to Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from LYNK.llms.offline import OfflineLLM
from LYNK.memory.memory_store import MemoryStore
from LYNK.storage import InMemoryMemoryStorage
from LYNK.types import AgentContext


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_terminal_summary(terminalreporter, exitstatus: int, config: Any) -> None:
    """Add custom summary information to the test report."""
    passed = len(terminalreporter.stats.get('passed', []))
    failed = len(terminalreporter.stats.get('failed', []))
    errors = len(terminalreporter.stats.get('error', []))

    if passed + failed + errors > 0:
        success_rate = (passed / (passed + failed + errors)) * 100
        terminalreporter.write_line(f"Success Rate: {success_rate:.1f}%")


@pytest.fixture
def offline_llm():
    return OfflineLLM()


@pytest.fixture
def memory_storage():
    return InMemoryMemoryStorage()


@pytest.fixture
def memory_store(memory_storage):
    return MemoryStore(memory_storage)


@pytest.fixture
def github_context():
    return AgentContext(
        resource_id="r1",
        url="https://github.com/psf/requests",
        persona="backend developer",
    )
