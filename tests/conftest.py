"""
Pytest configuration and shared fixtures for liquibase-setup tests.
"""

import pytest

from liquibase_setup.core.platform import PlatformInfo
from tests.mocks import FakeAcquirer, FakeProcessRunner, FakeSearchPath, FakeToolCache


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Platforms
# ============================================================================


@pytest.fixture
def linux_platform() -> PlatformInfo:
    return PlatformInfo(os="linux", arch="x64")


@pytest.fixture
def windows_platform() -> PlatformInfo:
    return PlatformInfo(os="windows", arch="x64")


# ============================================================================
# Collaborator fakes
# ============================================================================


@pytest.fixture
def fake_cache(tmp_path) -> FakeToolCache:
    return FakeToolCache(tmp_path / "tool-cache")


@pytest.fixture
def fake_acquirer(tmp_path) -> FakeAcquirer:
    return FakeAcquirer(tmp_path / "work")


@pytest.fixture
def fake_search_path() -> FakeSearchPath:
    return FakeSearchPath()


@pytest.fixture
def fake_runner() -> FakeProcessRunner:
    return FakeProcessRunner()


# ============================================================================
# Environment isolation
# ============================================================================


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point HOME and the runner directories at a temporary location."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()

    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("USERPROFILE", str(fake_home))
    monkeypatch.delenv("RUNNER_TOOL_CACHE", raising=False)
    monkeypatch.delenv("RUNNER_TEMP", raising=False)

    return fake_home


@pytest.fixture(autouse=True)
def reset_caches():
    """Reset module-level caches between tests."""
    from liquibase_setup.core import platform

    platform.clear_platform_cache()
    yield
