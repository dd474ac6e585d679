"""Test configuration and fixtures for dir2zip."""


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption(
        "--run-cli-tests", action="store_true", default=False, help="Run subprocess CLI integration tests (slow)"
    )
