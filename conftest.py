import os
import sys

import pytest

# Ensure repo-local imports (e.g., `import game`) resolve without installing.
root_dir = os.path.abspath(os.path.dirname(__file__))
if root_dir not in sys.path:
    sys.path.insert(0, root_dir)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "slow: walks every entry of the full tablebase")


@pytest.fixture(scope="session")
def table():
    """Full tablebase, generated once per test session."""
    from tablebase import TablebaseGenerator

    return TablebaseGenerator().generate()
