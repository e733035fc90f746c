"""
Shared test fixtures for the tagshell test suite.
"""

from unittest.mock import Mock, patch

import pytest

EXAMPLE_MARKUP = "<vim/> <text.txt/> </text.txt>"


@pytest.fixture
def example_markup() -> str:
    """The two-command example document: a bare tag and a closed one."""
    return EXAMPLE_MARKUP


@pytest.fixture
def mock_subprocess_run():
    """Patch subprocess.run in the runner so no real program is started.

    The mock returns a completed process with exit status 0; tests can set
    `return_value.returncode` or `side_effect` to simulate failures.

    Usage:
        def test_something(mock_subprocess_run):
            mock_subprocess_run.return_value.returncode = 2
    """
    with patch("tagshell.commands.runner.subprocess.run") as mock_run:
        mock_run.return_value = Mock(returncode=0)
        yield mock_run
