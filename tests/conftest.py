# tests/conftest.py
# Put the repo root on sys.path so `import json_parser` works without an install,
# and provide a helper that runs the CLI against a directory.
import os
import subprocess
import sys

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

PARSER = os.path.join(REPO_ROOT, "json_parser.py")


def _run(*args):
    return subprocess.run([sys.executable, PARSER, *args], capture_output=True, text=True)


@pytest.fixture
def run_cli():
    """Run json_parser.py with the given arguments and return the CompletedProcess."""
    return _run


@pytest.fixture
def verdicts():
    """Run the CLI on a directory and map each reported filename to 'Valid' or 'Invalid'."""
    def _verdicts(directory):
        result = _run(str(directory))
        assert result.returncode == 0, result.stderr
        found = {}
        for line in result.stdout.splitlines():
            name, _, verdict = line.rpartition(": ")
            found[name] = verdict.split()[0]
        return found
    return _verdicts
