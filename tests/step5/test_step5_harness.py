import os
import subprocess
import sys
import pytest

TEST_DIR = os.path.dirname(__file__)

# List all .json files in step5/
json_files = sorted(f for f in os.listdir(TEST_DIR) if f.endswith(".json"))

VALID_FILES = [f for f in json_files if f.startswith("pass")]
INVALID_FILES = [f for f in json_files if f.startswith("fail")]

# Hard fail if test files are missing
if not VALID_FILES:
    raise RuntimeError("No pass*.json files found in step5 directory")
if not INVALID_FILES:
    raise RuntimeError("No fail*.json files found in step5 directory")


@pytest.fixture(scope="module")
def reported():
    # One CLI run covers the whole corpus
    parser = os.path.join(TEST_DIR, "..", "..", "json_parser.py")
    result = subprocess.run([sys.executable, parser, TEST_DIR], capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
    return dict(line.rsplit(": ", 1) for line in result.stdout.splitlines())


def test_every_json_file_reported(reported):
    assert sorted(reported) == json_files


@pytest.mark.parametrize("filename", VALID_FILES)
def test_valid_json_reported_valid(filename, reported):
    assert reported[filename] == "Valid JSON", f"Expected Valid JSON for {filename}"


@pytest.mark.parametrize("filename", INVALID_FILES)
def test_invalid_json_reported_invalid(filename, reported):
    assert reported[filename] == "Invalid JSON", f"Expected Invalid JSON for {filename}"
