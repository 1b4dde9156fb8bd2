from pathlib import Path

import pytest
import yaml

TEST_DATA = Path(__file__).parent / "test_data"


@pytest.fixture
def write_yaml(tmp_path):
    """Write a mapping as a YAML document under tmp_path and return its path."""

    def _write(name: str, tree) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(tree, f, sort_keys=False)
        return path

    return _write


@pytest.fixture
def per_event_dir() -> Path:
    return TEST_DATA / "per_event"


@pytest.fixture
def multi_event_file() -> Path:
    return TEST_DATA / "multi_event" / "events.yaml"
