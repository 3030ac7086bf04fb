from pathlib import Path

import pytest

from shortpath.config import AppConfig, GraphConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = AppConfig()

    assert config.engine.frontier == "heap"
    assert config.graph.input_format == "list"
    assert config.graph.graph_path == config.graph.data_dir / "graph.txt"
    assert config.observability.level == "WARNING"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SHORTPATH_ENGINE_FRONTIER", "sorted")
    monkeypatch.setenv("SHORTPATH_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SHORTPATH_GRAPH_INPUT_FORMAT", "matrix")
    monkeypatch.setenv("SHORTPATH_LOG_LEVEL", "DEBUG")

    config = get_config()

    assert config.engine.frontier == "sorted"
    assert config.graph.data_dir == tmp_path
    assert config.graph.input_format == "matrix"
    assert config.observability.level == "DEBUG"


def test_invalid_frontier_rejected(monkeypatch):
    monkeypatch.setenv("SHORTPATH_ENGINE_FRONTIER", "fibonacci")

    with pytest.raises(ValueError):
        AppConfig()


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_graph_path():
    config = GraphConfig(data_dir=Path("/srv/graphs"), graph_file="city.txt")

    assert config.graph_path == Path("/srv/graphs/city.txt")
