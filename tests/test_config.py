import json

import pytest

from arithtri import ConfigError, Triangle, TriangleConfig, load_config


def test_config_normalization():
    cfg = TriangleConfig(strategy="Iterative", overflow="WRAP", write_back=0).normalized()
    assert cfg.strategy == "iterative"
    assert cfg.overflow == "wrap"
    assert cfg.write_back is False


@pytest.mark.parametrize(
    "kwargs,message",
    [
        ({"strategy": "parallel"}, "Unsupported evaluation strategy"),
        ({"overflow": "saturate"}, "Unsupported overflow policy"),
        ({"recursion_threshold": 0}, "recursion_threshold must be positive"),
    ],
)
def test_config_rejects_bad_values(kwargs, message):
    with pytest.raises(ConfigError, match=message):
        TriangleConfig(**kwargs).normalized()
    with pytest.raises(ConfigError):
        Triangle(config=TriangleConfig(**kwargs))


def test_config_manifest_lists_every_setting():
    assert TriangleConfig().manifest() == {
        "strategy": "auto",
        "recursion_threshold": 256,
        "write_back": True,
        "overflow": "raise",
        "thread_safe": False,
    }


def test_load_toml_config(tmp_path):
    path = tmp_path / "triangle.toml"
    path.write_text('[triangle]\nstrategy = "recursive"\nwrite_back = false\n', encoding="utf-8")
    cfg = load_config(path)
    assert cfg.strategy == "recursive"
    assert cfg.write_back is False
    assert cfg.overflow == "raise"


def test_load_json_config(tmp_path):
    path = tmp_path / "triangle.json"
    path.write_text(json.dumps({"overflow": "wrap", "recursion_threshold": 32}), encoding="utf-8")
    cfg = load_config(path)
    assert cfg.overflow == "wrap"
    assert cfg.recursion_threshold == 32


def test_load_config_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.toml")

    yaml_path = tmp_path / "triangle.yaml"
    yaml_path.write_text("strategy: auto\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Unsupported config format"):
        load_config(yaml_path)

    unknown = tmp_path / "unknown.json"
    unknown.write_text(json.dumps({"strategy": "auto", "cache_size": 10}), encoding="utf-8")
    with pytest.raises(ConfigError, match="cache_size"):
        load_config(unknown)
