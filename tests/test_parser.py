import pytest

from steiner.core.model import ConfigError, InvalidParameters
from steiner.io.parser import config_from_mapping, load_config, parse_prune


def write(tmp_path, text):
    path = tmp_path / "run.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_config(tmp_path):
    path = write(tmp_path, "n: 9\nk: 3\nt: 2\nworkers: 4\noutput: bits\n")
    config = load_config(path)
    assert (config.n, config.k, config.t) == (9, 3, 2)
    assert config.workers == 4
    assert config.output == "bits"
    assert config.prune is None
    assert config.limit is None
    assert config.parameters().blocks == 12


@pytest.mark.parametrize("text,expected", [("auto", None), ("true", True), ("false", False)])
def test_prune_values(tmp_path, text, expected):
    path = write(tmp_path, f"n: 7\nk: 3\nt: 2\nprune: {text}\n")
    assert load_config(path).prune is expected


def test_parse_prune_rejects_nonsense():
    with pytest.raises(ConfigError):
        parse_prune("sometimes")


def test_unknown_key(tmp_path):
    path = write(tmp_path, "n: 7\nk: 3\nt: 2\nlambda: 1\n")
    with pytest.raises(ConfigError, match="lambda"):
        load_config(path)


def test_missing_key():
    with pytest.raises(ConfigError, match="t"):
        config_from_mapping({"n": 7, "k": 3})


def test_bad_value():
    with pytest.raises(ConfigError):
        config_from_mapping({"n": "seven", "k": 3, "t": 2})


def test_not_a_mapping(tmp_path):
    path = write(tmp_path, "- 7\n- 3\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_malformed_yaml(tmp_path):
    path = write(tmp_path, "n: [7\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_parameters_validated_on_use():
    config = config_from_mapping({"n": 3, "k": 3, "t": 2})
    with pytest.raises(InvalidParameters):
        config.parameters()


@pytest.mark.parametrize("key,value", [("workers", 0), ("limit", -2)])
def test_out_of_range_run_settings(key, value):
    with pytest.raises(ConfigError, match=key):
        config_from_mapping({"n": 7, "k": 3, "t": 2, key: value})
