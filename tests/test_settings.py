import pytest

from batchresize.pipeline.errors import ConfigError
from batchresize.utils import settings
from batchresize.utils.settings import DEFAULTS, load_config


def test_explicit_file_overrides_defaults(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(
        "paths:\n"
        "  input: photos\n"
        "resize:\n"
        "  width: 320\n"
        "  workers: 2\n",
        encoding="utf-8",
    )

    cfg = load_config(cfg_file)

    assert cfg["paths"]["input"] == "photos"
    assert cfg["paths"]["output"] == DEFAULTS["paths"]["output"]
    assert cfg["resize"]["width"] == 320
    assert cfg["resize"]["height"] is None
    assert cfg["resize"]["workers"] == 2
    assert cfg["resize"]["jpeg_quality"] == 75


def test_empty_file_gives_defaults(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("", encoding="utf-8")

    assert load_config(cfg_file) == DEFAULTS


def test_missing_explicit_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_missing_default_file_falls_back(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "_CONFIG_PATH", tmp_path / "absent.yaml")

    cfg = load_config()

    assert cfg == DEFAULTS
    cfg["resize"]["width"] = 1
    assert DEFAULTS["resize"]["width"] is None


@pytest.mark.parametrize("text", ["- a\n- b\n", "resize: 5\n", "paths: [1, 2\n"])
def test_malformed_file(tmp_path, text):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(text, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(cfg_file)


def test_project_config_is_loadable():
    cfg = load_config(settings.get_default_config_path())
    assert set(cfg) >= {"paths", "resize"}


def test_null_values_keep_defaults(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(
        "paths:\n"
        "  output: null\n"
        "resize:\n"
        "  jpeg_quality: null\n"
        "  fail_on_error: null\n",
        encoding="utf-8",
    )

    cfg = load_config(cfg_file)

    assert cfg["paths"]["output"] == "output_images"
    assert cfg["resize"]["jpeg_quality"] == 75
    assert cfg["resize"]["fail_on_error"] is False


def test_unreadable_config_path(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(tmp_path)
