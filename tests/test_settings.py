import pytest

from config.settings import ConfigError, TempMonConfig


def test_load_valid_config(config):
    assert config.METRICS_PORT == 9184
    assert config.PROBE_INTERVAL == 15
    assert config.PROBE_RESOLUTION == 10
    assert config.PROBE_LABELS == {"28-aaa": "aaa-label", "28-bbb": "bbb-label"}
    assert config.CALIBRATION_OFFSETS == {"28-aaa": 0.5}
    assert config.BIND_HOST == "0.0.0.0"
    assert config.DASHBOARD_REFRESH == 15


def test_calibration_offsets_optional(config_file):
    config = TempMonConfig(path=str(config_file("""
[settings]
metrics_port = 8080
probe_interval = 5
probe_resolution = 9

[probe_labels]
""")))
    assert config.PROBE_LABELS == {}
    assert config.CALIBRATION_OFFSETS == {}


def test_integer_offsets_become_floats(config_file):
    config = TempMonConfig(path=str(config_file("""
[settings]
metrics_port = 8080
probe_interval = 5
probe_resolution = 9

[calibration_offsets]
"28-abc" = -1
""")))
    assert config.CALIBRATION_OFFSETS == {"28-abc": -1.0}
    assert isinstance(config.CALIBRATION_OFFSETS["28-abc"], float)


def test_env_overrides(config_file, monkeypatch):
    monkeypatch.setenv("TEMPMON_METRICS_PORT", "9999")
    monkeypatch.setenv("TEMPMON_PROBE_INTERVAL", "3")
    monkeypatch.setenv("TEMPMON_BIND_HOST", "127.0.0.1")
    monkeypatch.setenv("TEMPMON_W1_DEVICES", "/tmp/w1")

    config = TempMonConfig(path=str(config_file()))

    assert config.METRICS_PORT == 9999
    assert config.PROBE_INTERVAL == 3
    assert config.BIND_HOST == "127.0.0.1"
    assert config.W1_DEVICES_PATH == "/tmp/w1"


def test_config_path_from_env(config_file, monkeypatch):
    monkeypatch.setenv("TEMPMON_CONFIG", str(config_file()))
    assert TempMonConfig().METRICS_PORT == 9184


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        TempMonConfig(path=str(tmp_path / "missing.toml"))


def test_malformed_toml(config_file):
    with pytest.raises(ConfigError):
        TempMonConfig(path=str(config_file("[settings\nmetrics_port = ")))


@pytest.mark.parametrize("settings, message", [
    ("probe_interval = 5\nprobe_resolution = 9", "metrics_port"),
    ("metrics_port = 0\nprobe_interval = 5\nprobe_resolution = 9", "metrics_port"),
    ("metrics_port = 70000\nprobe_interval = 5\nprobe_resolution = 9", "metrics_port"),
    ('metrics_port = "http"\nprobe_interval = 5\nprobe_resolution = 9', "metrics_port"),
    ("metrics_port = 80\nprobe_interval = 0\nprobe_resolution = 9", "probe_interval"),
    ("metrics_port = 80\nprobe_interval = 5\nprobe_resolution = 8", "probe_resolution"),
    ("metrics_port = 80\nprobe_interval = 5\nprobe_resolution = true", "probe_resolution"),
    ("metrics_port = 9184.9\nprobe_interval = 5\nprobe_resolution = 9", "metrics_port"),
    ("metrics_port = 80\nprobe_interval = 5\nprobe_resolution = 10.7", "probe_resolution"),
])
def test_invalid_settings(config_file, settings, message):
    with pytest.raises(ConfigError, match=message):
        TempMonConfig(path=str(config_file(f"[settings]\n{settings}\n")))


def test_missing_settings_table(config_file):
    with pytest.raises(ConfigError, match=r"\[settings\]"):
        TempMonConfig(path=str(config_file('[probe_labels]\n"28-a" = "a"\n')))


def test_non_numeric_offset(config_file):
    with pytest.raises(ConfigError, match="28-abc"):
        TempMonConfig(path=str(config_file("""
[settings]
metrics_port = 80
probe_interval = 5
probe_resolution = 9

[calibration_offsets]
"28-abc" = "warm"
""")))


def test_integral_float_accepted(config_file):
    config = TempMonConfig(path=str(config_file(
        "[settings]\nmetrics_port = 9184.0\nprobe_interval = 5\nprobe_resolution = 9\n")))
    assert config.METRICS_PORT == 9184
