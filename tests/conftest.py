import pytest

from config.settings import TempMonConfig
from core.metrics import ProbeMetrics

CONFIG_TOML = """
[settings]
metrics_port = 9184
probe_interval = 15
probe_resolution = 10

[probe_labels]
"28-aaa" = "aaa-label"
"28-bbb" = "bbb-label"

[calibration_offsets]
"28-aaa" = 0.5
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("TEMPMON_CONFIG", "TEMPMON_METRICS_PORT", "TEMPMON_PROBE_INTERVAL",
                "TEMPMON_PROBE_RESOLUTION", "TEMPMON_BIND_HOST", "TEMPMON_W1_DEVICES",
                "TEMPMON_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def devices_dir(tmp_path):
    """An empty fake /sys/bus/w1/devices"""
    path = tmp_path / "devices"
    path.mkdir()
    return path


@pytest.fixture
def add_device(devices_dir):
    def _add(hardware_id, content=None):
        device = devices_dir / hardware_id
        device.mkdir()
        if content is not None:
            (device / "w1_slave").write_text(content)
        return device
    return _add


@pytest.fixture
def config_file(tmp_path):
    def _write(text=CONFIG_TOML):
        path = tmp_path / "config.toml"
        path.write_text(text)
        return path
    return _write


@pytest.fixture
def config(config_file, devices_dir, monkeypatch):
    monkeypatch.setenv("TEMPMON_W1_DEVICES", str(devices_dir))
    return TempMonConfig(path=str(config_file()))


@pytest.fixture
def metrics():
    return ProbeMetrics()
