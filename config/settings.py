import datetime
import logging
import os
import tomllib
from dotenv import load_dotenv

from sensors.probe import W1_DEVICES_PATH

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_CONFIG_PATH = "/etc/tempmon/config.toml"

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class ConfigError(Exception):
    """Configuration is missing or malformed; the process cannot start."""


def setup_logging(level="INFO"):
    """Configure root logging; later calls only adjust the level"""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, str(level).upper(), logging.INFO))


class TempMonConfig:
    """Class untuk mengelola konfigurasi aplikasi

    Structured settings come from a TOML file; scalar settings may be
    overridden through environment variables (a local .env is honoured).
    """

    def __init__(self, path=None):
        self.CONFIG_PATH = path or os.getenv("TEMPMON_CONFIG", DEFAULT_CONFIG_PATH)
        raw = self._load_file(self.CONFIG_PATH)

        settings = raw.get("settings")
        if not isinstance(settings, dict):
            raise ConfigError(f"{self.CONFIG_PATH}: missing [settings] table")

        # HTTP surface
        self.METRICS_PORT = self._int_setting(settings, "metrics_port", "TEMPMON_METRICS_PORT")
        self.BIND_HOST = os.getenv("TEMPMON_BIND_HOST", settings.get("bind_host", "0.0.0.0"))
        self.DASHBOARD_REFRESH = self._int_setting(settings, "dashboard_refresh", None, default=15)

        # Sampling
        self.PROBE_INTERVAL = self._int_setting(settings, "probe_interval", "TEMPMON_PROBE_INTERVAL")
        self.PROBE_RESOLUTION = self._int_setting(settings, "probe_resolution", "TEMPMON_PROBE_RESOLUTION")
        self.W1_DEVICES_PATH = os.getenv("TEMPMON_W1_DEVICES", W1_DEVICES_PATH)

        # Probe metadata, keyed by hardware id
        self.PROBE_LABELS = raw.get("probe_labels", {})
        self.CALIBRATION_OFFSETS = raw.get("calibration_offsets", {})

        self.LOG_LEVEL = os.getenv("TEMPMON_LOG_LEVEL", settings.get("log_level", "INFO"))

        self.validate()

    @staticmethod
    def _load_file(path):
        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"config file not found: {path}") from e
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"cannot load {path}: {e}") from e

    @staticmethod
    def _int_setting(settings, key, env_key, default=None):
        value = os.getenv(env_key) if env_key else None
        if value is None:
            value = settings.get(key, default)
        if value is None:
            raise ConfigError(f"missing required setting '{key}'")
        # bool is an int subclass; TOML true/false is never a valid number here
        if isinstance(value, bool):
            raise ConfigError(f"setting '{key}' must be an integer, got {value!r}")
        if isinstance(value, float) and not value.is_integer():
            raise ConfigError(f"setting '{key}' must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"setting '{key}' must be an integer, got {value!r}") from e

    def validate(self):
        """Validasi konfigurasi yang diperlukan"""
        if not 1 <= self.METRICS_PORT <= 65535:
            raise ConfigError(f"metrics_port out of range: {self.METRICS_PORT}")
        if self.PROBE_INTERVAL < 1:
            raise ConfigError(f"probe_interval must be at least 1 second, got {self.PROBE_INTERVAL}")
        if not 9 <= self.PROBE_RESOLUTION <= 12:
            raise ConfigError(f"probe_resolution must be between 9 and 12, got {self.PROBE_RESOLUTION}")
        if self.DASHBOARD_REFRESH < 1:
            raise ConfigError(f"dashboard_refresh must be positive, got {self.DASHBOARD_REFRESH}")

        if not isinstance(self.PROBE_LABELS, dict) or not all(
                isinstance(v, str) for v in self.PROBE_LABELS.values()):
            raise ConfigError("[probe_labels] must map probe ids to names")

        if not isinstance(self.CALIBRATION_OFFSETS, dict):
            raise ConfigError("[calibration_offsets] must map probe ids to numbers")
        offsets = {}
        for probe_id, offset in self.CALIBRATION_OFFSETS.items():
            if isinstance(offset, bool) or not isinstance(offset, (int, float)):
                raise ConfigError(f"calibration offset for {probe_id} must be a number, got {offset!r}")
            offsets[probe_id] = float(offset)
        self.CALIBRATION_OFFSETS = offsets

        logger.info(f"Config loaded - {self.CONFIG_PATH}, port {self.METRICS_PORT}, "
                    f"interval {self.PROBE_INTERVAL}s, {len(self.PROBE_LABELS)} label(s)")

    def get_utc_time(self):
        """Get current time in UTC, truncated to whole seconds"""
        return datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)

    def format_utc_time(self, dt=None):
        """Format time for the dashboard footer"""
        if dt is None:
            dt = self.get_utc_time()
        return dt.strftime("%Y-%m-%d %H:%M:%S")
