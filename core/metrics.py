"""
Prometheus metrics for the probe sampler.

The registry is created once by the monitor and shared by the sampling task
(writes) and the /metrics route (reads). prometheus_client metrics are
thread-safe, so no extra locking is needed here.
"""

import time
import logging
from prometheus_client import CollectorRegistry, Counter, Gauge, generate_latest, CONTENT_TYPE_LATEST

from sensors.errors import ErrorKind

logger = logging.getLogger(__name__)


class ProbeMetrics:
    """Gauges and counters describing the attached probes"""

    def __init__(self, registry=None):
        self.registry = registry if registry is not None else CollectorRegistry()

        self.temperature = Gauge(
            'tempmon_temperature_celsius',
            'Calibrated temperature reading in Celsius',
            ['probe'],
            registry=self.registry
        )
        self.raw_temperature = Gauge(
            'tempmon_temperature_raw_celsius',
            'Uncalibrated temperature reading in Celsius',
            ['probe'],
            registry=self.registry
        )
        self.read_errors = Counter(
            'tempmon_temperature_read_errors_total',
            'Total number of failed temperature reads',
            ['probe', 'error_type'],
            registry=self.registry
        )
        self.calibration_offset = Gauge(
            'tempmon_probe_calibration_offset_celsius',
            'Configured calibration offset in Celsius',
            ['probe'],
            registry=self.registry
        )
        self.last_sample = Gauge(
            'tempmon_last_sample_timestamp_seconds',
            'Unix timestamp of the last successful sample',
            ['probe'],
            registry=self.registry
        )
        self.probes_discovered = Gauge(
            'tempmon_probes_discovered',
            'Number of probes found at startup',
            registry=self.registry
        )

    def register_probes(self, probes):
        """Create every per-probe series up front so all probes are visible"""
        self.probes_discovered.set(len(probes))
        for probe in probes:
            self.calibration_offset.labels(probe=probe.name).set(probe.offset)
            for kind in ErrorKind:
                self.read_errors.labels(probe=probe.name, error_type=kind.value)

    def record_success(self, name, raw, calibrated):
        self.raw_temperature.labels(probe=name).set(raw)
        self.temperature.labels(probe=name).set(calibrated)
        self.last_sample.labels(probe=name).set(time.time())

    def record_failure(self, name, kind):
        self.read_errors.labels(probe=name, error_type=kind.value).inc()
        # A failed probe has no current calibrated value
        try:
            self.temperature.remove(name)
        except KeyError:
            pass

    def render(self):
        """Encode the registry in the text exposition format"""
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
