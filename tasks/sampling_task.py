import logging
from .base_task import BackgroundTask
from sensors.errors import classify_error

logger = logging.getLogger(__name__)

class SamplingTask(BackgroundTask):
    """Task untuk membaca semua probe setiap interval dan memperbarui cache."""
    
    def __init__(self, probes, cache, metrics, interval):
        super().__init__(interval, "SamplingTask")
        self.probes = list(probes)
        self.cache = cache
        self.metrics = metrics
    
    def task(self):
        """One tick: sample every probe in discovery order."""
        for probe in self.probes:
            self.sample_probe(probe)
    
    def sample_probe(self, probe):
        """Read one probe and publish the outcome. Never raises for read errors."""
        try:
            raw = probe.read_temperature()
        except Exception as e:
            kind = classify_error(e)
            self.metrics.record_failure(probe.name, kind)
            self.cache.update(probe.name, None)
            logger.error(f"probe: {probe.name}, error reading temperature ({kind.value}): {e}")
            return None
        
        calibrated = raw + probe.offset
        self.metrics.record_success(probe.name, raw, calibrated)
        self.cache.update(probe.name, calibrated)
        logger.info(f"probe: {probe.name}, temperature: {calibrated:.2f}°C")
        return calibrated
