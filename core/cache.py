import threading
import logging

logger = logging.getLogger(__name__)


class TemperatureCache:
    """Latest reading per probe, shared between the sampler and web requests.

    Keys are fixed at construction. A value is the calibrated temperature in
    °C, or None when the most recent read failed (or none has happened yet).
    """

    def __init__(self, names):
        self.data_lock = threading.Lock()
        with self.data_lock:
            self._temperatures = {name: None for name in names}

    def update(self, name, value):
        """Replace the reading for an existing probe"""
        with self.data_lock:
            if name not in self._temperatures:
                raise KeyError(f"unknown probe: {name}")
            self._temperatures[name] = value

    def snapshot(self):
        """Copy of the whole mapping, safe to use without the lock"""
        with self.data_lock:
            return self._temperatures.copy()

    def names(self):
        with self.data_lock:
            return sorted(self._temperatures)

    def __len__(self):
        with self.data_lock:
            return len(self._temperatures)
