import logging
import os
from dataclasses import dataclass

from .parser import parse_temperature_data

logger = logging.getLogger(__name__)

W1_DEVICES_PATH = "/sys/bus/w1/devices"
DS18B20_PREFIX = "28-"
STATUS_FILE = "w1_slave"
RESOLUTION_FILE = "resolution"
RESOLUTION_BITS = range(9, 13)


@dataclass(frozen=True)
class Probe:
    """One discovered DS18B20 sensor"""
    hardware_id: str
    name: str
    path: str
    offset: float = 0.0

    @property
    def resolution_path(self):
        return os.path.join(os.path.dirname(self.path), RESOLUTION_FILE)

    def read_temperature(self):
        """Read and decode the status file; OSError propagates to the caller"""
        with open(self.path, "r") as f:
            data = f.read()
        return parse_temperature_data(data)

    def set_resolution(self, bits):
        """Write the conversion resolution (9-12 bits). Returns False on failure."""
        if bits not in RESOLUTION_BITS:
            logger.warning(f"Resolution {bits} out of range for {self.name}, keeping current setting")
            return False
        try:
            with open(self.resolution_path, "w") as f:
                f.write(str(bits))
        except OSError as e:
            logger.warning(f"Failed to set resolution for {self.name}: {e}")
            return False
        logger.info(f"Resolution for {self.name} set to {bits} bits")
        return True


def discover_probes(labels, offsets=None, devices_path=W1_DEVICES_PATH):
    """Enumerate attached DS18B20 probes once at startup.

    A missing devices directory means no one-wire bus is present; that is
    logged and yields an empty list so the service still starts.
    """
    offsets = offsets or {}
    probes = []

    if not os.path.isdir(devices_path):
        logger.warning(f"{devices_path} not found. make sure w1-gpio is enabled.")
        return probes

    try:
        entries = sorted(os.listdir(devices_path))
    except OSError as e:
        logger.warning(f"error discovering probes in {devices_path}: {e}")
        return probes

    seen_names = set()
    for hardware_id in entries:
        if not hardware_id.startswith(DS18B20_PREFIX):
            continue

        name = labels.get(hardware_id, hardware_id)
        if name in seen_names:
            label = name
            name = f"{label} ({hardware_id})"
            suffix = 2
            while name in seen_names:
                name = f"{label} ({hardware_id} #{suffix})"
                suffix += 1
            logger.warning(f"Duplicate probe name '{label}' for {hardware_id}, renamed to '{name}'")
        seen_names.add(name)

        probes.append(Probe(
            hardware_id=hardware_id,
            name=name,
            path=os.path.join(devices_path, hardware_id, STATUS_FILE),
            offset=float(offsets.get(hardware_id, 0.0)),
        ))

    logger.info(f"Found {len(probes)} probe(s): {', '.join(p.name for p in probes) or '-'}")
    return probes
