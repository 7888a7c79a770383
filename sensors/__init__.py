from .errors import ErrorKind, ProbeReadError, classify_error
from .parser import parse_temperature_data
from .probe import Probe, discover_probes

__all__ = [
    'ErrorKind',
    'ProbeReadError',
    'classify_error',
    'parse_temperature_data',
    'Probe',
    'discover_probes'
]
