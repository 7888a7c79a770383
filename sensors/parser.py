"""
Decoder for the w1_slave status file written by the kernel w1_therm driver.

The file holds two lines, e.g.:

    6d 01 55 05 7f a5 a5 66 3e : crc=3e YES
    6d 01 55 05 7f a5 a5 66 3e t=22812

The first ends with the driver's CRC verdict, the second carries the
temperature in thousandths of a degree Celsius.
"""

from .errors import ErrorKind, ProbeReadError

CRC_OK_MARKER = "YES"
TEMPERATURE_FIELD = "t="


def parse_temperature_data(data):
    """Return the temperature in °C encoded in a w1_slave dump.

    Raises ProbeReadError(INVALID_DATA) when the CRC marker is missing or the
    t= field is absent or not an integer.
    """
    if CRC_OK_MARKER not in data:
        raise ProbeReadError(ErrorKind.INVALID_DATA, "crc check failed")

    pos = data.find(TEMPERATURE_FIELD)
    if pos == -1:
        raise ProbeReadError(ErrorKind.INVALID_DATA, "temperature field not found")

    raw = data[pos + len(TEMPERATURE_FIELD):].strip()
    try:
        millidegrees = int(raw)
    except ValueError:
        raise ProbeReadError(ErrorKind.INVALID_DATA, f"failed to parse temperature: {raw!r}") from None

    return millidegrees / 1000.0
