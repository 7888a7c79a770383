from dataclasses import dataclass

VALID_DUMP = (
    "6d 01 55 05 7f a5 a5 66 3e : crc=3e YES\n"
    "6d 01 55 05 7f a5 a5 66 3e t={millis}\n"
)


def w1_dump(millis):
    return VALID_DUMP.format(millis=millis)


@dataclass
class FakeProbe:
    """Stands in for sensors.probe.Probe; returns a value or raises"""
    name: str
    result: object
    offset: float = 0.0
    reads: int = 0

    def read_temperature(self):
        self.reads += 1
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result
