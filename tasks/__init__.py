from .base_task import BackgroundTask
from .sampling_task import SamplingTask

__all__ = [
    'BackgroundTask',
    'SamplingTask'
]
