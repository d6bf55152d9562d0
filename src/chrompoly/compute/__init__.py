from .state import Phase, Progress, SharedGraph
from .coordinator import Coordinator, POLL_INTERVAL, THREAD_NAME

__all__ = [
    "Phase",
    "Progress",
    "SharedGraph",
    "Coordinator",
    "POLL_INTERVAL",
    "THREAD_NAME",
]
