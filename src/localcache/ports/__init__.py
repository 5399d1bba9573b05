"""Port interfaces for local-cache."""

from .archive import ArchivePort
from .clock import ClockPort
from .logger import LoggerPort
from .output import OutputPort
from .state import StatePort
from .store import StorePort

__all__ = [
    "ArchivePort",
    "ClockPort",
    "LoggerPort",
    "OutputPort",
    "StatePort",
    "StorePort",
]
