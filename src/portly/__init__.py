"""Portly - port discovery for long-lived apps behind a reverse proxy."""

__version__ = "0.1.0"

from .assigner import (
    AssignmentResult,
    InvalidRangeError,
    PortAssigner,
    PortAssignmentError,
    PortRange,
    ProbeError,
    ScanExhaustedError,
)
from .expansion import crossed_thresholds, next_ceiling
from .history import HistoryStore, HistoryWriteError
from .ownership import OwnershipResolver, ProcessInventory, SystemInventory
from .prober import PortProber, ProbeResult
from .proxy import ProxyConfigError, render_template, write_proxy_config

__all__ = [
    "__version__",
    "AssignmentResult",
    "InvalidRangeError",
    "PortAssigner",
    "PortAssignmentError",
    "PortRange",
    "ProbeError",
    "ScanExhaustedError",
    "crossed_thresholds",
    "next_ceiling",
    "HistoryStore",
    "HistoryWriteError",
    "OwnershipResolver",
    "ProcessInventory",
    "SystemInventory",
    "PortProber",
    "ProbeResult",
    "ProxyConfigError",
    "render_template",
    "write_proxy_config",
]
