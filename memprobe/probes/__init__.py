from memprobe.probes.base import NOT_DETECTED, OsStat
from memprobe.probes.combined import CombinedOsStat
from memprobe.probes.factory import ProbeFactory
from memprobe.probes.linux import LinuxMemoryStats
from memprobe.probes.macos import MacOSMemoryStats
from memprobe.probes.windows import WindowsMemoryStats, WindowsOsInfo, parse_code_name

__all__ = [
    "NOT_DETECTED",
    "OsStat",
    "CombinedOsStat",
    "ProbeFactory",
    "LinuxMemoryStats",
    "MacOSMemoryStats",
    "WindowsMemoryStats",
    "WindowsOsInfo",
    "parse_code_name",
]
