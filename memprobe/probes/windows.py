"""
Windows probes: available physical memory via psapi!GetPerformanceInfo and
OS edition/build via kernel32!GetVersionExW.

Structures use fixed-width ctypes so this module imports on every platform;
the DLLs are only loaded when a probe actually runs.
"""
import ctypes
from typing import Callable, Optional

from memprobe.kernel.errors import NativeQueryFailure
from memprobe.probes.base import OsStat

DWORD = ctypes.c_uint32
WORD = ctypes.c_uint16
BYTE = ctypes.c_uint8
SIZE_T = ctypes.c_size_t

# wSuiteMask bit -> edition name, in ascending bit order
SUITE_NAMES = (
    (0x00000002, "Enterprise"),
    (0x00000004, "BackOffice"),
    (0x00000008, "Communication Server"),
    (0x00000080, "Datacenter"),
    (0x00000200, "Home"),
    (0x00000400, "Web Server"),
    (0x00002000, "Storage Server"),
    (0x00004000, "Compute Cluster"),
)


class PERFORMANCE_INFORMATION(ctypes.Structure):
    _fields_ = [
        ("cb", DWORD),
        ("CommitTotal", SIZE_T),
        ("CommitLimit", SIZE_T),
        ("CommitPeak", SIZE_T),
        ("PhysicalTotal", SIZE_T),
        ("PhysicalAvailable", SIZE_T),
        ("SystemCache", SIZE_T),
        ("KernelTotal", SIZE_T),
        ("KernelPaged", SIZE_T),
        ("KernelNonpaged", SIZE_T),
        ("PageSize", SIZE_T),
        ("HandleCount", DWORD),
        ("ProcessCount", DWORD),
        ("ThreadCount", DWORD),
    ]


class OSVERSIONINFOEXW(ctypes.Structure):
    _fields_ = [
        ("dwOSVersionInfoSize", DWORD),
        ("dwMajorVersion", DWORD),
        ("dwMinorVersion", DWORD),
        ("dwBuildNumber", DWORD),
        ("dwPlatformId", DWORD),
        ("szCSDVersion", ctypes.c_wchar * 128),
        ("wServicePackMajor", WORD),
        ("wServicePackMinor", WORD),
        ("wSuiteMask", WORD),
        ("wProductType", BYTE),
        ("wReserved", BYTE),
    ]


def load_dll(name: str):
    """
    Load a system DLL with last-error capture, as WinDLL(use_last_error=True).
    """
    try:
        return ctypes.WinDLL(name, use_last_error=True)
    except (AttributeError, OSError) as e:
        # ctypes.WinDLL does not exist off Windows
        raise NativeQueryFailure(
            f"Failed to load {name}.dll, this probe is only available on Windows",
            error_code=getattr(e, "winerror", None),
        ) from e


def get_last_error() -> int:
    return ctypes.get_last_error()


def parse_code_name(suite_mask: int) -> str:
    """
    Decode a wSuiteMask into a comma-joined list of edition names.
    Bits without a known edition are ignored.
    """
    return ",".join(name for bit, name in SUITE_NAMES if suite_mask & bit)


class WindowsMemoryStats(OsStat):
    def __init__(self, psapi=None, last_error: Optional[Callable[[], int]] = None):
        self._psapi = psapi
        self._last_error = last_error or get_last_error

    def name(self) -> str:
        return "Available memory"

    def stat(self) -> int:
        """
        Returns available physical memory in bytes (PageSize * PhysicalAvailable).
        """
        psapi = self._psapi if self._psapi is not None else load_dll("psapi")

        perf_info = PERFORMANCE_INFORMATION()
        perf_info.cb = ctypes.sizeof(perf_info)
        if not psapi.GetPerformanceInfo(ctypes.byref(perf_info), ctypes.sizeof(perf_info)):
            raise NativeQueryFailure("Failed to get Performance Info", error_code=self._last_error())
        return perf_info.PageSize * perf_info.PhysicalAvailable


class WindowsOsInfo(OsStat):
    def __init__(self, kernel32=None, last_error: Optional[Callable[[], int]] = None):
        self._kernel32 = kernel32
        self._last_error = last_error or get_last_error

    def name(self) -> str:
        return "OS code name"

    def stat(self) -> str:
        """
        Returns the decoded edition list followed by a "Build: <n>" line.
        """
        kernel32 = self._kernel32 if self._kernel32 is not None else load_dll("kernel32")

        version_info = OSVERSIONINFOEXW()
        version_info.dwOSVersionInfoSize = ctypes.sizeof(version_info)
        if not kernel32.GetVersionExW(ctypes.byref(version_info)):
            raise NativeQueryFailure("Failed to Initialize OSVersionInfoEx", error_code=self._last_error())
        return f"{parse_code_name(version_info.wSuiteMask)}\nBuild: {version_info.dwBuildNumber}"
