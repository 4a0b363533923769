"""
macOS memory probe backed by the Mach host_statistics() call.
"""
import ctypes
import ctypes.util
from typing import Callable, Optional

from memprobe.kernel.errors import NativeQueryFailure
from memprobe.probes.base import OsStat

HOST_VM_INFO = 2
KERN_SUCCESS = 0
LIBSYSTEM_FALLBACK = "/usr/lib/libSystem.B.dylib"

natural_t = ctypes.c_uint32
integer_t = ctypes.c_int32


class VMStatistics(ctypes.Structure):
    """struct vm_statistics from <mach/vm_statistics.h>."""
    _fields_ = [
        ("free_count", natural_t),
        ("active_count", natural_t),
        ("inactive_count", natural_t),
        ("wire_count", natural_t),
        ("zero_fill_count", natural_t),
        ("reactivations", natural_t),
        ("pageins", natural_t),
        ("pageouts", natural_t),
        ("faults", natural_t),
        ("cow_faults", natural_t),
        ("lookups", natural_t),
        ("hits", natural_t),
        ("purgeable_count", natural_t),
        ("purges", natural_t),
        ("speculative_count", natural_t),
    ]


def load_libsystem():
    """
    Load libSystem with errno capture enabled and declare the two Mach calls
    the probe uses.
    """
    try:
        lib = ctypes.CDLL(ctypes.util.find_library("System") or LIBSYSTEM_FALLBACK, use_errno=True)
        lib.mach_host_self.restype = ctypes.c_uint32
        lib.mach_host_self.argtypes = []
        lib.host_statistics.restype = ctypes.c_int
        lib.host_statistics.argtypes = [
            ctypes.c_uint32,
            ctypes.c_int,
            ctypes.c_void_p,
            ctypes.POINTER(ctypes.c_uint32),
        ]
    except (OSError, AttributeError) as e:
        raise NativeQueryFailure(
            "Failed to load libSystem, host VM info is only available on macOS",
            error_code=getattr(e, "errno", None),
        ) from e
    return lib


class MacOSMemoryStats(OsStat):
    def __init__(self, libsystem=None, get_errno: Optional[Callable[[], int]] = None):
        self._libsystem = libsystem
        self._get_errno = get_errno or ctypes.get_errno

    def name(self) -> str:
        return "Free pages"

    def stat(self) -> int:
        """
        Returns free + inactive virtual memory pages.

        Raises:
            NativeQueryFailure: host_statistics() returned anything but KERN_SUCCESS.
        """
        lib = self._libsystem if self._libsystem is not None else load_libsystem()

        vm_stats = VMStatistics()
        count = ctypes.c_uint32(ctypes.sizeof(vm_stats) // ctypes.sizeof(integer_t))
        status = lib.host_statistics(
            lib.mach_host_self(), HOST_VM_INFO, ctypes.byref(vm_stats), ctypes.byref(count)
        )
        if status != KERN_SUCCESS:
            raise NativeQueryFailure(
                f"Failed to get host VM info (kern_return {status})",
                error_code=self._get_errno(),
            )
        return vm_stats.free_count + vm_stats.inactive_count
