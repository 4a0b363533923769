from memprobe.kernel.platforms import Platform
from memprobe.probes.base import OsStat
from memprobe.probes.combined import CombinedOsStat
from memprobe.probes.linux import LinuxMemoryStats
from memprobe.probes.macos import MacOSMemoryStats
from memprobe.probes.windows import WindowsMemoryStats, WindowsOsInfo


class ProbeFactory:
    @staticmethod
    def create(platform: Platform) -> OsStat:
        if platform is Platform.WINDOWS:
            return CombinedOsStat(WindowsOsInfo(), WindowsMemoryStats())
        elif platform is Platform.MACOS:
            return MacOSMemoryStats()
        elif platform is Platform.LINUX:
            return LinuxMemoryStats()
        else:
            raise ValueError(f"Unknown platform: {platform}")
