"""
Linux memory probe backed by the kernel's /proc/meminfo pseudo-file.
"""
from pathlib import Path
from typing import Optional

from memprobe.internal import paths
from memprobe.internal.logging import get_logger
from memprobe.kernel.errors import IOFailure, ResourceNotFound
from memprobe.probes.base import OsStat

logger = get_logger(__name__)

MEM_AVAILABLE_KEY = "MemAvailable:"


class LinuxMemoryStats(OsStat):
    def __init__(self, meminfo_path: Optional[Path] = None):
        self.meminfo_path = Path(meminfo_path) if meminfo_path else paths.PROC_MEMINFO

    def name(self) -> str:
        return "Available memory"

    def stat(self) -> Optional[int]:
        """
        Returns MemAvailable in bytes, or None when the line is absent or its
        value is not an integer.

        Raises:
            ResourceNotFound: the meminfo file does not exist.
            IOFailure: the meminfo file exists but cannot be read.
        """
        if not self.meminfo_path.exists():
            raise ResourceNotFound(f'File "{self.meminfo_path}" not found')

        try:
            lines = self.meminfo_path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise IOFailure(f'Error reading file "{self.meminfo_path}"') from e

        for line in lines:
            fields = line.split()
            if len(fields) > 1 and fields[0] == MEM_AVAILABLE_KEY:
                return self._parse_fields(fields)

        logger.debug("MemAvailable line not found", path=str(self.meminfo_path))
        return None

    def _parse_fields(self, fields: list[str]) -> Optional[int]:
        # Plain ASCII digits only: no sign, no underscores
        value = fields[1]
        if not (value.isascii() and value.isdigit()):
            logger.warning(
                "Unparseable MemAvailable value",
                value=value,
                path=str(self.meminfo_path),
            )
            return None

        memory = int(value)

        # Values without a unit are left as the kernel reports them
        if len(fields) > 2 and fields[2] == "kB":
            memory *= 1024
        return memory
