import os
from pathlib import Path


# ---------------------------------------------------------------------
# OS-provided files
# ---------------------------------------------------------------------

PROC_MEMINFO = Path("/proc/meminfo")


# ---------------------------------------------------------------------
# Log files
# ---------------------------------------------------------------------

def get_app_data_dir() -> Path:
    """
    Returns the application data directory.

    - Windows: %APPDATA%\\memprobe
    - Linux/macOS: ~/.memprobe
    """
    if os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", str(Path.home()))
        return Path(base) / "memprobe"
    return Path.home() / ".memprobe"


def get_default_log_file() -> Path:
    """
    Where `--log-json` writes structured logs when no `--log-file` is given.
    The directory is created by the logging setup, not here.
    """
    return get_app_data_dir() / "logs" / "memprobe.log.json"
