# Host detection, used to flag a platform token that does not match the machine
import platform
from typing import Optional

_TOKENS = {
    "Windows": "win",
    "Darwin": "osx",
    "Linux": "linux",
}


def get_os_info():
    return platform.system()


def get_platform_token() -> Optional[str]:
    return _TOKENS.get(get_os_info())


if __name__ == "__main__":
    print(f"OS: {get_os_info()}")
    print(f"Platform token: {get_platform_token()}")
