from enum import Enum
from typing import Sequence

from memprobe.kernel.errors import InvalidArgument

USAGE = (
    "Usage:\n"
    "memprobe win|osx|linux"
)


class Platform(str, Enum):
    """The closed set of platform tokens accepted on the command line."""
    WINDOWS = "win"
    MACOS = "osx"
    LINUX = "linux"


def parse_platform(args: Sequence[str]) -> Platform:
    """
    Turn the raw positional arguments into a Platform.
    Raises InvalidArgument unless there is exactly one recognized token.
    """
    if not args:
        raise InvalidArgument(
            'Invalid command line! Parameter "platform" is missed!'
        )
    if len(args) > 1:
        raise InvalidArgument(
            f'Invalid command line! Expected a single "platform" parameter, got {len(args)}.'
        )
    try:
        return Platform(args[0])
    except ValueError:
        raise InvalidArgument(
            'Invalid command line! Parameter "platform" should be "osx", "win" or "linux"'
        ) from None
