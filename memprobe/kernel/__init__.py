from memprobe.kernel.errors import (
    ProbeError,
    InvalidArgument,
    NativeQueryFailure,
    ResourceNotFound,
    IOFailure,
)
from memprobe.kernel.platforms import Platform, USAGE, parse_platform
