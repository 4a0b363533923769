"""
Error kinds raised by the probes and the dispatcher.

Every error is fatal to the run: nothing in memprobe retries or falls back to
another probe. The CLI entry point is the only place these are caught.
"""
from typing import Optional


class ProbeError(Exception):
    """
    Base class for all memprobe errors.
    """
    pass


class InvalidArgument(ProbeError):
    """
    Wrong argument count or an unrecognized platform token.
    """
    pass


class NativeQueryFailure(ProbeError):
    """
    The OS-level statistics call reported failure.
    Carries the platform error code captured right after the call.
    """
    def __init__(self, message: str, error_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        if self.error_code is None:
            return self.message
        return f"{self.message}. Error code: {self.error_code}"


class ResourceNotFound(ProbeError):
    """
    An OS-provided file the probe depends on does not exist.
    """
    pass


class IOFailure(ProbeError):
    """
    An OS-provided file exists but could not be read.
    The underlying OSError is chained as __cause__.
    """
    pass
