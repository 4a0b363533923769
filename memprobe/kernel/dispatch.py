"""
This module defines the dispatcher: it turns the command-line arguments into
a platform, builds the matching probe, runs it exactly once and reports the
result through the logger it was given.
"""
from typing import Callable, Sequence

from memprobe.kernel.platforms import Platform, parse_platform
from memprobe.probes.base import OsStat
from memprobe.probes.factory import ProbeFactory
from memprobe.runtime import system

HEADER = "-------------------------"


class StatDispatcher:
    """
    Selects and runs one probe per call. Errors raised by the probe are not
    handled here; they propagate to the caller.
    """
    def __init__(self, logger, probe_factory: Callable[[Platform], OsStat] = ProbeFactory.create):
        self.logger = logger
        self.probe_factory = probe_factory

    def dispatch(self, args: Sequence[str]) -> str:
        platform = parse_platform(args)

        host_token = system.get_platform_token()
        if host_token != platform.value:
            self.logger.warning(
                "Requested platform does not match the host",
                platform=platform.value,
                host=system.get_os_info(),
            )

        probe = self.probe_factory(platform)
        self.logger.debug("Running probe", platform=platform.value, probe=type(probe).__name__)
        report = probe.describe()

        self.logger.info(HEADER)
        self.logger.info(report)
        return report
