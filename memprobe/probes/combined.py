from typing import Any

from memprobe.probes.base import OsStat


class CombinedOsStat(OsStat):
    """
    Runs several probes in order and joins their rendered results line by line.
    """
    def __init__(self, *metrics: OsStat):
        if not metrics:
            raise ValueError("CombinedOsStat needs at least one probe")
        self.metrics = list(metrics)

    # name() and stat() fill the OsStat contract; output goes through describe()
    def name(self) -> str:
        return ", ".join(metric.name() for metric in self.metrics)

    def stat(self) -> dict[str, Any]:
        return {metric.name(): metric.stat() for metric in self.metrics}

    def describe(self) -> str:
        return "\n".join(metric.describe() for metric in self.metrics)
