from abc import ABC, abstractmethod
from typing import Any

NOT_DETECTED = "Not detected"


class OsStat(ABC):
    @abstractmethod
    def name(self) -> str:
        """
        Returns the human-readable label of the statistic.
        """
        pass

    @abstractmethod
    def stat(self) -> Any:
        """
        Issues the native query and returns the statistic value.
        None means the statistic could not be detected.
        """
        pass

    def describe(self) -> str:
        """
        Runs the query once and renders it as "<label>: <value>".
        """
        value = self.stat()
        return f"{self.name()}: {NOT_DETECTED if value is None else value}"
