from abc import ABC, abstractmethod


class CiPort(ABC):
    @abstractmethod
    def set_output(self, name: str, value: str) -> None:
        """Publishes a machine-readable output of the current step."""
        pass

    @abstractmethod
    def set_failed(self, message: str) -> None:
        """Marks the current step as failed with message."""
        pass
