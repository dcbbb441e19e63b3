from abc import ABC, abstractmethod


class IRouteReloader(ABC):
    """Rebuilds the process-wide route table after sites change"""

    @abstractmethod
    def request_reload(self) -> None:
        """Ask for a reload; bursts of requests may be coalesced into one reload"""
        pass
