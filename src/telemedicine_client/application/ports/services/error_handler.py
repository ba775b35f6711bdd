"""
Error translation interface for failed provider responses.
"""

from abc import ABC, abstractmethod

from requests import Response


class ProviderErrorHandler(ABC):
    """Turns a non-success upstream response into a domain error."""

    @abstractmethod
    def handle_errors(self, response: Response) -> None:
        """
        Inspect a failed response.

        Implementations raise a ``DomainError`` subclass. Returning normally
        means the failure was recovered and the caller continues with the
        response as-is.
        """
        pass
