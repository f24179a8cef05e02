from abc import ABC, abstractmethod
from typing import Any


class BaseNotifier(ABC):
    """Abstract chat notification channel bound to a fixed destination."""

    @abstractmethod
    async def send(self, text: str) -> bool:
        """Send a rich-text message to the destination.

        Delivery is fire-and-forget: implementations log failures and return
        False instead of raising.

        Args:
            text: Message body.

        Returns:
            True if the message was accepted, False otherwise.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release any resources held by the notifier."""
        ...

    async def __aenter__(self) -> "BaseNotifier":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.close()
