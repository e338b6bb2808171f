"""
Minimal broadcaster used for the game notifications: grid changed, tiles merged and tile clicked.
"""

from typing import Callable, Generic, TypeVar

Handler = TypeVar('Handler', bound=Callable[..., None])


class EventHook(Generic[Handler]):
    """
    An ordered list of handlers, all called on ``fire``.
    """

    def __init__(self):
        self._handlers: list[Handler] = []

    def __len__(self) -> int:
        return len(self._handlers)

    def on(self, handler: Handler) -> Callable[[], None]:
        """
        Register a handler.

        Parameters
        ----------
        handler : callable
            Called with the arguments of every ``fire``.

        Returns
        -------
        callable
            Unsubscribe function: removes the first registered handler identical to ``handler``.
            Calling it again is a no-op.
        """
        self._handlers.append(handler)
        active = True

        def unsubscribe() -> None:
            nonlocal active
            if not active:
                return
            active = False
            for index, registered in enumerate(self._handlers):
                if registered is handler:
                    del self._handlers[index]
                    return

        return unsubscribe

    def fire(self, *args) -> None:
        """Call every handler in registration order."""
        for handler in list(self._handlers):
            handler(*args)
