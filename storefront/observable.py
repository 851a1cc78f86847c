from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T], None]
Unsubscribe = Callable[[], None]


class Writable(Generic[T]):
    """
    A value holder that pushes every change to its subscribers.

    subscribe() calls the subscriber once with the current value, then again
    on every set()/update(), synchronously and in subscription order.
    """
    def __init__(self, value: T):
        self._value = value
        self._subscribers: List[Subscriber] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        # copy: a subscriber may unsubscribe while being notified
        for fn in list(self._subscribers):
            fn(value)

    def update(self, fn: Callable[[T], T]) -> None:
        self.set(fn(self._value))

    def subscribe(self, fn: Subscriber) -> Unsubscribe:
        self._subscribers.append(fn)
        fn(self._value)

        def unsubscribe() -> None:
            if fn in self._subscribers:
                self._subscribers.remove(fn)

        return unsubscribe
