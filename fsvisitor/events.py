"""알림 관찰자 목록./Ordered observer lists for notifications."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

ArgsT = TypeVar("ArgsT")
Observer = Callable[[ArgsT], None]

REQUEST_FLAGS = ("cancel_requested", "exclude_requested")


class EventHook(Generic[ArgsT]):
    """한 종류의 알림을 구독 순서대로 전달합니다./Dispatch one notification kind in subscription order.

    Every observer receives the same payload object. Request flags combine
    as a logical OR: once an observer sets one, a later observer clearing it
    has no effect on the returned payload.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._observers: list[Observer[ArgsT]] = []

    def subscribe(self, observer: Observer[ArgsT]) -> Observer[ArgsT]:
        """관찰자를 추가합니다./Append an observer."""

        self._observers.append(observer)
        return observer

    def unsubscribe(self, observer: Observer[ArgsT]) -> None:
        """관찰자를 제거합니다./Remove the earliest registration of an observer."""

        try:
            self._observers.remove(observer)
        except ValueError:
            raise ValueError(f"observer is not subscribed to {self.name}") from None

    def clear(self) -> None:
        self._observers.clear()

    def __iadd__(self, observer: Observer[ArgsT]) -> "EventHook[ArgsT]":
        self.subscribe(observer)
        return self

    def __isub__(self, observer: Observer[ArgsT]) -> "EventHook[ArgsT]":
        self.unsubscribe(observer)
        return self

    def __call__(self, args: ArgsT) -> ArgsT:
        raised: set[str] = set()
        for observer in list(self._observers):
            observer(args)
            raised.update(flag for flag in REQUEST_FLAGS if getattr(args, flag, False))
        for flag in raised:
            setattr(args, flag, True)
        return args

    def __len__(self) -> int:
        return len(self._observers)

    def __bool__(self) -> bool:
        return bool(self._observers)

    def __repr__(self) -> str:
        return f"EventHook({self.name!r}, observers={len(self._observers)})"
