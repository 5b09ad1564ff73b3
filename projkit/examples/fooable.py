"""Method-signature showcase: an abstract interface and one implementation."""
from __future__ import annotations

import abc
from typing import Optional


class Fooable(abc.ABC):
    i: int = 0

    @abc.abstractmethod
    def foo(self) -> None: ...

    @abc.abstractmethod
    def bar(self, x: float) -> int: ...

    @abc.abstractmethod
    def bla(self, a: tuple[int, bool], b: Optional[float]) -> dict[int, float]: ...

    def baz(self) -> float:
        return 3.141


class Foo(Fooable):
    def foo(self) -> None:
        pass

    def bar(self, x: float) -> int:
        return 42

    def bla(self, a: tuple[int, bool], b: Optional[float]) -> dict[int, float]:
        return {}


__all__ = ["Fooable", "Foo"]
