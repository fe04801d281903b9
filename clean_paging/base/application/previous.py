from typing import Generic
from typing import Optional
from typing import TypeVar

T = TypeVar("T")

__all__ = ["Previous"]


class Previous(Generic[T]):
    """Remembers the value observed on the previous update."""

    def __init__(self, value: Optional[T] = None):
        self.value = value

    def observe(self, value: T) -> Optional[T]:
        previous, self.value = self.value, value
        return previous
