import abc
import enum


__all__ = ['Flow', 'ForEach', 'try_for_each']


class Flow(enum.Enum):
    CONTINUE = "continue"
    BREAK = "break"


def try_for_each(iterable, callback):
    """
    Pulls elements from `iterable` one at a time and calls `callback` with each of them.

    Traversal stops as soon as `callback` returns `Flow.BREAK`, so this also terminates on unbounded sources like
    `itertools.count()`. Returning nothing counts as `Flow.CONTINUE`.

    Returns:
        `Flow.BREAK` if the callback stopped the traversal, `Flow.CONTINUE` if the source was exhausted.
    """
    for elem in iterable:
        if callback(elem) is Flow.BREAK:
            return Flow.BREAK

    return Flow.CONTINUE


class ForEach(abc.ABC):
    """
    Anything that can be driven to exhaustion with early-termination signalling.

    Any class defining `__iter__` is treated as a ForEach; subclassing explicitly adds the `for_each` method.
    """
    @abc.abstractmethod
    def __iter__(self):
        pass

    def for_each(self, callback):
        return try_for_each(self, callback)

    @classmethod
    def __subclasshook__(cls, C):
        if cls is ForEach:
            for B in C.__mro__:
                if "__iter__" in B.__dict__:
                    if B.__dict__["__iter__"] is None:
                        return NotImplemented
                    return True
        return NotImplemented
