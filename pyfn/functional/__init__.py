from .iterators import *
from pyfn.utils.trace import traced, warn


__all__ = [
    'identity', 'map', 'filter', 'filter_map', 'for_each', 'for_each_mutable',
    'fold', 'fold_right', 'reduce', 'flatten', 'flat', 'flat_map',
    'EmptyReduceError', 'builtin_map', 'builtin_filter',
    'Flow', 'ForEach', 'try_for_each',
]

builtin_map = map
builtin_filter = filter


class EmptyReduceError(TypeError): pass


def identity(x):
    return x


# (a -> b) -> [a] -> [b]
@traced
def map(arr, callback):
    """
    Creates a new list populated with the results of calling `callback` on every element of `arr`.

    `callback` is called once for each element, in order, and no element is skipped. `arr` itself is not changed.

    Args:
        arr (iterable): The sequence to transform.
        callback (callable): Any callable taking one element. Closures may capture state.
    Returns:
        A list with the same length and order as `arr`.
    """
    items = _snapshot(arr)
    result = [None] * len(items)

    for i, e in enumerate(items):
        result[i] = callback(e)

    return result


@traced
def filter(arr, predicate):
    """
    Creates a new list of all the elements of `arr` for which `predicate` returned a truthy value.

    Elements which do not pass the test are not included in the new list.
    """
    result = []
    for e in arr:
        if predicate(e):
            result.append(e)
    return result


# (a -> Optional[b]) -> [a] -> [b]
@traced
def filter_map(arr, callback):
    """
    Filters and maps in one pass: keeps `callback(e)` for every element where it is not None.

    >>> filter_map([1, 2, 3, 4, 5], lambda x: x * 2 if x % 2 == 0 else None)
    [4, 8]
    """
    result = []
    for e in arr:
        mapped = callback(e)
        if mapped is not None:
            result.append(mapped)
    return result


def _snapshot(arr):
    # traversal is bounded by the elements present when the call starts
    return tuple(arr)


@traced
def for_each(arr, callback):
    """
    Calls `callback` once for each element of `arr`, in ascending index order.

    The most restrictive of the for_each family: `callback` should not mutate the values it captures.
    Use :func:`for_each_mutable` to accumulate into outer state.
    """
    for e in _snapshot(arr):
        callback(e)


@traced
def for_each_mutable(arr, callback):
    """
    Like :func:`for_each`, but `callback` is allowed to mutate the state it captured from its enclosing scope.

    >>> result = []
    >>> for_each_mutable([1, 2, 3], lambda x: result.append(x * 2))
    >>> result
    [2, 4, 6]

    `callback` is called exactly `len(arr)` times even if it appends to or removes from `arr`.
    """
    for e in _snapshot(arr):
        callback(e)


# (b -> a -> b) -> b -> [a] -> b
@traced
def fold(arr, init, callback):
    """
    Combines all the elements of `arr` into a single value by applying `callback` to each element in turn.

    Also known as `reduce`; `fold` refers to folding the elements of the collection into one value.
    `fold([], init, f)` is `init`.
    """
    curr = init
    for e in arr:
        curr = callback(curr, e)
    return curr


# (a -> b -> b) -> b -> [a] -> b
@traced
def fold_right(arr, init, callback):
    curr = init
    for e in reversed(list(arr)):
        curr = callback(e, curr)
    return curr


@traced
def reduce(arr, init, callback):
    """
    Runs `callback` on each element of `arr`, passing in the return value from the calculation on the preceding element.

    If `init` is None, the accumulator starts at the first element and the iteration starts at the second one;
    otherwise the accumulator starts at `init` and every element is folded in.

    Args:
        arr (iterable): Sequence of integers.
        init (int or None): The seed, or None for no seed.
        callback (callable): `(acc, elem) -> acc`.
    Returns:
        The final accumulator.
    Raises:
        EmptyReduceError: If `arr` is empty and no seed was given.
    """
    it = iter(arr)

    if init is None:
        try:
            curr = next(it)
        except StopIteration:
            warn("reduce() called on an empty sequence with no initial value")
            raise EmptyReduceError("Reduce of empty array with no initial value") from None
    else:
        curr = init

    for e in it:
        curr = callback(curr, e)

    return curr


@traced
def flatten(arr):
    """
    Creates a new list with the elements of every sub-sequence of `arr` concatenated into it, in order.

    >>> flatten([[1, 2, 3], [4, 5], [6]])
    [1, 2, 3, 4, 5, 6]
    """
    result = []
    for sub in arr:
        result.extend(sub)
    return result


def _flat_once(arr):
    result = []
    for e in arr:
        if isinstance(e, (list, tuple)):
            result.extend(e)
        else:
            result.append(e)
    return result


@traced
def flat(arr, depth=1):
    """
    Creates a new list with all sub-list elements concatenated into it recursively up to the specified depth.

    `depth` is the number of flatten passes left: 0 returns the items of `arr` unchanged in a new list, and
    each further unit splices one more level of nested lists or tuples. Anything else, strings included, is a leaf.
    """
    if depth < 0:
        raise ValueError("depth must be non-negative, got {}".format(depth))

    result = list(arr)
    for _ in range(depth):
        result = _flat_once(result)
    return result


# (a -> [b]) -> [a] -> [b]
@traced
def flat_map(arr, callback):
    """
    Calls `callback` on each element and flattens the returned sequences into a single list.

    Equivalent to `flatten(map(arr, callback))`, but built in one pass without the intermediate nested list.

    >>> flat_map([1, 2, 3], lambda x: [x, x * 2, x * 3])
    [1, 2, 3, 2, 4, 6, 3, 6, 9]
    """
    result = []
    for e in arr:
        result.extend(callback(e))
    return result
