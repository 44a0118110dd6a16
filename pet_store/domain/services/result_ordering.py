import random
from typing import MutableSequence, Optional, TypeVar

T = TypeVar("T")


def shuffle_in_place(items: MutableSequence[T], rng: Optional[random.Random] = None) -> MutableSequence[T]:
    """Fisher-Yates shuffle. Uses the module-level generator unless ``rng`` is given."""
    randrange = rng.randrange if rng is not None else random.randrange
    for i in range(len(items) - 1, 0, -1):
        j = randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def suppress_timestamp_ordering(
    items: MutableSequence[T], timestamp_sort_requested: bool, rng: Optional[random.Random] = None
) -> MutableSequence[T]:
    """Destroy any order a caller could read as a timestamp sort.

    Sorting by ``createdAt``/``updatedAt`` is accepted, but the page comes back
    uniformly shuffled, whatever order the store returned it in.
    """
    if timestamp_sort_requested:
        shuffle_in_place(items, rng)
    return items
