# src/maxfile/utils/indexing.py
from typing import Sequence, Union

Number = Union[int, float]

def index_of_max(values: Sequence[Number]) -> int:
    """Returns the index of the largest value. Ties go to the first occurrence."""
    if not values:
        raise ValueError("index_of_max() arg is an empty sequence")

    best = 0
    for i in range(1, len(values)):
        # strict '>' keeps the earliest index on ties
        if values[i] > values[best]:
            best = i
    return best
