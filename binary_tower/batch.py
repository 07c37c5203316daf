"""Montgomery batch inversion for tower field elements.

Converts N field inversions into 3N-3 multiplications + 1 inversion, which
matters here because a single inversion costs about 2 * BITS multiplications.
"""

from typing import List, Sequence

from .errors import HeightError, NoInverseError
from .field import FieldElement


def batch_inverse(values: Sequence[FieldElement]) -> List[FieldElement]:
    """Invert every element of values.

    Algorithm:
    1. Forward pass: prefix products cumprods[i] = a[0] * a[1] * ... * a[i]
    2. Single inversion: inv_total = cumprods[N-1]^(-1)
    3. Backward pass: extract individual inverses using cumprods

    Args:
        values: Elements of a single height, all nonzero

    Returns:
        List where result[i] = values[i]^(-1)

    Raises:
        NoInverseError: If any element is zero.
        HeightError: If the elements do not all share one height.
    """
    n = len(values)
    if n == 0:
        return []

    field_type = type(values[0])
    for i, v in enumerate(values):
        if type(v) is not field_type:
            raise HeightError(
                f"batch_inverse: element {i} is {type(v).__name__}, expected {field_type.__name__}"
            )
        if not v:
            raise NoInverseError(f"batch_inverse: element {i} is zero")

    cumprods = [values[0]] * n
    for i in range(1, n):
        cumprods[i] = cumprods[i - 1] * values[i]

    z = cumprods[n - 1].inverse()

    results = [field_type.ZERO] * n
    for i in range(n - 1, 0, -1):
        results[i] = z * cumprods[i - 1]
        z = z * values[i]
    results[0] = z

    return results
