"""Montgomery batch inversion for galois arrays.

The Montgomery trick converts N field inversions into 3N-3 multiplications
plus a single inversion. It is used wherever a domain needs many inverses at
once, e.g. the denominators t - w^i of the Lagrange basis.
"""

import galois


def batch_inverse(values: galois.FieldArray) -> galois.FieldArray:
    """Invert every entry of a 1-D galois array.

    Algorithm:
    1. Forward pass: prefix products cumprods[i] = a[0] * a[1] * ... * a[i]
    2. Single inversion: inv_total = cumprods[N-1]^(-1)
    3. Backward pass: peel off individual inverses using cumprods

    Args:
        values: FieldArray to invert (must all be non-zero)

    Returns:
        FieldArray where result[i] = values[i]^(-1)

    Raises:
        ZeroDivisionError: If any element is zero
    """
    n = len(values)
    if n == 0:
        return values.copy()
    if n == 1:
        return values ** -1

    field_type = type(values)

    cumprods = field_type.Zeros(n)
    cumprods[0] = values[0]
    for i in range(1, n):
        cumprods[i] = cumprods[i - 1] * values[i]

    if cumprods[n - 1] == 0:
        raise ZeroDivisionError("batch_inverse: input contains a zero element")
    inv_total = cumprods[n - 1] ** -1

    results = field_type.Zeros(n)
    z = inv_total
    for i in range(n - 1, 0, -1):
        results[i] = z * cumprods[i - 1]
        z = z * values[i]
    results[0] = z

    return results
