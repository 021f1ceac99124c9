"""Pick an evaluation domain strategy for a requested size."""

import logging

from domains.basic_radix2 import BasicRadix2Domain
from domains.errors import InvalidDomainSize
from domains.evaluation_domain import EvaluationDomain
from domains.extended_radix2 import ExtendedRadix2Domain
from primitives.field import PrimeField

logger = logging.getLogger(__name__)

_STRATEGIES = (BasicRadix2Domain, ExtendedRadix2Domain)


def get_evaluation_domain(field: PrimeField, min_size: int) -> EvaluationDomain:
    """Return a domain of size min_size, or of the next power of two.

    Tries each strategy at min_size first, then at the next power of two, and
    returns the first one whose constructor accepts the size.

    Raises:
        InvalidDomainSize: If no strategy can hold min_size points
    """
    if min_size <= 1:
        raise InvalidDomainSize(f"get_evaluation_domain: expected min_size > 1, got {min_size}")

    sizes = [min_size]
    rounded = 1 << (min_size - 1).bit_length()
    if rounded != min_size:
        sizes.append(rounded)

    for size in sizes:
        for strategy in _STRATEGIES:
            try:
                domain = strategy(field, size)
            except InvalidDomainSize as e:
                logger.debug("%s rejected size %d: %s", strategy.__name__, size, e)
                continue
            logger.debug("Selected %r for min_size=%d", domain, min_size)
            return domain

    raise InvalidDomainSize(
        f"get_evaluation_domain: no domain of size >= {min_size} over {field.name} "
        f"(largest is 2^{field.two_adicity + 1})"
    )
