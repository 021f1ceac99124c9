"""Domains - evaluation domains over prime fields.

Usage:
    from domains import get_evaluation_domain
    from primitives import prime_field

    F = prime_field("f41", 41)
    domain = get_evaluation_domain(F, 16)   # ExtendedRadix2Domain, s = 3
    evals = domain.fft(coeffs)
    coeffs = domain.inverse_fft(evals)
"""

from domains.basic_radix2 import BasicRadix2Domain
from domains.errors import DomainError, InvalidDomainSize, PreconditionViolated, SizeMismatch
from domains.evaluation_domain import EvaluationDomain
from domains.extended_radix2 import ExtendedRadix2Domain
from domains.factory import get_evaluation_domain

__all__ = [
    # Interface
    "EvaluationDomain",
    "get_evaluation_domain",
    # Strategies
    "BasicRadix2Domain",
    "ExtendedRadix2Domain",
    # Errors
    "DomainError",
    "InvalidDomainSize",
    "SizeMismatch",
    "PreconditionViolated",
]
