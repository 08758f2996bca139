"""
Tolerance tiers for approximate comparison of vectors and matrices.

Structural equality (==) is exact. Algebraic identities that reorder
floating-point operations (distributivity, associativity) only hold
approximately, so comparisons of that kind go through a tier:
- EXACT: bitwise-equal values only
- CPU_FP64: double precision, a few ulps of reordering error
- DISPLAY: what a rounded on-screen rendering could distinguish

Used by Vector.allclose, Matrix.allclose and the test suite.
"""

from dataclasses import dataclass

from pyvecmat.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Relative and absolute tolerance pair for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='No tolerance, values must be identical',
)

CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, allows reordering error',
)

# Front ends render results with 6 significant digits
DISPLAY = ToleranceTier(
    rtol=1e-6,
    atol=1e-9,
    name='display',
    description='Equal after rounding for display',
)

_TIERS = {tier.name: tier for tier in (EXACT, CPU_FP64, DISPLAY)}


def select_tolerance(name: str) -> ToleranceTier:
    """
    Look up a tolerance tier by name.

    Raises:
        ValidationError: If no tier has that name
    """
    try:
        return _TIERS[name]
    except KeyError:
        raise ValidationError(
            f"Unknown tolerance tier: {name!r}. Available: {sorted(_TIERS)}"
        ) from None
