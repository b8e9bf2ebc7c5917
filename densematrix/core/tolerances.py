"""
Tolerance tiers for approximate matrix comparison.

Matrix equality (==) is exact. Results of floating point arithmetic are
compared with Matrix.allclose() under one of these tiers instead:
- EXACT: no slack at all
- FP64: a few ulps of float64 (default)
- LOOSE: for values that went through rounding or lossy input
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bitwise-equal values only (NaN never matches)',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, differences from operation ordering',
)

LOOSE = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='loose',
    description='Relaxed, values parsed from text or single precision',
)

DEFAULT_TOLERANCE = FP64


def select_tolerance(name: str) -> ToleranceTier:
    """Look up a tier by its name."""
    tiers = {tier.name: tier for tier in (EXACT, FP64, LOOSE)}
    if name not in tiers:
        raise KeyError(
            f"Unknown tolerance tier '{name}'. Available: {sorted(tiers)}"
        )
    return tiers[name]
