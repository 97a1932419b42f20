"""
General Utility Functions and Definitions

This module contains the type definitions and value types shared across
the DBAP panning code: the scalar capability set that any numeric type
must provide, the Speaker value type, and small helpers for constructing
scalars of a caller-chosen type from canonical constants.

See Also:
    - math_utils: For the coefficient and amplitude formulas
    - config: For centralized configuration management
"""

import numbers
import numpy as np
from dataclasses import dataclass
from typing import Sequence, Tuple, TypeVar, Protocol, Generic, Any, runtime_checkable

# Default scalar used to represent the space (single precision)
DEFAULT_SCALAR = np.float32


@runtime_checkable
class Scalar(Protocol):
    """
    Numeric operations required of any value type used by the DBAP formulas.
    
    The algorithm is generic over its scalar type so callers can choose
    single or double precision (or any custom numeric type) without
    changing the formulas. A conforming type supports addition, subtraction,
    negation, multiplication, division, exponentiation, equality, summation
    via ``sum()`` (which starts from the integer ``0``) and construction from
    a canonical float constant through its constructor, e.g. ``S(20.0)``.
    
    Examples of conforming types: ``float``, ``numpy.float32``,
    ``numpy.float64``, ``decimal.Decimal``.
    """
    
    def __add__(self, other: Any) -> Any: ...
    def __radd__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __neg__(self) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...
    def __pow__(self, other: Any) -> Any: ...


S = TypeVar('S')

# Type aliases for improved readability
Point2 = Tuple[Any, Any]  # (x, y) in the panning plane


@dataclass(frozen=True)
class Speaker(Generic[S]):
    """
    A speaker within the DBAP space calculation.
    
    Attributes:
        distance: The speaker's distance from the virtual source. Must be
            strictly positive for the gain formulas to be defined.
        weight: The weight applied to the speaker, relative to all other
            speakers (typically non-negative).
    """
    distance: S
    weight: S


SpeakerList = Sequence[Speaker]


def scalar_type_of(value: Any) -> type:
    """
    Return the scalar type to use for constants combined with ``value``.
    
    Plain Python integers (and bools) are promoted to ``float`` so that
    constants such as ``0.5`` are not truncated; every other type is used
    as-is.
    """
    if isinstance(value, numbers.Integral) and not isinstance(value, np.integer):
        return float
    if isinstance(value, np.integer):
        return np.float64
    return type(value)


def scalar_from(like: Any, value: float) -> Any:
    """
    Construct ``value`` as a scalar of the same type as ``like``.
    
    Examples:
        >>> scalar_from(np.float32(1.5), 20.0)
        np.float32(20.0)
        >>> scalar_from(3, 0.5)
        0.5
    """
    return scalar_type_of(like)(value)
