"""
Core Mathematical Functions for Distance-Based Amplitude Panning

This module provides the coefficient and amplitude formulas of DBAP as
published by Trond Lossius (2009). Every function is generic over its
scalar type: constants are constructed from the type of the inputs, so
``numpy.float32`` inputs stay single precision, ``float`` inputs stay
double precision and custom numeric types are used unchanged.

See Also:
    - gains: For the per-speaker gain sequence built on these formulas
    - vector_ops: For array versions of the same formulas
"""

from typing import Any, Sequence

from .utils import Point2, Speaker, scalar_from
from .exceptions import MathError, ValidationError


def a_coefficient(rolloff_db):
    """
    Compute the ``a`` coefficient from the rolloff ``r`` in decibels per
    doubling of distance.
    
    A rolloff of 6 dB equals the inverse distance law for sound propagating
    in a free field. For closed or semi-closed environments ``r`` will
    generally be lower, in the range 3-5 dB, and depend on reflections and
    reverberation.
    
    Args:
        rolloff_db: Rolloff in dB per doubling of distance
        
    Returns:
        a = 10 ^ (-rolloff_db / 20), of the same scalar type as the input
    
    Examples:
        >>> a_coefficient(6.0)
        0.5011872336272722
    """
    ten = scalar_from(rolloff_db, 10.0)
    twenty = scalar_from(rolloff_db, 20.0)
    return ten ** (-rolloff_db / twenty)


def k_coefficient(a, speakers: Sequence[Speaker]):
    """
    Compute ``k``, the coefficient depending on the position of the source
    and all speakers.
    
    ``k`` normalizes the gains across the whole speaker set so that the
    total perceived loudness does not depend on the source position.
    
    Args:
        a: Coefficient returned by :func:`a_coefficient`
        speakers: The full speaker set
        
    Returns:
        2a / sum(w_i^2 / d_i^2), or zero when that sum is zero
    
    Notes:
        A speaker with a distance of exactly zero contributes zero to the
        sum instead of dividing by zero. If every speaker has a weight or
        distance of zero, ``k`` is zero.
    """
    zero = scalar_from(a, 0.0)

    def contribution(speaker: Speaker):
        if speaker.distance == zero:
            return zero
        w2 = speaker.weight * speaker.weight
        d2 = speaker.distance * speaker.distance
        return w2 / d2

    total = sum((contribution(s) for s in speakers), zero)
    if total == zero:
        return zero
    return scalar_from(a, 2.0) * a / total


def check_distance(distance: Any) -> None:
    """
    Raise if ``distance`` cannot be divided by in the gain formulas.

    NaN is let through and propagates into the result.

    Raises:
        MathError.DomainError: If distance is zero or negative
    """
    # NaN; ordering comparisons on a Decimal NaN would signal
    if distance != distance:
        return
    if distance <= scalar_from(distance, 0.0):
        raise MathError.DomainError(
            f"Speaker distance must be strictly positive, got {distance}"
        )


def v_speaker_relative_amplitude(speaker: Speaker, k, a):
    """
    Compute the relative amplitude of a speaker.
    
    Args:
        speaker: The speaker, with a strictly positive distance
        k: Coefficient returned by :func:`k_coefficient`
        a: Coefficient returned by :func:`a_coefficient`
        
    Returns:
        k * weight / (2 * distance * a)
    
    Raises:
        MathError.DomainError: If the speaker's distance is zero or negative
    """
    check_distance(speaker.distance)
    return k * speaker.weight / ((speaker.distance + speaker.distance) * a)


def blurred_distance_2(source: Point2, speaker: Point2, blur):
    """
    The squared distance between a source and a speaker in 2D, plus a
    subtle ``blur`` amount.
    
    In 2D space, blur can be understood as a vertical displacement between
    source and speakers. The larger blur gets, the less the source will be
    able to gravitate towards one speaker only. A non-zero blur guarantees
    a result greater than zero, so the gain formulas never divide by zero.
    
    Args:
        source: (x, y) of the virtual source
        speaker: (x, y) of the speaker
        blur: Blur amount, in the same unit as the coordinates
        
    Returns:
        (speaker.x - source.x)^2 + (speaker.y - source.y)^2 + blur^2.
        This is a squared distance: take the square root before using it
        as ``Speaker.distance``.
    
    Raises:
        ValidationError: If either point is not two-dimensional
    """
    if len(source) != 2 or len(speaker) != 2:
        raise ValidationError("Source and speaker positions must be (x, y) pairs")
    x = speaker[0] - source[0]
    y = speaker[1] - source[1]
    return x * x + y * y + blur * blur
