"""
Vectorized Panning Operations Module

This module provides compiled array versions of the DBAP formulas for large
speaker arrays. The kernels follow exactly the same rules as the scalar
functions in math_utils; only the validated front-ends should be called
with untrusted input.
"""

import logging
import numpy as np
from typing import Tuple, Union
import numba

from .exceptions import EmptyInputError, MathError, ValidationError

logger = logging.getLogger(__name__)


@numba.njit
def fast_k_coefficient(a: float, distances: np.ndarray, weights: np.ndarray) -> float:
    """
    Compute the ``k`` coefficient over arrays of distances and weights.

    Args:
        a: Coefficient derived from the rolloff
        distances: Speaker distances, shape (n_speakers,)
        weights: Speaker weights, shape (n_speakers,)

    Returns:
        2a / sum(w^2 / d^2), where zero distances contribute nothing, or
        zero when the sum is zero
    """
    total = 0.0
    for i in range(distances.shape[0]):
        d = distances[i]
        if d == 0.0:
            continue
        w = weights[i]
        total += (w * w) / (d * d)
    if total == 0.0:
        return 0.0
    return 2.0 * a / total


@numba.njit
def fast_speaker_gains(distances: np.ndarray, weights: np.ndarray, rolloff_db: float) -> np.ndarray:
    """
    Compute the gain of every speaker.

    Args:
        distances: Strictly positive speaker distances, shape (n_speakers,)
        weights: Speaker weights, shape (n_speakers,)
        rolloff_db: Rolloff in dB per doubling of distance

    Returns:
        Gains of shape (n_speakers,), in input order
    """
    a = 10.0 ** (-rolloff_db / 20.0)
    k = fast_k_coefficient(a, distances, weights)
    gains = np.empty_like(distances)
    for i in range(distances.shape[0]):
        d = distances[i]
        gains[i] = k * weights[i] / ((d + d) * a) / d
    return gains


def speaker_gains_array(distances: Union[np.ndarray, list], weights: Union[np.ndarray, list],
                        rolloff_db: float = 6.0, dtype=np.float64) -> np.ndarray:
    """
    Validate speaker arrays and compute their gains.

    Args:
        distances: Speaker distances from the virtual source
        weights: Speaker weights, same length as ``distances``
        rolloff_db: Rolloff in dB per doubling of distance
        dtype: Floating dtype of the computation and the result

    Returns:
        Gains as an array of ``dtype``, shape (n_speakers,)

    Raises:
        ValidationError: If ``dtype`` is not floating, or the arrays are not
            1-D or differ in length
        EmptyInputError: If there are no speakers
        MathError.DomainError: If any distance is zero or negative

    Notes:
        NaN distances are not rejected; they make every gain NaN, as in
        the scalar path.
    """
    if not np.issubdtype(dtype, np.floating):
        raise ValidationError(f"dtype must be a floating type, got {np.dtype(dtype).name}")

    distances = np.ascontiguousarray(distances, dtype=dtype)
    weights = np.ascontiguousarray(weights, dtype=dtype)

    if distances.ndim != 1 or weights.ndim != 1:
        raise ValidationError("Distances and weights must be one-dimensional")
    if distances.shape != weights.shape:
        raise ValidationError(
            f"Got {distances.shape[0]} distances but {weights.shape[0]} weights"
        )
    if distances.size == 0:
        raise EmptyInputError("At least one speaker is required to compute gains")
    if np.any(distances <= 0.0):
        bad = distances[distances <= 0.0]
        raise MathError.DomainError(
            f"Speaker distances must be strictly positive, got {bad.tolist()}"
        )

    logger.debug(f"Computing DBAP gains for {distances.size} speakers at {rolloff_db} dB rolloff")
    rolloff = distances.dtype.type(rolloff_db)
    return fast_speaker_gains(distances, weights, rolloff).astype(distances.dtype, copy=False)


def blurred_distances_2(source: Tuple[float, float], speaker_positions: np.ndarray,
                        blur: float = 0.0) -> np.ndarray:
    """
    Squared blurred distances from one source to many speakers.

    Args:
        source: (x, y) of the virtual source
        speaker_positions: Speaker coordinates, shape (n_speakers, 2)
        blur: Blur amount

    Returns:
        Squared distances plus blur^2, shape (n_speakers,)
    """
    positions = np.asarray(speaker_positions, dtype=np.float64)
    if positions.ndim != 2 or positions.shape[1] != 2:
        raise ValidationError(f"Speaker positions must have shape (n, 2), got {positions.shape}")

    delta = positions - np.asarray(source, dtype=np.float64)
    return np.sum(delta * delta, axis=1) + blur * blur
