"""
Example Usage and Demonstrations

This module contains example functions demonstrating the usage of DBAP panning.
"""

import logging
import math
import numpy as np
from scipy.spatial.distance import cdist
from typing import Dict, List, Tuple

from .utils import Speaker
from .math_utils import blurred_distance_2
from .gains import SpeakerGains
from .config import PanningConfig, FREE_FIELD_ROLLOFF_DB, REVERBERANT_ROLLOFF_RANGE_DB
from .vector_ops import speaker_gains_array

logger = logging.getLogger(__name__)

# Corners of a 10 x 10 square, counter-clockwise from the origin
SQUARE_LAYOUT = np.array([
    [0.0, 0.0],
    [10.0, 0.0],
    [10.0, 10.0],
    [0.0, 10.0],
])


def create_square_layout(source: Tuple[float, float] = (5.0, 5.0),
                         weights: Tuple[float, ...] = (1.0, 1.0, 1.0, 1.0)) -> List[Speaker]:
    """
    Create speakers at the corners of a square, with distances to ``source``.

    Returns:
        One Speaker per corner, in SQUARE_LAYOUT order
    """
    distances = cdist(np.asarray([source], dtype=np.float64), SQUARE_LAYOUT)[0]
    return [Speaker(distance=float(d), weight=float(w)) for d, w in zip(distances, weights)]


def demonstrate_symmetric_panning() -> List[float]:
    """
    Pan a source placed at the center of a square of four speakers.

    All four speakers are equally far from the source, so all four gains
    are equal.
    """
    print("Panning a source at the center of a square layout...")

    speakers = create_square_layout()
    gains = SpeakerGains(speakers, FREE_FIELD_ROLLOFF_DB)
    print(f"  a = {gains.a_coefficient:.6f}, k = {gains.k_coefficient:.6f}")

    result = list(gains)
    for i, gain in enumerate(result):
        print(f"  speaker {i}: distance {speakers[i].distance:.3f}, gain {gain:.6f}")

    return result


def demonstrate_moving_source(steps: int = 5, blur: float = 1.0,
                              config: PanningConfig = None) -> List[List[float]]:
    """
    Move a source along the bottom edge of the square and print the gains.

    Distances are derived with a blur so the source can sit exactly on a
    speaker without a zero distance.
    """
    config = config or PanningConfig(blur=blur)
    print(f"Moving a source along the bottom edge with blur {config.blur}...")

    frames = []
    for step in range(steps):
        x = 10.0 * step / max(steps - 1, 1)
        source = (x, 0.0)
        speakers = [
            Speaker(distance=math.sqrt(blurred_distance_2(source, tuple(position), config.blur)), weight=1.0)
            for position in SQUARE_LAYOUT
        ]
        frame = [float(g) for g in SpeakerGains.from_config(speakers, config)]
        frames.append(frame)
        print(f"  x = {x:5.2f}: " + "  ".join(f"{g:.4f}" for g in frame))

    return frames


def demonstrate_rolloff_comparison(source: Tuple[float, float] = (2.0, 3.0)) -> Dict[float, np.ndarray]:
    """
    Compare free-field and reverberant rolloff for the same source position.
    """
    print(f"Comparing rolloff values for a source at {source}...")

    speakers = create_square_layout(source)
    distances = [s.distance for s in speakers]
    weights = [s.weight for s in speakers]

    results = {}
    for rolloff in (FREE_FIELD_ROLLOFF_DB,) + REVERBERANT_ROLLOFF_RANGE_DB:
        producer = SpeakerGains(speakers, rolloff)
        gains = speaker_gains_array(distances, weights, rolloff)
        logger.debug(f"Gains at {rolloff} dB: {gains}")
        print(f"  {rolloff:.1f} dB (a = {producer.a_coefficient:.4f}, k = {producer.k_coefficient:.4f}): "
              + "  ".join(f"{g:.4f}" for g in gains))
        results[rolloff] = gains

    return results


def main():
    """Main function to demonstrate DBAP panning."""
    print("DBAP Panning Demonstration")
    print("==========================")

    demonstrate_symmetric_panning()
    demonstrate_moving_source()
    demonstrate_rolloff_comparison()

    print("Demonstration complete!")
