"""
Speaker Gain Sequence Module

This module contains the SpeakerGains class, which yields the DBAP gain for
each speaker given the speakers' weights and distances from the source.
"""

import logging
from typing import Iterator, List, Optional

from .utils import SpeakerList
from .math_utils import a_coefficient, k_coefficient, v_speaker_relative_amplitude
from .config import PanningConfig, default_config
from .exceptions import EmptyInputError

logger = logging.getLogger(__name__)


class SpeakerGains:
    """
    An iterator yielding the gain for each given speaker, in input order.

    The ``a`` and ``k`` coefficients are computed once on construction.
    Each gain is then produced lazily as the relative amplitude of the
    speaker divided by its distance. The sequence is single pass: once
    drained it stays exhausted, and a new instance is needed to evaluate
    the same speakers again.

    The speakers are copied into a tuple on construction, so later changes
    to the caller's collection do not affect a sequence in progress.
    """

    def __init__(self, speakers: SpeakerList, rolloff_db):
        """
        Initialize the gain sequence.

        Args:
            speakers: Speaker distances from the virtual source and their weights
            rolloff_db: Rolloff in dB per doubling of distance

        Raises:
            EmptyInputError: If no speakers were given
        """
        self._speakers = tuple(speakers)
        if not self._speakers:
            raise EmptyInputError("At least one speaker is required to compute gains")

        self._a = a_coefficient(rolloff_db)
        self._k = k_coefficient(self._a, self._speakers)
        self._index = 0

        logger.debug(f"DBAP coefficients for {len(self._speakers)} speakers: a={self._a}, k={self._k}")
        if self._k == 0:
            logger.warning("All speakers have zero weight or zero distance; every gain will be zero")

    @classmethod
    def from_config(cls, speakers: SpeakerList,
                    config: Optional[PanningConfig] = None) -> 'SpeakerGains':
        """
        Create a gain sequence using the rolloff and precision of a configuration.

        Args:
            speakers: Speaker distances from the virtual source and their weights
            config: Panning configuration (defaults to default_config)
        """
        config = config or default_config
        return cls(speakers, config.scalar(config.rolloff_db))

    @property
    def speakers(self) -> tuple:
        """The speakers this sequence was built from."""
        return self._speakers

    @property
    def a_coefficient(self):
        return self._a

    @property
    def k_coefficient(self):
        return self._k

    def __iter__(self) -> Iterator:
        return self

    def __next__(self):
        if self._index >= len(self._speakers):
            raise StopIteration
        speaker = self._speakers[self._index]
        self._index += 1
        amplitude = v_speaker_relative_amplitude(speaker, self._k, self._a)
        return amplitude / speaker.distance

    def __len__(self) -> int:
        """Number of gains not yet produced."""
        return len(self._speakers) - self._index

    def __length_hint__(self) -> int:
        return len(self)


def speaker_gains(speakers: SpeakerList, rolloff_db) -> List:
    """
    Compute the gain of every speaker at once.

    Args:
        speakers: Speaker distances from the virtual source and their weights
        rolloff_db: Rolloff in dB per doubling of distance

    Returns:
        One gain per speaker, in the same order as ``speakers``
    """
    return list(SpeakerGains(speakers, rolloff_db))
