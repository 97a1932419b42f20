"""
Distance-Based Amplitude Panning (DBAP)

An implementation of Distance-Based Amplitude Panning as published by
Trond Lossius, 2009: per-speaker gain coefficients computed from each
speaker's distance to a virtual source, its weight, and a rolloff in dB.
"""

from .utils import Scalar, Speaker, DEFAULT_SCALAR
from .math_utils import a_coefficient, k_coefficient, v_speaker_relative_amplitude, blurred_distance_2
from .gains import SpeakerGains, speaker_gains
from .vector_ops import speaker_gains_array, blurred_distances_2
from .config import PanningConfig
from .exceptions import DBAPError, EmptyInputError, MathError
from .examples import create_square_layout, demonstrate_symmetric_panning, demonstrate_moving_source, demonstrate_rolloff_comparison, main

__version__ = '0.1.0'
