"""
Tests for the demonstration functions.
"""

import numpy as np
from dbap.panning.gains import speaker_gains
from dbap.panning.examples import (
    create_square_layout, demonstrate_symmetric_panning,
    demonstrate_moving_source, demonstrate_rolloff_comparison
)


class TestExamples:
    """Tests that the demonstrations run and return sensible data."""
    
    def test_square_layout(self):
        """Test distances from the center of the square."""
        speakers = create_square_layout()
        assert len(speakers) == 4
        np.testing.assert_allclose([s.distance for s in speakers], np.sqrt(50.0))
    
    def test_symmetric_panning(self, capsys):
        """Test that the symmetric demo reports four equal gains."""
        gains = demonstrate_symmetric_panning()
        np.testing.assert_allclose(gains, 0.25)
        assert "speaker 3" in capsys.readouterr().out
    
    def test_moving_source(self):
        """Test that the nearest speaker dominates at each end of the edge."""
        frames = demonstrate_moving_source(steps=3, blur=1.0)
        assert len(frames) == 3
        assert np.argmax(frames[0]) == 0
        assert np.argmax(frames[-1]) == 1
        np.testing.assert_allclose(frames[1][0], frames[1][1], rtol=1e-5)
    
    def test_rolloff_comparison(self):
        """Test that every rolloff gives one gain per speaker."""
        results = demonstrate_rolloff_comparison()
        assert set(results) == {6.0, 3.0, 5.0}
        for gains in results.values():
            assert gains.shape == (4,)
            assert np.argmax(gains) == 0
    
    def test_rolloff_comparison_matches_scalar_path(self):
        """Test that the compiled gains agree with the scalar gain sequence."""
        results = demonstrate_rolloff_comparison((2.0, 3.0))
        scalar = speaker_gains(create_square_layout((2.0, 3.0)), 6.0)
        np.testing.assert_allclose(results[6.0], scalar)
