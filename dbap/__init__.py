"""
Distance-Based Amplitude Panning (DBAP) Package
"""
