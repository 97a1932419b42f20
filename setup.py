"""
Setup script for the DBAP package.
"""

from setuptools import setup, find_packages

setup(
    name="dbap",
    version="0.1.0",
    description="Distance-Based Amplitude Panning gain computation",
    packages=find_packages(include=["dbap", "dbap.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "scipy>=1.7.0",
        "numba>=0.55.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Sound/Audio",
    ],
    python_requires=">=3.8",
)
