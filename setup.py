"""
Motion Lab - IMU visualization toolkit

Wireframe cube, bubble level, tilt game, G-force meter, scrolling graph and
raw readout driven by a 3-axis accelerometer/gyroscope.
"""

import os

from setuptools import setup, find_packages

long_description = ""
if os.path.exists("README.md"):
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()

setup(
    name="motionlab",
    version="0.5.0",
    description="Motion Lab - IMU visualization toolkit",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="BSD-3-Clause",

    packages=find_packages(exclude=["tests", "tests.*"]),

    install_requires=[
        "PyQt6>=6.4.0",
        "numpy>=1.21.0",
        "pyserial>=3.5",
    ],

    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
        ],
    },

    entry_points={
        "gui_scripts": [
            "motionlab=motionlab.__main__:main",
        ],
    },

    python_requires=">=3.8",

    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
)
