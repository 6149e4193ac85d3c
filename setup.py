#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name="tagwm",
    version="0.1.0",
    description="Tag placement and focus scheduling for tiling window managers",
    author="pinpox",
    license="ISC",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "Pypubsub>=4.0",
        "loguru>=0.6",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "tagwm=tagwm.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Desktop Environment :: Window Managers",
    ],
)
