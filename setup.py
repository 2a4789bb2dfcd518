"""
fpbelt

A small functional utility belt: ordered-sequence utilities plus thin
wrappers for dates, URLs and deferred computations.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="fpbelt",
    version="0.1.0",
    author="fpbelt Contributors",
    description="Pure, composable utilities for ordered sequences",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Libraries",
    ],
    python_requires=">=3.11",
    install_requires=[
        "httpx>=0.24",
        "loguru>=0.7",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "fpbelt=fpbelt.cli.main:main",
        ],
    },
)
