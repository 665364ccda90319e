#!/usr/bin/env python3
"""
mutrack - Mutation features for genome browser tracks
"""

from setuptools import setup, find_packages

# Read version number
def get_version():
    with open("mutrack/__init__.py", "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"

# Read long description
def get_long_description():
    try:
        with open("README.md", "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return "mutrack - Mutation features for genome browser tracks"

setup(
    name="mutrackpy",
    version=get_version(),
    author="mutrack developers",
    author_email="",
    description="Mutation track features with annotation links and configurable coloring",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["mutrack", "mutrack.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    python_requires=">=3.8",
    install_requires=[
        "matplotlib>=3.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=21.0",
            "isort>=5.0",
            "mypy>=0.900",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    package_data={"mutrack.config": ["data/*.json"]},
)
