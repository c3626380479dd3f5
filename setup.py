"""Setup script for the project."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="water-stress-monitor",
    version="1.0.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Live water stress monitoring for water-stressed cities",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/water-stress-monitor",
    packages=find_packages(include=["water_stress", "water_stress.*", "config"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Hydrology",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0", "httpx>=0.24"],
    },
    entry_points={
        "console_scripts": [
            "water-stress=water_stress.presentation.cli.main:main",
        ],
    },
)
