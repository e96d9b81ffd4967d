"""
Setup configuration for the project.
Allows the package to be installed in development mode.
"""

from setuptools import setup, find_packages

setup(
    name="slot-validators",
    version="1.0.0",
    description="Single-character validators for formatted input slots",
    author="Slot Validators Contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "slot-validate=slot_validators.cli:main",
        ],
    },
    python_requires=">=3.8",
)
