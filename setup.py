"""Setup script for hashmux."""

from setuptools import find_packages, setup

setup(
    name="hashmux",
    version="0.1.0",
    description="Pluggable multi-algorithm hashing: several digests in a single pass",
    python_requires=">=3.10",
    packages=find_packages(include=["hashmux", "hashmux.*"]),
    install_requires=[
        "blake3>=0.3",
        "click>=8.0",
        "dependency-injector>=4.41",
        "pydantic>=2.0",
        "pydantic-settings>=2.7",
        "tomli>=1.1; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hashmux=hashmux.__main__:main",
        ],
    },
)
