"""
Setup script for the xox-coordinator package.
"""

from setuptools import setup, find_packages

setup(
    name="xox-coordinator",
    version="1.0.0",
    description="XOX session coordinator - seats two players, arbitrates turns and broadcasts game state",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    # Ship the SQL schema next to the store modules
    package_data={
        "xox_coordinator._store": ["schema.sql"],
    },
    entry_points={
        "console_scripts": [
            "xox-coordinator=xox_coordinator.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
