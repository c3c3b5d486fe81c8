"""
Setup file.
"""

import os

from setuptools import find_packages, setup

KEYWORDS = "fsharp fsc compiler msbuild toml project build arguments references"
HERE = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(HERE, "README.md"), encoding="utf-8") as f:
    LONG_DESCRIPTION = f.read()


if __name__ == "__main__":
    setup(
        name="fstoml",
        version="0.1.0",
        description="F# compiler arguments from TOML project descriptors",
        long_description=LONG_DESCRIPTION,
        long_description_content_type="text/markdown",
        keywords=KEYWORDS,
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        python_requires=">=3.11",
        install_requires=[
            "dnfile>=0.15",
            "pefile>=2023.2.7",
        ],
        extras_require={
            "test": ["pytest>=7.0"],
        },
        entry_points={
            "console_scripts": [
                "fstoml=fstoml.cli:main",
            ],
        },
    )
