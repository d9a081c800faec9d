import os
from setuptools import setup


src_version = os.path.join(os.path.dirname(__file__), "aocfetch", "version.py")
with open(src_version) as f:
    version = f.read().strip().split()[-1][1:-1]


setup(
    name="advent-of-code-fetch",
    version=version,
    description="Fetch puzzle briefs and inputs from adventofcode.com, and submit answers",
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    packages=["aocfetch"],
    entry_points={
        "console_scripts": [
            "aocfetch=aocfetch.cli:main",
        ],
    },
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
    python_requires=">=3.9",
    install_requires=[
        "urllib3",
        "html2text",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-freezer",
            "pytest-raisin",
            "pook",
        ],
    },
)
