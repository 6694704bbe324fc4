"""Denseset setuptools configuration."""


# Imports.
from pathlib import Path

from setuptools import setup


# Paths.
BASE_DIR = Path(__file__).parent


# Setup.
setup(
    name='denseset',
    version='0.0.1',
    description='Immutable sets with dense element indices and bit vectors.',
    long_description=(BASE_DIR / 'README.md').read_text(encoding='utf-8'),
    long_description_content_type='text/markdown',
    packages=[
        'denseset',
    ],
    python_requires='>=3.9',
    install_requires=[
        'coloredlogs',
        'numpy',
        'PyYAML',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
