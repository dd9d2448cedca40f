#!/usr/bin/env python3

from __future__ import annotations

import re
import sys

if sys.version_info < (3, 10):
    sys.exit('EmojiKit needs Python 3.10+')

from pathlib import Path

from setuptools import find_packages
from setuptools import setup

REPO_DIR = Path(__file__).resolve().parent
VERSION_RE = re.compile(r'''^__version__ = ['"]([^'"]+)['"]''', re.MULTILINE)


def get_version() -> str:
    init_file = REPO_DIR / 'emojikit' / '__init__.py'
    match = VERSION_RE.search(init_file.read_text(encoding='utf-8'))
    if match is None:
        sys.exit(f'Unable to find __version__ in {init_file}')
    return match.group(1)


setup(
    name='emojikit',
    version=get_version(),
    description='Categorized emoji datasets built from Unicode and CLDR '
                'sources',
    license='GPL-3.0-only',
    python_requires='>=3.10',
    packages=find_packages(include=['emojikit', 'emojikit.*']),
    package_data={
        'emojikit': ['data/*.json'],
    },
    install_requires=[
        'packaging',
        'requests',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'emojikit-source = emojikit.emojikit_source:main',
        ],
    },
)
