#!/usr/bin/env python3
"""
Setup script for KeyCalc
"""

import os
import sys

from setuptools import setup, find_packages

# Read the version without importing the package (PyQt5 may not be installed yet)
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
from keycalc.__version__ import __version__


def read_file(filename):
    with open(os.path.join(os.path.dirname(__file__), filename), encoding='utf-8') as f:
        return f.read()


setup(
    name='keycalc',
    version=__version__,
    description='KeyCalc - keypad calculator with keyboard support and a single pending operation',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.9',
    install_requires=[
        'PyQt5',         # Keypad window
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov',
            'pytest-timeout',
        ],
    },
    entry_points={
        'console_scripts': [
            'keycalc=keycalc.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'Topic :: Utilities',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Environment :: X11 Applications :: Qt',
    ],
)
