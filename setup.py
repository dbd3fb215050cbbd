#!/usr/bin/env python3
"""
Setup script for Cifra
"""

from setuptools import setup, find_packages
import os
import re


# Read the version without importing the package
def read_version():
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'cifra', '__version__.py')
    with open(path, encoding='utf-8') as f:
        return re.search(r"__version__\s*=\s*['\"]([^'\"]+)['\"]", f.read()).group(1)


# Read README for long_description
def read_file(filename):
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), filename)
    if not os.path.exists(path):
        return ''
    with open(path, encoding='utf-8') as f:
        return f.read()


setup(
    name='cifra',
    version=read_version(),
    description='Cipher translator - keyboard symbols ↔ Latin letters, with a symbol keyboard window',
    long_description=read_file('README.md'),
    long_description_content_type='text/markdown',
    packages=find_packages(include=['cifra', 'cifra.*']),
    python_requires='>=3.8',
    install_requires=[
        'PyQt5',         # Symbol keyboard window (cifra --gui)
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov',
            'pytest-timeout',
        ],
        'test': [
            'pytest>=7.0',
            'pytest-cov',
            'pytest-timeout',
        ],
    },
    entry_points={
        'console_scripts': [
            'cifra=cifra.cli:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'Topic :: Utilities',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Environment :: X11 Applications :: Qt',
    ],
)
