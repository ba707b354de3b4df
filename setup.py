#!/usr/bin/env python
from setuptools import setup, find_packages

with open('README.rst') as f:
    long_description = f.read()

setup(
    name='propcheck',
    version='0.1.0',
    description='Deterministic, purely functional property-based testing',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    packages=find_packages(exclude=('tests', 'docs', 'examples')),
    python_requires='>=3.7',
    install_requires=[
        'attrs',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
