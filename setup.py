#!/usr/bin/env python
import os

from setuptools import setup, find_packages

with open('requirements.txt') as requirements:
    requires = [line.strip() for line in requirements if line.strip() and not line.startswith('#')]

version = os.environ.get('VERSION')

if version is None:
    with open(os.path.join('.', 'VERSION')) as version_file:
        version = version_file.read().strip()


setup_options = {
    'name': 'icxkit',
    'version': version,
    'description': 'Transaction building, signing and JSON-RPC client for the ICON network',
    'author': 'ICON foundation',
    'packages': find_packages(exclude=['tests', 'tests.*']),
    'license': "Apache License 2.0",
    'install_requires': requires,
    'extras_require': {
        'tests': ['pytest>=4.6.3', 'pytest-mock>=1.10', 'freezegun>=0.3.12'],
    },
    'python_requires': '>=3.7',
    'tests_require': ['pytest'],
    'classifiers': [
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3 :: Only'
    ]
}

setup(**setup_options)
