#!/usr/bin/env python
import re
import ast

from setuptools import setup, find_packages


requires = [
    'prompt-toolkit>=3.0,<4.0',
    'configobj>=5.0.6',
]

test_requires = [
    'pytest>=6.0',
    'mock>=4.0',
]


with open('flxmatch/__init__.py', 'r') as f:
    version = str(
        ast.literal_eval(
            re.search(
                r'__version__\s+=\s+(.*)',
                f.read()).group(1)))


setup(
    name='flxmatch',
    version=version,
    description='Fuzzy matching and ranking for completion menus',
    long_description=open('README.rst').read(),
    packages=find_packages(exclude=['tests*']),
    include_package_data=True,
    package_data={'flxmatch': ['flxmatchrc']},
    install_requires=requires,
    extras_require={
        'test': test_requires,
    },
    python_requires='>=3.7',
    entry_points={
        'console_scripts': [
            'flx-rank = flxmatch:main',
        ]
    },
    license="Apache License 2.0",
    classifiers=(
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ),
)
