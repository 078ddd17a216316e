# coding: utf-8

import io
import os

from setuptools import find_packages, setup

NAME = 'apitest'
DESCRIPTION = 'Pluggable assertion verifiers and status code assertions for HTTP API tests.'
AUTHOR = 'The apitest Authors'

REQUIRES = [
    'coloredlogs>=15.0.0,<16.0.0',
]

TEST_REQUIRES = [
    'pytest>=7.0.0',
    'pytest_httpserver>=1.0.12',
    'httpx>=0.27.0',
]

DEV_REQUIRES = [
    'flake8>=6.0.0',
    'tox>=4.0.0',
    'isort>=5.0.0',
] + TEST_REQUIRES + REQUIRES

here = os.path.abspath(os.path.dirname(__file__))

try:
    with io.open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
        long_description = '\n' + f.read()
except IOError:
    long_description = DESCRIPTION

about = {}
with io.open(os.path.join(here, 'apitest/__version__.py')) as f:
    exec(f.read(), about)

setup(
    name=NAME,
    version=about['__version__'],
    description=DESCRIPTION,
    long_description=long_description,
    long_description_content_type='text/markdown',
    author=AUTHOR,
    classifiers=[
        # Trove classifiers
        # Full list: https://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Testing',
    ],
    keywords='http api testing assertions',
    packages=find_packages(exclude=['docs', 'tests']),
    install_requires=REQUIRES,
    tests_require=TEST_REQUIRES,
    python_requires='>=3.8',
    extras_require={
        'test': TEST_REQUIRES,
        'dev': DEV_REQUIRES,
    },
    package_data={
        # for PEP484 & PEP561
        NAME: ['py.typed', '*.pyi'],
    },
)
