#!/usr/bin/env python
# -*- coding: utf-8 -*-


"""Setup script for ArcParse."""

from os import path

from setuptools import setup

from arcparse import __author__, __version__


HERE = path.abspath(path.dirname(__file__))


# Default long description
LONG_DESCRIPTION = """

ArcParse
========

*Deterministic Dependency Parsing for Tagged Sentences*

""".strip()


# Get the long description from the relevant file. First try README.rst,
# then fall back on the default string defined here in this file.
if path.isfile(path.join(HERE, 'README.rst')):
    with open(path.join(HERE, 'README.rst'), encoding='utf-8') as description_file:
        LONG_DESCRIPTION = description_file.read()


# See https://setuptools.pypa.io/en/latest/references/keywords.html for a full list
# of parameters and their meanings.
setup(
    name='arcparse',
    version=__version__,
    author=__author__,
    author_email='arcparse@users.noreply.github.com',
    license='MIT',
    platforms=['any'],
    description='ArcParse: Eisner, Chu-Liu/Edmonds, and arc-standard dependency parsing',
    long_description=LONG_DESCRIPTION,

    # See https://pypi.org/classifiers/
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Artificial Intelligence',
        'Topic :: Text Processing :: Linguistic',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
    ],

    keywords='dependency parser eisner chu-liu-edmonds arc-standard natural language',
    packages=['arcparse'],
    python_requires='>=3.6',
    install_requires=['sortedcontainers', 'numpy'],
    extras_require={
        'viz': ['graphviz'],
        'tests': ['pytest', 'graphviz'],
    },
)
