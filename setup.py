#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

LCSDIFF_PATH = HERE / "lcsdiff"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(LCSDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='lcsdiff',
      version=VERSION,
      description='Character level diffs of text using the longest common subsequence',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.8',
      packages=find_packages(include=['lcsdiff', 'lcsdiff.*']),
      package_data={'lcsdiff': ['diff_format.schema.json']},
      install_requires=[
          'colorama',
          'tabulate',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=6.0',
              'pytest-timeout',
          ],
      },
      entry_points={
          'console_scripts': [
              'lcsdiff = lcsdiff.__main__:main_dispatch',
              'lcsdiff-diff = lcsdiff.lcsdiffapp:main',
          ],
      },
    )
