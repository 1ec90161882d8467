#!/usr/bin/env python
#
# Installs the geom2d package. The test suite can be run
# without installing by running test/runtests.py.

from setuptools import setup

setup(name='geom2d',
      version='0.3',
      description='2D geometry primitives with pairwise distance, '
                  'intersection and tangency relations.',
      author='Claude Zervas',
      author_email='claude@utlco.com',
      package_dir={'': '.',},
      packages=['geom2d',],
      python_requires='>=3.7',
      install_requires=[],
      extras_require={'test': ['pytest',],},
      )
