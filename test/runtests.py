#!/usr/bin/env python

"""
Run the entire test suite.
"""
import os
import sys
import unittest

# Add the target package to PYTHONPATH.
# This needs to be done before importing the unit test modules
# since they in turn import modules from the target package.
_TEST_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.dirname(_TEST_DIR))

suite = unittest.TestLoader().discover(_TEST_DIR)
result = unittest.TextTestRunner(verbosity=2).run(suite)
sys.exit(not result.wasSuccessful())
