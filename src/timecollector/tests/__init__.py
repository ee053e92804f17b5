"""Tests for timecollector"""
import unittest

from timecollector.tests import test_main, test_settings
from timecollector.tests.core import (
    test_collector,
    test_daytime,
    test_period,
    test_utils,
)


def test_suite():
    loader = unittest.defaultTestLoader
    return unittest.TestSuite([
        loader.loadTestsFromModule(test_utils),
        loader.loadTestsFromModule(test_period),
        loader.loadTestsFromModule(test_daytime),
        loader.loadTestsFromModule(test_collector),
        loader.loadTestsFromModule(test_settings),
        loader.loadTestsFromModule(test_main),
    ])


def main():
    unittest.main(module='timecollector.tests', defaultTest='test_suite')
