#!/usr/bin/env python3
"""
Test runner for prepack-debug

Usage:
    python tests/run_tests.py              # Run all tests
    python tests/run_tests.py report       # Run report tests
    python tests/run_tests.py compiler     # Run invoker and bridge tests
    python tests/run_tests.py --quiet      # Minimal output
"""

import os
import sys
import unittest
import argparse

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, TESTS_DIR)
sys.path.insert(0, os.path.join(os.path.dirname(TESTS_DIR), 'src'))

# Test suite mappings
TEST_SUITES = {
    'errors': [
        'test_diagnostics'
    ],
    'compiler': [
        'test_invoker',
        'test_bridge'
    ],
    'report': [
        'test_evaluation_tree',
        'test_tracking',
        'test_report'
    ],
    'cli': [
        'test_cli'
    ],
    'all': []  # Will be populated with all test modules
}

TEST_SUITES['all'] = [module for suite in TEST_SUITES.values() for module in suite]


def run_tests(suite_name='all', verbose=2):
    """Run the specified test suite"""
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    for module_name in TEST_SUITES[suite_name]:
        suite.addTests(loader.loadTestsFromName(module_name))

    runner = unittest.TextTestRunner(verbosity=verbose)
    result = runner.run(suite)

    print("\n" + "="*70)
    print(f"Tests run: {result.testsRun}")
    print(f"Failures: {len(result.failures)}")
    print(f"Errors: {len(result.errors)}")

    if result.wasSuccessful():
        print("\n✅ All tests passed!")
    else:
        print("\n❌ Some tests failed!")

    return result.wasSuccessful()


def main():
    parser = argparse.ArgumentParser(description='Run prepack-debug tests')
    parser.add_argument('suite', nargs='?', default='all',
                        choices=list(TEST_SUITES.keys()),
                        help='Test suite to run (default: all)')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Minimal output')

    args = parser.parse_args()

    success = run_tests(args.suite, 0 if args.quiet else 2)
    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
