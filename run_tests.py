#!/usr/bin/env python3
"""
Test runner for the wrap panel layout engine.

Usage:
    python run_tests.py                            # Run all tests
    python run_tests.py tests.test_wrap_layout     # Run specific test modules
    python run_tests.py -v --failfast              # Verbose, stop at first failure
    python run_tests.py -p "test_uv*.py"           # Only discover matching files
"""

import sys, os, argparse, unittest

def main():
	"""Run the test suite."""
	project_root = os.path.dirname(os.path.abspath(__file__))
	sys.path.insert(0, project_root)

	parser = argparse.ArgumentParser(description='Run the wrap-panel unit tests')
	parser.add_argument('modules', nargs='*', help='Dotted test names to run instead of discovering')
	parser.add_argument('-v', '--verbose', action='store_true', help='Verbose test output')
	parser.add_argument('-p', '--pattern', default='test_*.py', help='Discovery file pattern')
	parser.add_argument('--failfast', action='store_true', help='Stop at the first failure')
	args = parser.parse_args()

	loader = unittest.TestLoader()
	if args.modules:
		suite = unittest.TestSuite()
		for module_name in args.modules:
			try:
				suite.addTest(loader.loadTestsFromName(module_name))
			except (ImportError, AttributeError) as e:
				print(f"Error loading test module '{module_name}': {e}")
				return 1
	else:
		suite = loader.discover(os.path.join(project_root, 'tests'), pattern=args.pattern,
								top_level_dir=project_root)

	runner = unittest.TextTestRunner(verbosity=2 if args.verbose else 1, failfast=args.failfast)
	result = runner.run(suite)
	return 0 if result.wasSuccessful() else 1

if __name__ == '__main__':
	sys.exit(main())
