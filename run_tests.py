#!/usr/bin/env python3
"""
Simple test runner for the mdsite project.
"""

import subprocess
import sys


def run_tests():
    """Run the test suite."""
    print("Running mdsite Test Suite")
    print("=" * 40)

    # Check if pytest is available
    try:
        import pytest  # noqa: F401
    except ImportError:
        print("❌ pytest not found. Please install it with: pip install -e '.[test]'")
        return False

    result = subprocess.run([sys.executable, "-m", "pytest", "tests/", "-v"])

    if result.returncode == 0:
        print("✅ All tests passed!")
        return True
    print("❌ Some tests failed!")
    return False


if __name__ == "__main__":
    success = run_tests()
    sys.exit(0 if success else 1)
