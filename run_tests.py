#!/usr/bin/env python3
"""
Main test runner for the Compiler Simulator.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


SAMPLES = [
    ("javascript", "function add(a, b) { return a + b; }"),
    ("python", "def add(a, b):\n    return a + b\n"),
    ("c", "int main() { return 0; }"),
    ("cpp", "2 * (3 + 4)"),
    ("java", "int sum(a, b) { return a + b; }"),
]


def run_all_tests():
    """Run all Compiler Simulator tests."""

    print("🚀 Compiler Simulator Test Suite")
    print("=" * 60)

    # Test if basic imports work
    try:
        from compiler_simulator import run_pipeline, Stage, Language
        print("✅ All compiler_simulator modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import compiler_simulator modules: {e}")
        return False

    # Smoke-test every language through tokenization and parsing
    print("Testing one sample per language...")
    for language, code in SAMPLES:
        record = run_pipeline(code, language, stop_after=Stage.PARSING)
        if not record.success:
            print(f"  ❌ {language}: {[error.message for error in record.errors]}")
            return False
        print(f"  ✅ {language}: {len(record.tokens)} tokens, parsed")

    record = run_pipeline("2 * (3 + 4) / 0", Language.PYTHON)
    print(f"  ✅ full pipeline: stage {record.stage.value}, {len(record.warnings)} warning(s)")
    print()

    # Run the unit test modules
    print("Running unit tests...")
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=1).run(suite)

    print()
    if result.wasSuccessful():
        print(f"✅ All {result.testsRun} tests PASSED")
        return True

    print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return False


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
