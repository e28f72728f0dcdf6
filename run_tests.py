#!/usr/bin/env python3
"""
Test runner script for the confreg package.
Provides convenient ways to run different test suites.
"""

import sys
import subprocess
import argparse


def run_command(cmd, description):
    """Run a command and handle the output."""
    print(f"\n🔄 {description}")
    print(f"Running: {' '.join(cmd)}")
    print("-" * 50)

    try:
        subprocess.run(cmd, check=True, capture_output=False)
        print(f"✅ {description} completed successfully")
        return True
    except subprocess.CalledProcessError as e:
        print(f"❌ {description} failed with exit code {e.returncode}")
        return False


def main():
    parser = argparse.ArgumentParser(description="Test runner for confreg")
    parser.add_argument(
        "suite",
        nargs="?",
        default="all",
        choices=["all", "unit", "registry", "config", "coverage"],
        help="Test suite to run"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--failfast", "-x", action="store_true", help="Stop on first failure")
    parser.add_argument("--pattern", "-k", help="Run tests matching pattern")

    args = parser.parse_args()

    base_cmd = [sys.executable, "-m", "pytest"]

    if args.verbose:
        base_cmd.append("-v")
    if args.failfast:
        base_cmd.append("-x")
    if args.pattern:
        base_cmd.extend(["-k", args.pattern])

    test_suites = {
        "all": {
            "cmd": base_cmd + ["test/"],
            "desc": "Running all tests"
        },
        "unit": {
            "cmd": base_cmd + ["test/", "-m", "unit"],
            "desc": "Running unit tests"
        },
        "registry": {
            "cmd": base_cmd + ["test/test_registry/"],
            "desc": "Running registry tests"
        },
        "config": {
            "cmd": base_cmd + ["test/test_config/"],
            "desc": "Running settings and logging tests"
        },
        "coverage": {
            "cmd": base_cmd + ["test/", "--cov=confreg", "--cov-report=term-missing"],
            "desc": "Running tests with coverage"
        }
    }

    suite_config = test_suites[args.suite]
    success = run_command(suite_config["cmd"], suite_config["desc"])

    if not success:
        sys.exit(1)

    print(f"\n🎉 Test suite '{args.suite}' completed successfully!")


if __name__ == "__main__":
    main()
