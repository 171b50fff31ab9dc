"""
Localized web checks package.

Keeps `webchecks` importable to support:
  - IDE navigation
  - programmatic runners (e.g., `run_tests.py`)
  - CI/CD module imports
"""
