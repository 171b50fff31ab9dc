"""Browser-driven checks: framework, page objects and tests."""
