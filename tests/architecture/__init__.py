"""Architecture validation tests.

These tests verify that the codebase keeps its layering and the
conventions that import-based rules cannot detect.
"""
