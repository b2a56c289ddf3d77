"""Atheris fuzz targets for scanner security testing.

This package contains Atheris-based fuzz targets for detecting crashes
and invariant violations in the hashtag scanner. Requires Atheris installation.

Targets:
    scanner.py - Scan invariants, cursor agreement and synthesis round trip

Run with: python fuzz/scanner.py -max_total_time=60
"""
