# unifyerr/core/__init__.py
"""
Core components for unifyerr.

This package defines the components responsible for:
- Classifying caller values (capability tags and resolver)
- Capturing construction-site metadata (backtrace, location)
- Building the unified error through an error sink

No side effects on import.
"""
