"""Core business logic layer.

Subpackages:
- shopping: compiling a plan's grocery list
- search: fuzzy matching for interactive recipe selection
"""
__all__ = ["shopping", "search"]
