"""
Utility functions for ahUtils.

This package contains:
- base_utils: Type inspection and deep equality
- math_utils: Exact decimal arithmetic (add, divide, sum, round, compare, ...)
- array_utils: Array helpers and array/tree conversion
- object_utils: Deep clone/merge and dotted-path access
- string_utils: Casing, random identifiers and HTML escaping
"""
