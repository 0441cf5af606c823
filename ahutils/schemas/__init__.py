"""
Pydantic schemas for ahUtils.

**Organization by Domain**:
- tree.py: Options for array/tree conversion (ArrayToTreeOptions)
"""
from ahutils.schemas.tree import ArrayToTreeOptions

__all__ = [
    "ArrayToTreeOptions",
    ]
