"""
Pydantic schemas for tree conversion options.
"""
from typing import Any, Hashable

from pydantic import BaseModel, ConfigDict, Field


class ArrayToTreeOptions(BaseModel):
    """
    Field names used by array_to_tree() when linking records.

    Accepts both snake_case names and the camelCase aliases
    (parentId, rootParentId) so option dicts written for other
    ahUtils ports can be passed unchanged.

    Examples:
        >>> ArrayToTreeOptions()
        ArrayToTreeOptions(id='id', parent_id='parentId', children='children', root_parent_id=None)
        >>> ArrayToTreeOptions(parentId="pid", rootParentId=0).root_parent_id
        0
    """
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    id: Hashable = Field("id", description="Field holding the node identifier")
    parent_id: Hashable = Field("parentId", alias="parentId", description="Field holding the parent identifier")
    children: Hashable = Field("children", description="Field receiving the list of child nodes")
    root_parent_id: Any = Field(None, alias="rootParentId", description="Parent value marking a root node")
