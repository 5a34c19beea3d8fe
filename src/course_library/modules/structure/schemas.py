"""Pydantic schemas for the storage tree."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class StructureNode(BaseModel):
    """A directory or PDF inside the storage root.

    Directories carry ``children``; files carry ``size``.
    """

    name: str
    type: Literal["directory", "file"]
    path: str = Field(description="Path relative to the storage root, '/'-separated")
    children: Optional[List["StructureNode"]] = None
    size: Optional[int] = Field(default=None, ge=0)


class StructureResponse(BaseModel):
    success: bool = True
    structure: List[StructureNode]
