"""
Codec option models.

Options tune the whole-buffer conveniences layered on top of the codec
protocol. They never change the bytes an encoder produces.
"""

from __future__ import annotations
from typing import Any, Dict
from pydantic import BaseModel, Field


class CodecOptions(BaseModel):
    """
    Options for whole-buffer decoding.

    Used by ``Slicable.decode`` and ``decode_list``.
    """
    allow_trailing: bool = Field(
        default=False,
        alias="allowTrailing",
        description="Accept bytes left over after the decoded value"
    )
    max_list_items: int = Field(
        default=1_000_000,
        ge=0,
        alias="maxListItems",
        description="Largest item count a decoded list may declare"
    )

    model_config = {"populate_by_name": True, "frozen": True}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary."""
        return self.model_dump(by_alias=True)


DEFAULT_OPTIONS = CodecOptions()
