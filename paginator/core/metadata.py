from typing import Any

from pydantic import BaseModel, Field


class Metadata(BaseModel):
    """
    Metadata for the package loaded from meta.yaml when settings are built
    """

    name: str
    version: str
    description: str = ""
    author: str = ""
    settings: dict[str, Any] = Field(default_factory=dict)
