"""Typed schema for SafeDict seed files."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class SeedSchema(BaseModel):
    """Initial entries for a SafeDict, as read from a YAML seed file.

    Attributes:
        description: Optional free-text description of the seed
        entries: Mapping of string keys to arbitrary values
    """

    description: Optional[str] = Field(default=None, description="Seed description")
    entries: Dict[StrictStr, Any] = Field(default_factory=dict, description="Initial key/value entries")

    model_config = ConfigDict(extra="forbid")
