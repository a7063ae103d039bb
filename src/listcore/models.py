from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class SequenceOptions(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    allow_none: bool = True


DEFAULT_OPTIONS = SequenceOptions()
