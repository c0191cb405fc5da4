from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class PersonCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None


class PersonUpdate(PersonCreate):
    pass
