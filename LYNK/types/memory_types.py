from enum import Enum
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MemoryType(str, Enum):
    """Kinds of canonical values the memory store keeps"""

    TAG = "TAG"
    CATEGORY = "CATEGORY"


class MemoryEntry(BaseModel):
    """Canonical tag/category record"""

    id: Optional[str] = None
    type: MemoryType
    value: str
    aliases: List[str] = Field(default_factory=list)
    usage_count: int = 0
    created_at: datetime = Field(default_factory=utc_now)
    last_used_at: datetime = Field(default_factory=utc_now)

    def add_alias(self, alias: str) -> None:
        if alias not in self.aliases:
            self.aliases.append(alias)

    def to_document(self) -> Dict[str, Any]:
        doc = self.model_dump(exclude={"id"})
        doc["type"] = self.type.value
        return doc

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "MemoryEntry":
        data = dict(doc)
        _id = data.pop("_id", None)
        if _id is not None:
            data["id"] = str(_id)
        return cls(**data)
