"""A finished deployment run, as handed over by the host system."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

SHORT_COMMIT_LENGTH = 7


class Task(BaseModel):
    id: int
    project_id: int
    project_name: str
    branch: str
    commit: str = ""
    short_commit: str = ""
    commit_url: Optional[str] = None
    committer: str = ""
    deployer_name: str = ""
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    reason: Optional[str] = Field(None, description="Free-text reason given when the run was started")
    source: str = ""

    # Other attributes of the host's task record are kept but never
    # selected into outgoing payloads unless explicitly allow-listed.
    model_config = {"frozen": True, "extra": "allow"}

    @model_validator(mode="before")
    @classmethod
    def _derive_short_commit(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("short_commit") and data.get("commit"):
            data = {**data, "short_commit": str(data["commit"])[:SHORT_COMMIT_LENGTH]}
        return data

    def attributes(self) -> dict[str, Any]:
        """Flat JSON-ready mapping of every attribute, extras included."""
        return self.model_dump(mode="json")
