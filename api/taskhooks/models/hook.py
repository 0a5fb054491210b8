"""Notification subscription of a project."""

from pydantic import BaseModel, Field


class Hook(BaseModel):
    id: int
    project_id: int
    name: str
    type: str = Field(..., description="Hook type: mail, slack, dingtalk, webhook")
    config: dict = Field(default_factory=dict, description="Type-specific configuration (JSON)")
    enabled: bool = True
    on_task_success: bool = True
    on_task_failure: bool = True

    model_config = {"frozen": True}
