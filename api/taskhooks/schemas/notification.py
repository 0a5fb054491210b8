"""Pydantic schemas for building notifications over HTTP."""

from pydantic import BaseModel, Field

from taskhooks.models import Hook, Project, Task


class BuildRequest(BaseModel):
    event: str = Field(..., description="Task event, e.g. deployment_succeeded or deployment_failed")
    project: Project
    task: Task
    hooks: list[Hook] = Field(default_factory=list, description="Hooks of the project to build messages for")
