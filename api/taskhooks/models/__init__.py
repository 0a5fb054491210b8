from taskhooks.models.project import Project
from taskhooks.models.task import Task
from taskhooks.models.hook import Hook

__all__ = ["Project", "Task", "Hook"]
