from taskboard.models.user import User
from taskboard.models.project import Project
from taskboard.models.task import Task, TASKS_SEQ
