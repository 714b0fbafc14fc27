from sqlalchemy import Column, Integer, String, Sequence, ForeignKey
from taskboard.db import Base

# Ids come from this sequence where the database has sequences;
# SQLite falls back to AUTOINCREMENT, which never reuses an id either.
TASKS_SEQ = Sequence("tasks_seq", start=1)

class Task(Base):
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    task_id = Column(Integer, TASKS_SEQ, primary_key=True)
    project_id = Column(Integer, ForeignKey("projects.project_id"))  # not checked by the handlers
    task_name = Column(String(255), nullable=False)
    status = Column(String(50), default="Pending") # Pending | In Progress | Completed
    assigned_to = Column(Integer, ForeignKey("users.id"))
