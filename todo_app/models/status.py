from sqlalchemy import Column, Integer, String
from todo_app.database import Base

READY_TO_PICK = "ready_to_pick"
IN_PROGRESS = "in_progress"
BLOCKED = "blocked"
COMPLETED = "completed"
DELETED = "deleted"

STATUS_NAMES = (READY_TO_PICK, IN_PROGRESS, BLOCKED, COMPLETED, DELETED)
STARTABLE = (READY_TO_PICK, BLOCKED)

class Status(Base):
    __tablename__ = "status"

    id = Column(Integer, primary_key=True)
    status_name = Column(String(50), unique=True, nullable=False)
    display_name = Column(String(100), nullable=False)
