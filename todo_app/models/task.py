from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from todo_app.database import Base
from todo_app.models.clock import utcnow

class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    task_name = Column(String(255), nullable=False)
    status_id = Column(Integer, ForeignKey("status.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("category.id"), nullable=False)
    created_date = Column(DateTime, nullable=False, default=utcnow)
    updated_date = Column(DateTime, nullable=False, default=utcnow)
