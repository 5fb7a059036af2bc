from sqlalchemy import Column, Integer, String, DateTime
from todo_app.database import Base
from todo_app.models.clock import utcnow

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), unique=True, nullable=False)
    # stored as entered; credentials are compared verbatim
    password = Column(String(255), nullable=False)
    created_date = Column(DateTime, nullable=False, default=utcnow)
