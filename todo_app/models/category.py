from sqlalchemy import Column, Integer, String
from todo_app.database import Base

class Category(Base):
    __tablename__ = "category"

    id = Column(Integer, primary_key=True)
    category_name = Column(String(50), unique=True, nullable=False)
    display_name = Column(String(100), nullable=False)
