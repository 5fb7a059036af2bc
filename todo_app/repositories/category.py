from typing import List

from todo_app.errors import NotFoundError
from todo_app.models.category import Category
from todo_app.repositories.base import BaseRepository
from todo_app.schemas.task import CategoryOut


class CategoryRepository(BaseRepository):

    def find_category_by_name(self, category_name: str) -> CategoryOut:
        with self._session() as db:
            category = (
                db.query(Category)
                .filter(Category.category_name == category_name)
                .first()
            )
            if not category:
                raise NotFoundError(f"Category not found: {category_name}")
            return CategoryOut.model_validate(category)

    def list_categories(self) -> List[CategoryOut]:
        with self._session() as db:
            rows = db.query(Category).order_by(Category.category_name).all()
            return [CategoryOut.model_validate(c) for c in rows]
