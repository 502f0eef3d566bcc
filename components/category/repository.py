"""Repository for category operations."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.category import schemas
from components.category.models import Category
from components.core.schemas import FlowType
from components.plan.models import Plan


class CategoryRepository:
    """Repository for category operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_all(self, kind: Optional[FlowType] = None) -> List[schemas.Category]:
        """Get all categories ordered by name, optionally of one kind."""
        query = select(Category).order_by(Category.name)
        if kind:
            query = query.where(Category.kind == kind)
        result = await self.session.execute(query)
        return [schemas.Category.model_validate(row) for row in result.scalars().all()]

    async def get_by_id(self, category_id: int) -> Optional[Category]:
        result = await self.session.execute(
            select(Category).where(Category.id == category_id)
        )
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[Category]:
        result = await self.session.execute(
            select(Category).where(Category.name == name)
        )
        return result.scalar_one_or_none()

    async def create(self, category: schemas.CategoryCreate) -> Category:
        db_category = Category(**category.model_dump())
        self.session.add(db_category)
        await self.session.commit()
        await self.session.refresh(db_category)
        return db_category

    async def update(self, category_id: int, category: schemas.CategoryCreate) -> Optional[Category]:
        db_category = await self.get_by_id(category_id)
        if not db_category:
            return None

        for field, value in category.model_dump().items():
            setattr(db_category, field, value)
        await self.session.commit()
        await self.session.refresh(db_category)
        return db_category

    async def delete(self, category_id: int) -> bool:
        db_category = await self.get_by_id(category_id)
        if not db_category:
            return False

        await self.session.delete(db_category)
        await self.session.commit()
        return True

    async def is_referenced(self, category_id: int) -> bool:
        """Check if any plan still uses the category."""
        result = await self.session.execute(
            select(Plan.id).where(Plan.category_id == category_id).limit(1)
        )
        return result.scalar_one_or_none() is not None
