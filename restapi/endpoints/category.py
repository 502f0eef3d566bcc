"""Category endpoints for the API."""

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.category import schemas
from components.category.repository import CategoryRepository
from components.core.init_db import get_db
from components.core.schemas import FlowType
from components.user.models import User
from restapi.endpoints.auth import get_current_user

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[schemas.Category])
async def read_categories(
    kind: Optional[FlowType] = Query(None, description="Only income or only expense categories"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get all categories."""
    return await CategoryRepository(db).get_all(kind)


@router.post("/", response_model=schemas.Category)
async def create_category(
    category: schemas.CategoryCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Create a new category."""
    repo = CategoryRepository(db)
    if await repo.get_by_name(category.name):
        raise HTTPException(status_code=400, detail="Category with this name already exists")
    return await repo.create(category)


@router.put("/{category_id}", response_model=schemas.Category)
async def update_category(
    category_id: int,
    category: schemas.CategoryCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update a category. The kind is fixed once plans use the category."""
    repo = CategoryRepository(db)
    existing = await repo.get_by_name(category.name)
    if existing and existing.id != category_id:
        raise HTTPException(status_code=400, detail="Category name is already taken")

    current = await repo.get_by_id(category_id)
    if not current:
        raise HTTPException(status_code=404, detail="Category not found")
    if current.kind != category.kind and await repo.is_referenced(category_id):
        raise HTTPException(status_code=400, detail="Category kind cannot change while plans use it")

    return await repo.update(category_id, category)


@router.delete("/{category_id}")
async def delete_category(
    category_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Delete a category that no plan uses."""
    repo = CategoryRepository(db)
    if await repo.is_referenced(category_id):
        raise HTTPException(status_code=400, detail="Category is used by plans")
    if not await repo.delete(category_id):
        raise HTTPException(status_code=404, detail="Category not found")
    return {"message": "Category deleted successfully"}
