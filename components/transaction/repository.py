"""Repository for transaction operations."""

from datetime import date
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from components.core.schemas import FlowType
from components.finance.ekuivalen import compute_amount
from components.plan.models import Plan
from components.transaction import schemas
from components.transaction.models import Transaction


class TransactionRepository:
    """Repository for transaction operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    @staticmethod
    def _query():
        return select(Transaction).options(
            selectinload(Transaction.plan).selectinload(Plan.category)
        )

    async def get_all(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        type: Optional[FlowType] = None,
        plan_id: Optional[int] = None,
    ) -> List[schemas.Transaction]:
        """Get transactions in chronological order with optional filtering."""
        query = self._query().order_by(Transaction.transaction_date, Transaction.id)

        if start_date:
            query = query.where(Transaction.transaction_date >= start_date)
        if end_date:
            query = query.where(Transaction.transaction_date <= end_date)
        if type:
            query = query.where(Transaction.type == type)
        if plan_id is not None:
            query = query.where(Transaction.plan_id == plan_id)

        result = await self.session.execute(query)
        return [schemas.Transaction.model_validate(row) for row in result.scalars().all()]

    async def get_for_plans(self, plan_ids: Sequence[int]) -> List[schemas.Transaction]:
        """Get every transaction linked to one of the given plans."""
        if not plan_ids:
            return []
        result = await self.session.execute(
            self._query()
            .where(Transaction.plan_id.in_(plan_ids))
            .order_by(Transaction.transaction_date, Transaction.id)
        )
        return [schemas.Transaction.model_validate(row) for row in result.scalars().all()]

    async def get_recent(self, limit: int = 5) -> List[schemas.Transaction]:
        """Most recently recorded transactions first."""
        result = await self.session.execute(
            self._query()
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
            .limit(limit)
        )
        return [schemas.Transaction.model_validate(row) for row in result.scalars().all()]

    async def _get_model(self, transaction_id: int) -> Optional[Transaction]:
        result = await self.session.execute(
            self._query()
            .where(Transaction.id == transaction_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, transaction_id: int) -> Optional[schemas.Transaction]:
        db_transaction = await self._get_model(transaction_id)
        return schemas.Transaction.model_validate(db_transaction) if db_transaction else None

    async def plan_exists(self, plan_id: int) -> bool:
        result = await self.session.execute(select(Plan.id).where(Plan.id == plan_id))
        return result.scalar_one_or_none() is not None

    @staticmethod
    def _apply(db_transaction: Transaction, transaction: schemas.TransactionCreate) -> None:
        for field, value in transaction.model_dump().items():
            setattr(db_transaction, field, value)
        db_transaction.actual_amount = compute_amount(
            transaction.quantity_1, transaction.quantity_2, transaction.quantity_3, transaction.unit_price
        )

    async def create(self, transaction: schemas.TransactionCreate) -> schemas.Transaction:
        """Create a transaction; ``actual_amount`` is derived from the ekuivalen."""
        db_transaction = Transaction()
        self._apply(db_transaction, transaction)
        self.session.add(db_transaction)
        await self.session.commit()
        return await self.get_by_id(db_transaction.id)

    async def update(
        self, transaction_id: int, transaction: schemas.TransactionCreate
    ) -> Optional[schemas.Transaction]:
        db_transaction = await self._get_model(transaction_id)
        if not db_transaction:
            return None

        self._apply(db_transaction, transaction)
        await self.session.commit()
        return await self.get_by_id(transaction_id)

    async def delete(self, transaction_id: int) -> bool:
        db_transaction = await self._get_model(transaction_id)
        if not db_transaction:
            return False

        await self.session.delete(db_transaction)
        await self.session.commit()
        return True
