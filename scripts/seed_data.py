"""Script to seed demo data into the database."""

from datetime import date
import asyncio
import logging

from components.app_setting.repository import AppSettingRepository
from components.budget_year.repository import BudgetYearRepository
from components.budget_year.schemas import BudgetYearCreate
from components.category.repository import CategoryRepository
from components.category.schemas import CategoryCreate
from components.core.init_db import db_manager
from components.core.logger import setup_logging
from components.core.schemas import FlowType
from components.plan.repository import PlanRepository
from components.plan.schemas import PlanCreate
from components.transaction.repository import TransactionRepository
from components.transaction.schemas import TransactionCreate

logger = logging.getLogger(__name__)


async def seed_data():
    """Seed one budget year with plans and transactions."""
    await db_manager.create_all()
    async with db_manager.get_db() as db:
        budget_year = await BudgetYearRepository(db).create(BudgetYearCreate(
            name="TA 2024/2025",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 12, 31),
            is_active=True,
        ))

        categories = CategoryRepository(db)
        dues = await categories.create(CategoryCreate(name="Iuran Anggota", kind=FlowType.INCOME))
        grants = await categories.create(CategoryCreate(name="Hibah", kind=FlowType.INCOME))
        supplies = await categories.create(CategoryCreate(name="Alat Tulis Kantor", kind=FlowType.EXPENSE))
        meetings = await categories.create(CategoryCreate(name="Rapat", kind=FlowType.EXPENSE))

        plans = PlanRepository(db)
        dues_plan = await plans.create(PlanCreate(
            budget_year_id=budget_year.id, category_id=dues.id, name="Iuran bulanan",
            start_date=date(2024, 1, 1), end_date=date(2024, 12, 31),
            quantity_1=40, unit_1="orang", quantity_2=12, unit_2="bulan", unit_price=25000,
        ))
        await plans.create(PlanCreate(
            budget_year_id=budget_year.id, category_id=grants.id, name="Hibah pemerintah daerah",
            start_date=date(2024, 3, 1), end_date=date(2024, 3, 31),
            quantity_1=1, unit_price=10000000,
        ))
        supplies_plan = await plans.create(PlanCreate(
            budget_year_id=budget_year.id, category_id=supplies.id, name="Pengadaan ATK",
            start_date=date(2024, 1, 1), end_date=date(2024, 6, 30),
            quantity_1=5, unit_price=100000,
        ))
        meeting_plan = await plans.create(PlanCreate(
            budget_year_id=budget_year.id, category_id=meetings.id, name="Rapat anggota tahunan",
            start_date=date(2024, 2, 1), end_date=date(2024, 2, 2),
            quantity_1=2, unit_1="hari", quantity_2=30, unit_2="orang", unit_price=50000,
        ))

        transactions = TransactionRepository(db)
        for month in range(1, 4):
            await transactions.create(TransactionCreate(
                plan_id=dues_plan.id, transaction_date=date(2024, month, 5),
                description=f"Iuran bulan {month}", type=FlowType.INCOME,
                quantity_1=38, unit_1="orang", unit_price=25000,
            ))
        await transactions.create(TransactionCreate(
            plan_id=supplies_plan.id, transaction_date=date(2024, 1, 10),
            description="Kertas dan tinta", type=FlowType.EXPENSE,
            quantity_1=2, unit_price=100000,
        ))
        await transactions.create(TransactionCreate(
            plan_id=meeting_plan.id, transaction_date=date(2024, 2, 1),
            description="Konsumsi rapat", type=FlowType.EXPENSE,
            quantity_1=2, unit_1="hari", quantity_2=28, unit_2="orang", unit_price=50000,
        ))
        await transactions.create(TransactionCreate(
            transaction_date=date(2024, 2, 14),
            description="Sumbangan tidak terikat", type=FlowType.INCOME,
            quantity_1=1, unit_price=750000,
        ))

        await AppSettingRepository(db).upsert({
            "nama_aplikasi": "SIKUANG",
            "nama_kota": "Yogyakarta",
            "nama_bendahara": "Bendahara Koperasi",
            "nama_pimpinan": "Ketua Koperasi",
        })
        await PlanRepository(db).refresh_realization(budget_year.id)
        logger.info("Seeded budget year %s", budget_year.name)


if __name__ == "__main__":
    setup_logging()
    asyncio.run(seed_data())
