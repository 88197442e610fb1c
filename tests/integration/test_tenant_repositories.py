"""Integration tests for tenant scoped SQLAlchemy repositories"""

import pytest
from datetime import date
from decimal import Decimal
from src.adapter.repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyInvoiceLineRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyUserSettingsRepository,
)
from src.adapter.repositories.base import like_pattern
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_draft import InvoiceDraft
from src.domain.line_item import LineItem
from src.domain.product import Product
from src.domain.user_settings import UserSettings


def _customer(tenant_id, name, company=None):
    return Customer(
        tenant_id=tenant_id,
        user_id=tenant_id,
        customer_name=name,
        company_name=company,
        work_phone="080 4000 1234",
        billing_address={"city": "Bengaluru", "country": "India"},
    )


def _product(tenant_id, name, sku):
    return Product(
        tenant_id=tenant_id,
        user_id=tenant_id,
        name=name,
        sku=sku,
        unit_price=Decimal("100"),
        tax_percent=Decimal("18"),
    )


async def _invoice(db_session, tenant_id, customer_id, number, items=()):
    draft = InvoiceDraft(
        customer_id=customer_id,
        invoice_number=number,
        invoice_date=date(2024, 6, 10),
        items=list(items),
    )
    invoice = draft.apply_to(Invoice(tenant_id=tenant_id, user_id=tenant_id))
    invoice = await SqlAlchemyInvoiceRepository(db_session).create(invoice)
    await SqlAlchemyInvoiceLineRepository(db_session).replace_for_invoice(invoice.id, draft.to_lines(invoice.id))
    await db_session.commit()
    return invoice


@pytest.mark.asyncio
class TestTenantIsolation:
    """Reads and deletes never cross tenants"""

    async def test_cross_tenant_delete_is_a_no_op(self, db_session):
        """
        Given: a customer owned by tenant A
        When: tenant B deletes it by id
        Then: nothing is deleted and the row is still readable by tenant A
        """
        # Arrange
        repo = SqlAlchemyCustomerRepository(db_session)
        customer = await repo.create(_customer("tenant-a", "Asha Traders"))
        await db_session.commit()

        # Act
        deleted = await repo.delete("tenant-b", customer.id)
        await db_session.commit()

        # Assert
        assert deleted is False
        assert await repo.get_by_id("tenant-a", customer.id) is not None

    async def test_get_by_id_of_other_tenant_is_none(self, db_session):
        repo = SqlAlchemyProductRepository(db_session)
        product = await repo.create(_product("tenant-a", "Pipe", "P-PRD-0001"))
        await db_session.commit()

        assert await repo.get_by_id("tenant-b", product.id) is None
        assert (await repo.get_by_id("tenant-a", product.id)).sku == "P-PRD-0001"

    async def test_list_is_scoped(self, db_session):
        repo = SqlAlchemyCustomerRepository(db_session)
        await repo.create(_customer("tenant-a", "A1"))
        await repo.create(_customer("tenant-a", "A2"))
        await repo.create(_customer("tenant-b", "B1"))
        await db_session.commit()

        names = {c.customer_name for c in await repo.list_by_tenant("tenant-a")}

        assert names == {"A1", "A2"}

    async def test_cross_tenant_invoice_delete_keeps_lines(self, db_session):
        customer = await SqlAlchemyCustomerRepository(db_session).create(_customer("tenant-a", "Asha"))
        invoice = await _invoice(
            db_session, "tenant-a", customer.id, "INV-1", [LineItem(name="Pipe", rate=Decimal("10"))]
        )
        invoice_repo = SqlAlchemyInvoiceRepository(db_session)
        line_repo = SqlAlchemyInvoiceLineRepository(db_session)

        assert await invoice_repo.delete("tenant-b", invoice.id) is False
        assert len(await line_repo.get_by_invoice_id(invoice.id)) == 1

        assert await invoice_repo.delete("tenant-a", invoice.id) is True
        await db_session.commit()
        assert await line_repo.get_by_invoice_id(invoice.id) == []


@pytest.mark.asyncio
class TestSearch:

    async def test_customer_search_is_case_insensitive_over_both_names(self, db_session):
        repo = SqlAlchemyCustomerRepository(db_session)
        await repo.create(_customer("tenant-a", "Asha Traders"))
        await repo.create(_customer("tenant-a", "Ravi", company="Ashoka Steel"))
        await repo.create(_customer("tenant-a", "Meena"))
        await repo.create(_customer("tenant-b", "Asha Exports"))
        await db_session.commit()

        found = await repo.search("tenant-a", "ASH")

        assert {c.customer_name for c in found} == {"Asha Traders", "Ravi"}

    async def test_search_limit(self, db_session):
        repo = SqlAlchemyProductRepository(db_session)
        for n in range(12):
            await repo.create(_product("tenant-a", f"Pipe {n}", f"P-PRD-{n:04d}"))
        await db_session.commit()

        assert len(await repo.search("tenant-a", "pipe", limit=10)) == 10

    async def test_wildcards_are_literal(self, db_session):
        repo = SqlAlchemyProductRepository(db_session)
        await repo.create(_product("tenant-a", "100% cotton", "C-PRD-0001"))
        await repo.create(_product("tenant-a", "Cotton blend", "C-PRD-0002"))
        await db_session.commit()

        found = await repo.search("tenant-a", "0%")

        assert [p.name for p in found] == ["100% cotton"]


@pytest.mark.asyncio
class TestInvoiceQueries:

    async def test_number_exists_is_per_tenant(self, db_session):
        customer = await SqlAlchemyCustomerRepository(db_session).create(_customer("tenant-a", "Asha"))
        invoice = await _invoice(db_session, "tenant-a", customer.id, "INV-123500-001")
        repo = SqlAlchemyInvoiceRepository(db_session)

        assert await repo.invoice_number_exists("tenant-a", "INV-123500-001") is True
        assert await repo.invoice_number_exists("tenant-b", "INV-123500-001") is False
        assert await repo.invoice_number_exists(
            "tenant-a", "INV-123500-001", exclude_invoice_id=invoice.id
        ) is False

    async def test_summaries_carry_customer_name(self, db_session):
        customer = await SqlAlchemyCustomerRepository(db_session).create(_customer("tenant-a", "Asha"))
        await _invoice(db_session, "tenant-a", customer.id, "INV-1")
        await _invoice(db_session, "tenant-a", "gone", "INV-2")

        rows = await SqlAlchemyInvoiceRepository(db_session).list_summaries("tenant-a")

        names = {invoice.invoice_number: name for invoice, name in rows}
        assert names == {"INV-1": "Asha", "INV-2": None}

    async def test_lines_come_back_in_position_order(self, db_session):
        customer = await SqlAlchemyCustomerRepository(db_session).create(_customer("tenant-a", "Asha"))
        items = [LineItem(name=name, rate=Decimal("1")) for name in ("first", "second", "third")]
        invoice = await _invoice(db_session, "tenant-a", customer.id, "INV-1", items)

        lines = await SqlAlchemyInvoiceLineRepository(db_session).get_by_invoice_id(invoice.id)

        assert [line.name for line in lines] == ["first", "second", "third"]

    async def test_sku_exists_is_global(self, db_session):
        repo = SqlAlchemyProductRepository(db_session)
        await repo.create(_product("tenant-a", "Pipe", "P-PRD-0001"))
        await db_session.commit()

        assert await repo.sku_exists("P-PRD-0001") is True
        assert await repo.sku_exists("P-PRD-0002") is False


@pytest.mark.asyncio
class TestUserSettingsRepository:

    async def test_one_row_per_tenant(self, db_session):
        repo = SqlAlchemyUserSettingsRepository(db_session)
        await repo.create(UserSettings(tenant_id="tenant-a", user_id="tenant-a", invoice_settings={"prefix": "AC"}))
        await db_session.commit()

        settings = await repo.get_by_tenant("tenant-a")

        assert settings.invoice_prefix == "AC"
        assert await repo.get_by_tenant("tenant-b") is None


class TestLikePattern:

    def test_wildcards_are_escaped(self):
        assert like_pattern("a_b%c") == "%a\\_b\\%c%"

    def test_backslash_is_escaped(self):
        assert like_pattern("a\\b") == "%a\\\\b%"
