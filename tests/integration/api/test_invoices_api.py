"""API tests for invoices and settings"""

import pytest
from decimal import Decimal

SCENARIO_ITEM = {
    "name": "Steel pipe",
    "hsn_code": "7306",
    "quantity": 2,
    "rate": "100",
    "discount": "10",
    "cgst_percent": "2.5",
    "sgst_percent": "2.5",
    "amount": "999999",
}

SETTINGS = {
    "profile": {"name": "Asha", "email": "asha@acmesteel.in"},
    "business": {
        "business_name": "Acme Steel",
        "email": "accounts@acmesteel.in",
        "phone": "+91 80 4000 1234",
        "gst": "29ABCDE1234F1Z5",
        "address": "12 MG Road, Bengaluru",
    },
    "invoice_settings": {"prefix": "ACME", "next_number": 1},
}


async def _create_customer(client, headers, name="Asha Traders"):
    response = await client.post(
        "/customers",
        json={"customer_name": name, "work_phone": "080 4000 1234"},
        headers=headers,
    )
    return response.json()["id"]


def _money(value):
    return Decimal(str(value))


@pytest.mark.asyncio
class TestInvoicesApi:
    """End-to-end invoice flows"""

    async def test_create_invoice_computes_totals(self, client, tenant_a_headers):
        """
        Given: one item 2 x 100, discount 10, CGST 2.5%, SGST 2.5%
        When: the invoice is created with nothing paid
        Then: amount 200, total 200, balance 200, status CREDIT
        """
        # Arrange
        customer_id = await _create_customer(client, tenant_a_headers)

        # Act
        response = await client.post(
            "/invoices",
            json={"customer_id": customer_id, "items": [SCENARIO_ITEM], "total": "1"},
            headers=tenant_a_headers,
        )

        # Assert
        assert response.status_code == 201
        invoice = response.json()
        assert invoice["invoice_number"].startswith("INV-")
        assert _money(invoice["items"][0]["amount"]) == Decimal("200")
        totals = invoice["totals"]
        assert _money(totals["subtotal"]) == Decimal("200")
        assert _money(totals["cgst_total"]) == Decimal("5")
        assert _money(totals["sgst_total"]) == Decimal("5")
        assert _money(totals["discount_total"]) == Decimal("10")
        assert _money(totals["total"]) == Decimal("200")
        assert _money(totals["balance_amount"]) == Decimal("200")
        assert invoice["status"] == "CREDIT"
        assert invoice["terms_and_conditions"] == "Default terms and conditions"

    async def test_update_invoice_to_paid(self, client, tenant_a_headers):
        customer_id = await _create_customer(client, tenant_a_headers)
        created = (
            await client.post(
                "/invoices",
                json={"customer_id": customer_id, "items": [SCENARIO_ITEM]},
                headers=tenant_a_headers,
            )
        ).json()

        updated = await client.put(
            f"/invoices/{created['id']}",
            json={"customer_id": customer_id, "items": [SCENARIO_ITEM], "paid_amount": "200"},
            headers=tenant_a_headers,
        )
        fetched = await client.get(f"/invoices/{created['id']}", headers=tenant_a_headers)

        assert updated.status_code == 200
        assert updated.json()["invoice_number"] == created["invoice_number"]
        assert fetched.json()["status"] == "PAID"
        assert _money(fetched.json()["totals"]["balance_amount"]) == Decimal("0")
        assert len(fetched.json()["items"]) == 1

    async def test_empty_invoice_total_is_adjustment(self, client, tenant_a_headers):
        customer_id = await _create_customer(client, tenant_a_headers)

        response = await client.post(
            "/invoices",
            json={"customer_id": customer_id, "adjustment": "50", "paid_amount": "20"},
            headers=tenant_a_headers,
        )

        totals = response.json()["totals"]
        assert _money(totals["subtotal"]) == Decimal("0")
        assert _money(totals["total"]) == Decimal("50")
        assert _money(totals["balance_amount"]) == Decimal("30")

    async def test_duplicate_invoice_number_is_409(self, client, tenant_a_headers, tenant_b_headers):
        customer_a = await _create_customer(client, tenant_a_headers)
        customer_b = await _create_customer(client, tenant_b_headers)
        body = {"customer_id": customer_a, "invoice_number": "INV-2024-001"}

        first = await client.post("/invoices", json=body, headers=tenant_a_headers)
        second = await client.post("/invoices", json=body, headers=tenant_a_headers)
        other_tenant = await client.post(
            "/invoices",
            json={"customer_id": customer_b, "invoice_number": "INV-2024-001"},
            headers=tenant_b_headers,
        )

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["error"]["code"] == "INVOICE_NUMBER_TAKEN"
        assert other_tenant.status_code == 201

    async def test_invoice_for_other_tenants_customer_is_404(self, client, tenant_a_headers, tenant_b_headers):
        customer_a = await _create_customer(client, tenant_a_headers)

        response = await client.post("/invoices", json={"customer_id": customer_a}, headers=tenant_b_headers)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CUSTOMER_NOT_FOUND"

    async def test_item_edits(self, client, tenant_a_headers):
        # Arrange
        customer_id = await _create_customer(client, tenant_a_headers)
        product = (
            await client.post(
                "/products",
                json={"name": "Blue steel pipe", "unit_price": "100", "tax_percent": "18"},
                headers=tenant_a_headers,
            )
        ).json()
        invoice = (
            await client.post("/invoices", json={"customer_id": customer_id}, headers=tenant_a_headers)
        ).json()
        base = f"/invoices/{invoice['id']}"

        # Act: add from catalog, add a manual line, edit, remove
        added = await client.post(
            f"{base}/items", json={"product_id": product["id"], "quantity": 2}, headers=tenant_a_headers
        )
        manual = await client.post(
            f"{base}/items", json={"name": "Freight", "rate": "50"}, headers=tenant_a_headers
        )
        freight_id = manual.json()["items"][1]["id"]
        edited = await client.put(
            f"{base}/items/{freight_id}", json={"rate": "80", "amount": "1"}, headers=tenant_a_headers
        )
        pipe_id = edited.json()["items"][0]["id"]
        removed = await client.delete(f"{base}/items/{pipe_id}", headers=tenant_a_headers)
        missing = await client.delete(f"{base}/items/{pipe_id}", headers=tenant_a_headers)

        # Assert
        assert added.status_code == 201
        for response in (added, manual, edited, removed):
            assert response.json()["customer_name"] == "Asha Traders"
        pipe = added.json()["items"][0]
        assert pipe["hsn_code"] == product["sku"]
        assert _money(pipe["cgst_percent"]) == Decimal("9")
        assert _money(pipe["amount"]) == Decimal("236")
        assert _money(manual.json()["totals"]["total"]) == Decimal("286")
        assert _money(edited.json()["totals"]["total"]) == Decimal("316")
        assert [item["name"] for item in removed.json()["items"]] == ["Freight"]
        assert _money(removed.json()["totals"]["total"]) == Decimal("80")
        assert missing.status_code == 404
        assert missing.json()["error"]["code"] == "INVOICE_ITEM_NOT_FOUND"

    async def test_adjustments(self, client, tenant_a_headers):
        customer_id = await _create_customer(client, tenant_a_headers)
        invoice = (
            await client.post(
                "/invoices",
                json={"customer_id": customer_id, "items": [SCENARIO_ITEM]},
                headers=tenant_a_headers,
            )
        ).json()

        response = await client.patch(
            f"/invoices/{invoice['id']}/adjustments",
            json={"adjustment": "-20", "paid_amount": "200"},
            headers=tenant_a_headers,
        )

        totals = response.json()["totals"]
        assert _money(totals["total"]) == Decimal("180")
        assert _money(totals["balance_amount"]) == Decimal("-20")
        assert response.json()["status"] == "PAID"

    async def test_sub_cent_amounts_reload_unchanged(self, client, tenant_a_headers):
        """
        Given: an item whose taxes have more places than the stored scale
        When: the invoice is paid in full, saved and read back
        Then: save, GET and list agree on the totals and on status PAID
        """
        # Arrange
        customer_id = await _create_customer(client, tenant_a_headers)
        item = {"name": "Solder", "quantity": 1, "rate": "0.333333", "cgst_percent": "9", "sgst_percent": "9"}

        # Act
        saved = await client.post(
            "/invoices",
            json={"customer_id": customer_id, "items": [item], "paid_amount": "0.393333"},
            headers=tenant_a_headers,
        )
        fetched = await client.get(f"/invoices/{saved.json()['id']}", headers=tenant_a_headers)
        listed = await client.get("/invoices", headers=tenant_a_headers)

        # Assert
        assert saved.status_code == 201
        assert _money(saved.json()["totals"]["cgst_total"]) == Decimal("0.03")
        assert _money(saved.json()["totals"]["total"]) == Decimal("0.393333")
        assert saved.json()["status"] == "PAID"
        for field in ("subtotal", "cgst_total", "sgst_total", "total", "balance_amount"):
            assert _money(fetched.json()["totals"][field]) == _money(saved.json()["totals"][field])
        assert fetched.json()["status"] == "PAID"
        assert listed.json()[0]["status"] == "PAID"
        assert _money(listed.json()[0]["balance_amount"]) == Decimal("0")

    async def test_amounts_beyond_stored_scale_are_422(self, client, tenant_a_headers):
        customer_id = await _create_customer(client, tenant_a_headers)

        response = await client.post(
            "/invoices",
            json={
                "customer_id": customer_id,
                "items": [{"name": "Solder", "rate": "100.0000004"}],
                "paid_amount": "100",
            },
            headers=tenant_a_headers,
        )

        assert response.status_code == 422

    async def test_list_search_and_delete(self, client, tenant_a_headers, tenant_b_headers):
        customer_id = await _create_customer(client, tenant_a_headers, name="Meena Stores")
        invoice = (
            await client.post(
                "/invoices",
                json={"customer_id": customer_id, "order_number": "PO-7781", "items": [SCENARIO_ITEM]},
                headers=tenant_a_headers,
            )
        ).json()

        listed = await client.get("/invoices", headers=tenant_a_headers)
        found = await client.get("/invoices", params={"q": "po-77"}, headers=tenant_a_headers)
        other = await client.get("/invoices", headers=tenant_b_headers)
        cross_delete = await client.delete(f"/invoices/{invoice['id']}", headers=tenant_b_headers)
        deleted = await client.delete(f"/invoices/{invoice['id']}", headers=tenant_a_headers)

        assert listed.json()[0]["customer_name"] == "Meena Stores"
        assert listed.json()[0]["status"] == "CREDIT"
        assert [row["id"] for row in found.json()] == [invoice["id"]]
        assert other.json() == []
        assert cross_delete.status_code == 404
        assert deleted.status_code == 204

    async def test_list_shows_unknown_after_customer_delete(self, client, tenant_a_headers):
        customer_id = await _create_customer(client, tenant_a_headers)
        await client.post("/invoices", json={"customer_id": customer_id}, headers=tenant_a_headers)
        await client.delete(f"/customers/{customer_id}", headers=tenant_a_headers)

        listed = await client.get("/invoices", headers=tenant_a_headers)

        assert listed.json()[0]["customer_name"] == "Unknown"

    async def test_preview(self, client, tenant_a_headers):
        response = await client.post(
            "/invoices/preview",
            json={"items": [SCENARIO_ITEM], "adjustment": "-0.5"},
            headers=tenant_a_headers,
        )

        assert _money(response.json()["totals"]["total"]) == Decimal("199.5")

    async def test_pdf_export(self, client, tenant_a_headers):
        await client.put("/settings", json=SETTINGS, headers=tenant_a_headers)
        customer_id = await _create_customer(client, tenant_a_headers)
        invoice = (
            await client.post(
                "/invoices",
                json={"customer_id": customer_id, "items": [SCENARIO_ITEM], "remarks": "Thanks & regards <3"},
                headers=tenant_a_headers,
            )
        ).json()

        response = await client.get(f"/invoices/{invoice['id']}/pdf", headers=tenant_a_headers)

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert invoice["invoice_number"] in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")

    async def test_pdf_of_other_tenants_invoice_is_404(self, client, tenant_a_headers, tenant_b_headers):
        customer_id = await _create_customer(client, tenant_a_headers)
        invoice = (
            await client.post("/invoices", json={"customer_id": customer_id}, headers=tenant_a_headers)
        ).json()

        response = await client.get(f"/invoices/{invoice['id']}/pdf", headers=tenant_b_headers)

        assert response.status_code == 404


@pytest.mark.asyncio
class TestSettingsApi:

    async def test_defaults_before_first_save(self, client, tenant_a_headers):
        response = await client.get("/settings", headers=tenant_a_headers)

        assert response.status_code == 200
        assert response.json()["id"] is None
        assert response.json()["invoice_settings"]["prefix"] == "INV"

    async def test_upsert_and_prefix_used_for_numbers(self, client, tenant_a_headers):
        first = await client.put("/settings", json=SETTINGS, headers=tenant_a_headers)
        second = await client.put(
            "/settings",
            json={**SETTINGS, "invoice_settings": {"prefix": "AS", "next_number": 1}},
            headers=tenant_a_headers,
        )
        number = await client.get("/invoices/next-number", headers=tenant_a_headers)

        assert first.status_code == 200
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["business"]["business_name"] == "Acme Steel"
        assert number.json()["invoice_number"].startswith("AS-")

    async def test_settings_are_per_tenant(self, client, tenant_a_headers, tenant_b_headers):
        await client.put("/settings", json=SETTINGS, headers=tenant_a_headers)

        response = await client.get("/settings", headers=tenant_b_headers)

        assert response.json()["id"] is None

    async def test_invalid_prefix_is_422(self, client, tenant_a_headers):
        body = {**SETTINGS, "invoice_settings": {"prefix": "A B"}}

        response = await client.put("/settings", json=body, headers=tenant_a_headers)

        assert response.status_code == 422
