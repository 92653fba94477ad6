"""Integration tests for Invoice API endpoints"""

import pytest
from datetime import datetime, timedelta
from httpx import AsyncClient

from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.domain.invoice_builder import build_invoice_record
from src.domain.invoice_calculator import InvoiceCalculator, LineItemInput
from src.domain.invoice_record import OwnerIdentity
from tests.fixtures.fake_engine import FAKE_PDF

AUTH_HEADERS = {
    "X-User-Id": "user_api_1",
    "X-User-Name": "Asha Rao",
    "X-User-Email": "asha@example.com",
}


class TestInvoiceAPIIntegration:
    """Integration test suite for Invoice API endpoints"""

    @pytest.mark.asyncio
    async def test_generate_returns_pdf_download(self, client: AsyncClient, test_data, engines):
        """POST /generate with valid products returns the PDF with download headers"""
        # Act
        response = await client.post(
            "/api/invoice/generate",
            json={"products": test_data.products()},
            headers=AUTH_HEADERS,
        )

        # Assert
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-length"] == str(len(FAKE_PDF))
        disposition = response.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="invoice-')
        assert disposition.endswith('.pdf"')
        assert response.content == FAKE_PDF

        markup = engines.engines[0].rendered_markup[0]
        assert "Name: Asha Rao" in markup
        assert "Product 1" in markup and "Product 2" in markup
        assert engines.all_released

    @pytest.mark.asyncio
    async def test_generate_persists_invoice_in_history(self, client: AsyncClient, test_data):
        # Arrange
        await client.post(
            "/api/invoice/generate",
            json={"products": test_data.products()},
            headers=AUTH_HEADERS,
        )

        # Act
        response = await client.get("/api/invoice/history", headers=AUTH_HEADERS)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["limit"] == 50
        invoice = data["invoices"][0]
        assert invoice["owner_email"] == "asha@example.com"
        assert invoice["subtotal"] == pytest.approx(250.0)
        assert invoice["tax_total"] == pytest.approx(45.0)
        assert invoice["grand_total"] == pytest.approx(295.0)
        assert [p["name"] for p in invoice["products"]] == ["A", "B"]
        assert invoice["invoice_number"] == invoice["invoice_id"][-8:].upper()

    @pytest.mark.asyncio
    async def test_generate_validation_error_lists_every_field(
        self, client: AsyncClient, test_data, engines
    ):
        # Act
        response = await client.post(
            "/api/invoice/generate",
            json={"products": test_data.products("invalid_products")},
            headers=AUTH_HEADERS,
        )

        # Assert
        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "VALIDATION_ERROR"
        fields = [d["field"] for d in data["error"]["details"]]
        assert fields == ["products[0].name", "products[0].quantity", "products[1].rate"]
        assert engines.engines == []

        history = await client.get("/api/invoice/history", headers=AUTH_HEADERS)
        assert history.json()["invoices"] == []

    @pytest.mark.asyncio
    async def test_generate_empty_products_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/invoice/generate", json={"products": []}, headers=AUTH_HEADERS
        )

        assert response.status_code == 400
        assert response.json()["error"]["details"][0]["field"] == "products"

    @pytest.mark.asyncio
    async def test_generate_malformed_body_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/invoice/generate", json={"products": "not-a-list"}, headers=AUTH_HEADERS
        )

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_generate_export_failure_keeps_invoice(
        self, client: AsyncClient, test_data, engines
    ):
        """Engine crash: 500 DOCUMENT_EXPORT_FAILED, engine released, invoice saved"""
        # Arrange
        engines.engine_kwargs["fail_on_render"] = RuntimeError("browser crashed")

        # Act
        response = await client.post(
            "/api/invoice/generate",
            json={"products": test_data.products()},
            headers=AUTH_HEADERS,
        )

        # Assert
        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Error generating PDF"
        assert data["error"]["code"] == "DOCUMENT_EXPORT_FAILED"
        assert "browser crashed" in data["error"]["reason"]
        assert engines.all_released

        history = await client.get("/api/invoice/history", headers=AUTH_HEADERS)
        assert history.json()["total"] == 1

    @pytest.mark.asyncio
    async def test_requests_without_identity_are_unauthorized(self, client: AsyncClient, test_data):
        response = await client.post(
            "/api/invoice/generate", json={"products": test_data.products()}
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    @pytest.mark.asyncio
    async def test_calculate_returns_totals_without_saving(self, client: AsyncClient, test_data):
        # Act
        response = await client.post(
            "/api/invoice/calculate",
            json={"products": test_data.products()},
            headers=AUTH_HEADERS,
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["subtotal"] == pytest.approx(250.0)
        assert data["tax_total"] == pytest.approx(45.0)
        assert data["grand_total"] == pytest.approx(295.0)
        assert data["tax_rate"] == 0.18

        history = await client.get("/api/invoice/history", headers=AUTH_HEADERS)
        assert history.json()["total"] == 0

    @pytest.mark.asyncio
    async def test_history_empty_for_new_owner(self, client: AsyncClient):
        response = await client.get("/api/invoice/history", headers=AUTH_HEADERS)

        assert response.status_code == 200
        assert response.json() == {"invoices": [], "total": 0, "limit": 50}

    @pytest.mark.asyncio
    async def test_history_capped_at_fifty_newest_first(self, client: AsyncClient, db_session):
        # Arrange
        repo = SqlAlchemyInvoiceRepository(db_session)
        owner = OwnerIdentity(id="user_api_1", name="Asha Rao", email="asha@example.com")
        calculation = InvoiceCalculator().calculate([LineItemInput("A", 1, 10)])
        base = datetime(2024, 1, 1, 0, 0, 0)
        for i in range(52):
            await repo.create(build_invoice_record(calculation, owner, now=base + timedelta(hours=i)))
        await db_session.commit()

        # Act
        response = await client.get("/api/invoice/history", headers=AUTH_HEADERS)

        # Assert
        data = response.json()
        assert data["total"] == 52
        assert len(data["invoices"]) == 50
        created = [invoice["created_at"] for invoice in data["invoices"]]
        assert created == sorted(created, reverse=True)

    @pytest.mark.asyncio
    async def test_download_stored_invoice(self, client: AsyncClient, test_data):
        # Arrange
        await client.post(
            "/api/invoice/generate",
            json={"products": test_data.products()},
            headers=AUTH_HEADERS,
        )
        history = await client.get("/api/invoice/history", headers=AUTH_HEADERS)
        invoice_id = history.json()["invoices"][0]["invoice_id"]

        # Act
        response = await client.get(f"/api/invoice/{invoice_id}/pdf", headers=AUTH_HEADERS)

        # Assert
        assert response.status_code == 200
        assert response.content == FAKE_PDF
        assert f'filename="invoice-{invoice_id}.pdf"' in response.headers["content-disposition"]

    @pytest.mark.asyncio
    async def test_download_other_owners_invoice_not_found(self, client: AsyncClient, test_data):
        await client.post(
            "/api/invoice/generate",
            json={"products": test_data.products()},
            headers=AUTH_HEADERS,
        )
        history = await client.get("/api/invoice/history", headers=AUTH_HEADERS)
        invoice_id = history.json()["invoices"][0]["invoice_id"]

        response = await client.get(
            f"/api/invoice/{invoice_id}/pdf",
            headers={**AUTH_HEADERS, "X-User-Id": "intruder"},
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["success"] is True

    @pytest.mark.asyncio
    async def test_whole_number_float_quantity_accepted(self, client: AsyncClient):
        response = await client.post(
            "/api/invoice/calculate",
            json={"products": [{"name": "A", "quantity": 2.0, "rate": 100}]},
            headers=AUTH_HEADERS,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["products"][0]["quantity"] == 2
        assert data["grand_total"] == pytest.approx(236.0)

    @pytest.mark.asyncio
    async def test_huge_integer_rate_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/invoice/calculate",
            json={"products": [{"name": "A", "quantity": 1, "rate": int("9" * 400)}]},
            headers=AUTH_HEADERS,
        )

        assert response.status_code == 400
        details = response.json()["error"]["details"]
        assert [d["field"] for d in details] == ["products[0].rate"]

    @pytest.mark.asyncio
    async def test_quantity_past_storage_range_rejected(self, client: AsyncClient, engines):
        response = await client.post(
            "/api/invoice/generate",
            json={"products": [{"name": "A", "quantity": 2 ** 63, "rate": 1}]},
            headers=AUTH_HEADERS,
        )

        assert response.status_code == 400
        assert response.json()["error"]["details"][0]["field"] == "products[0].quantity"
        assert engines.engines == []

        history = await client.get("/api/invoice/history", headers=AUTH_HEADERS)
        assert history.json()["total"] == 0


class TestProductionErrorResponses:
    """Diagnostic reasons are hidden when ENVIRONMENT is production"""

    @pytest.mark.asyncio
    async def test_validation_error_hides_reason(self, production_client: AsyncClient, test_data):
        # Act
        response = await production_client.post(
            "/api/invoice/generate",
            json={"products": test_data.products("invalid_products")},
            headers=AUTH_HEADERS,
        )

        # Assert
        assert response.status_code == 400
        error = response.json()["error"]
        assert "reason" not in error
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Validation failed"
        assert len(error["details"]) == 3

    @pytest.mark.asyncio
    async def test_export_failure_hides_reason(
        self, production_client: AsyncClient, test_data, engines
    ):
        # Arrange
        engines.engine_kwargs["fail_on_render"] = RuntimeError("browser crashed")

        # Act
        response = await production_client.post(
            "/api/invoice/generate",
            json={"products": test_data.products()},
            headers=AUTH_HEADERS,
        )

        # Assert
        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "DOCUMENT_EXPORT_FAILED"
        assert data["error"]["message"] == "Error generating PDF"
        assert "reason" not in data["error"]
        assert "browser crashed" not in response.text
