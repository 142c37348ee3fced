"""POST /api/upload contract: validation, inference without a model, cleanup."""

from io import BytesIO
from pathlib import Path

import pytest
import xlwt
from httpx import AsyncClient
from openpyxl import Workbook

from template_generator.api.dependencies import get_upload_storage
from template_generator.core.config import Settings, get_settings
from template_generator.infrastructure.external.storage import UploadStorage
from template_generator.main import app

XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
XLS = "application/vnd.ms-excel"
ODS = "application/vnd.oasis.opendocument.spreadsheet"


def _xlsx_bytes(sheets: dict[str, list[list]]) -> bytes:
    wb = Workbook()
    wb.remove(wb.active)
    for title, rows in sheets.items():
        ws = wb.create_sheet(title)
        for row in rows:
            ws.append(row)
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def uploads_dir(tmp_path: Path) -> Path:
    app.dependency_overrides[get_upload_storage] = lambda: UploadStorage(str(tmp_path))
    return tmp_path


async def test_upload_returns_components(client: AsyncClient, uploads_dir: Path) -> None:
    content = _xlsx_bytes(
        {
            "Invoice - Header": [["Number", "Customer"], [1001, "Acme"]],
            "Invoice - Lines": [["Item", "Qty"], ["Bolt", 4]],
            "Customers": [["Name", "Email"]],
        }
    )
    response = await client.post(
        "/api/upload", files={"file": ("Q3 Invoices.xlsx", content, XLSX)}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["fileName"] == "Q3 Invoices"
    assert [c["key"] for c in body["components"]] == ["invoice", "customers"]

    invoice = body["components"][0]
    assert invoice["title"] == "Invoice"
    assert [s["key"] for s in invoice["subcomponents"]] == ["invoice_-_header", "invoice_-_lines"]
    assert invoice["schema_json"]["properties"]["Number"] == {"type": "number", "title": "Number"}

    customers = body["components"][1]
    assert customers["subcomponents"] is None
    assert set(customers["schema_json"]["properties"]) == {"Name", "Email"}

    assert list(uploads_dir.iterdir()) == []


async def test_upload_without_file_returns_400(client: AsyncClient, uploads_dir: Path) -> None:
    response = await client.post("/api/upload", data={"other": "x"})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["error"] == "No file uploaded"
    assert body["error"]["status"] == 400


async def test_upload_rejects_non_excel(client: AsyncClient, uploads_dir: Path) -> None:
    response = await client.post(
        "/api/upload", files={"file": ("notes.txt", b"hello", "text/plain")}
    )
    assert response.status_code == 400
    assert response.json()["error"]["error"] == "Only Excel files are allowed"


async def test_upload_corrupt_workbook_returns_500(client: AsyncClient, uploads_dir: Path) -> None:
    response = await client.post(
        "/api/upload", files={"file": ("broken.xlsx", b"not a zip", XLSX)}
    )
    assert response.status_code == 500
    body = response.json()
    assert body["error"]["error"] == "Failed to process Excel file"
    assert body["error"]["details"]["file_name"] == "broken.xlsx"
    assert list(uploads_dir.iterdir()) == []


def _xls_bytes(title: str, rows: list[list]) -> bytes:
    wb = xlwt.Workbook()
    ws = wb.add_sheet(title)
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            ws.write(r, c, value)
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


async def test_upload_legacy_xls(client: AsyncClient, uploads_dir: Path) -> None:
    content = _xls_bytes("Customers", [["Name", "Balance"], ["Acme", 120]])
    response = await client.post(
        "/api/upload", files={"file": ("Legacy Export.xls", content, XLS)}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["fileName"] == "Legacy Export"
    [customers] = body["components"]
    assert customers["key"] == "customers"
    assert customers["schema_json"]["properties"] == {
        "Name": {"type": "string", "title": "Name"},
        "Balance": {"type": "number", "title": "Balance"},
    }
    assert list(uploads_dir.iterdir()) == []


async def test_upload_ods_passes_validation_but_is_unreadable(
    client: AsyncClient, uploads_dir: Path
) -> None:
    response = await client.post(
        "/api/upload", files={"file": ("sheet.ods", b"PK\x03\x04 opendocument", ODS)}
    )
    assert response.status_code == 500
    assert response.json()["error"]["error"] == "Failed to process Excel file"


async def test_upload_over_max_size_returns_400(client: AsyncClient, uploads_dir: Path) -> None:
    settings = Settings(max_upload_size=1024)
    app.dependency_overrides[get_settings] = lambda: settings
    response = await client.post(
        "/api/upload",
        files={"file": ("big.xlsx", b"x" * (settings.max_upload_size + 1), XLSX)},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"]["error"] == "File upload error: File too large"
    assert body["error"]["details"]["field"] == "file"
    assert list(uploads_dir.iterdir()) == []
