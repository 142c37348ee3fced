"""POST /api/schemas/normalize contract."""

from httpx import AsyncClient


async def test_normalize_edit_mode_by_default(client: AsyncClient) -> None:
    response = await client.post(
        "/api/schemas/normalize",
        json={"schema_json": {"type": "array", "items": {"properties": {"x": {"type": "integer"}}}}},
    )
    assert response.status_code == 200
    assert response.json() == {
        "schema_json": {"type": "object", "properties": {"x": {"type": "number", "title": "x"}}}
    }


async def test_normalize_render_mode(client: AsyncClient) -> None:
    response = await client.post(
        "/api/schemas/normalize",
        json={"schema_json": {"type": "object"}, "mode": "render"},
    )
    assert response.status_code == 200
    assert response.json()["schema_json"] == {"type": "object", "properties": {}}


async def test_normalize_non_object_input(client: AsyncClient) -> None:
    response = await client.post("/api/schemas/normalize", json={"schema_json": [1, 2]})
    assert response.status_code == 200
    assert response.json()["schema_json"] == {"type": "object", "properties": {}}


async def test_normalize_unknown_mode_is_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/schemas/normalize", json={"schema_json": {}, "mode": "preview"}
    )
    assert response.status_code == 400
