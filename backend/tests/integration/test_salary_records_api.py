"""End-to-end tests for the upload and users endpoints on in-memory SQLite."""

import io

import pytest
import pytest_asyncio
from fastapi import UploadFile
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from salary_api.config import Settings
from salary_api.infrastructure.database import create_tables, get_db_session
from salary_api.main import create_app
from salary_api.presentation.api.v1.endpoints import salary_records


@pytest_asyncio.fixture
async def client():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await create_tables(engine)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _session_override():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = _session_override
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    await engine.dispose()


async def _upload(client: AsyncClient, text: str):
    return await client.post(
        "/api/v1/upload",
        files={"file": ("users.csv", text.encode("utf-8"), "text/csv")},
    )


async def _all_users(client: AsyncClient) -> list[dict]:
    response = await client.get("/api/v1/users", params={"min": 0, "max": 1e9})
    assert response.status_code == 200
    return response.json()["results"]


@pytest.mark.asyncio
async def test_upload_then_query_sorted_page(client):
    response = await _upload(client, "NAME,SALARY\nAlice,50000\nBob,-100\nCara,75000")

    assert response.status_code == 200
    assert response.json() == {"success": 1, "accepted_count": 2, "skipped_count": 1}

    response = await client.get(
        "/api/v1/users",
        params={"min": 40000, "max": 80000, "offset": 0, "limit": 1, "sort": "SALARY"},
    )
    assert response.status_code == 200
    assert response.json() == {"results": [{"name": "Alice", "salary": 50000.0}]}


@pytest.mark.asyncio
async def test_query_without_sort_returns_insertion_order(client):
    await _upload(client, "NAME,SALARY\nZed,10\nAmy,20\nMia,30")

    assert [u["name"] for u in await _all_users(client)] == ["Zed", "Amy", "Mia"]


@pytest.mark.asyncio
async def test_sort_token_is_case_insensitive(client):
    await _upload(client, "NAME,SALARY\nZed,10\nAmy,20\nMia,30")

    response = await client.get("/api/v1/users", params={"min": 0, "max": 100, "sort": "name"})

    assert [u["name"] for u in response.json()["results"]] == ["Amy", "Mia", "Zed"]


@pytest.mark.asyncio
async def test_bad_row_rejects_upload_and_persists_nothing(client):
    response = await _upload(client, "NAME,SALARY\nAlice,50000\nBob,notanumber")

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["error_kind"] == "row"
    assert detail["line"] == 3
    assert detail["content"] == "Bob,notanumber"
    assert await _all_users(client) == []


@pytest.mark.asyncio
async def test_grouped_digits_in_salary_reject_upload(client):
    response = await _upload(client, "NAME,SALARY\nAlice,5_0000")

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["error_kind"] == "row"
    assert detail["line"] == 2
    assert await _all_users(client) == []


@pytest.mark.asyncio
async def test_bad_header_rejects_upload(client):
    response = await _upload(client, "SALARY,NAME\n50000,Alice")

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["error_kind"] == "header"
    assert detail["line"] == 1
    assert detail["content"] == "SALARY,NAME"
    assert await _all_users(client) == []


@pytest.mark.asyncio
async def test_empty_upload_is_a_header_error(client):
    response = await _upload(client, "")

    assert response.status_code == 400
    assert response.json()["detail"]["error_kind"] == "header"


@pytest.mark.asyncio
async def test_failed_upload_keeps_earlier_imports(client):
    await _upload(client, "NAME,SALARY\nAlice,50000")
    await _upload(client, "NAME,SALARY\nBob,1\nCara,oops")

    assert [u["name"] for u in await _all_users(client)] == ["Alice"]


@pytest.mark.asyncio
async def test_oversized_upload_is_rejected(client, monkeypatch):
    monkeypatch.setattr(salary_records, "get_settings", lambda: Settings(max_upload_size_mb=1))
    rows = "\n".join(f"Person{i},{i}" for i in range(100_000))

    response = await _upload(client, f"NAME,SALARY\n{rows}")

    assert response.status_code == 413
    assert await _all_users(client) == []


def test_upload_size_is_measured_without_moving_the_stream():
    content = b"NAME,SALARY\nAlice,1\n"
    upload = UploadFile(file=io.BytesIO(content))
    upload.file.seek(5)

    assert upload.size is None
    assert salary_records._upload_size(upload) == len(content)
    assert upload.file.tell() == 5


def test_upload_size_prefers_the_declared_size():
    upload = UploadFile(file=io.BytesIO(b"abc"), size=3)

    assert salary_records._upload_size(upload) == 3


@pytest.mark.asyncio
async def test_min_above_max_is_rejected(client):
    response = await client.get("/api/v1/users", params={"min": 10, "max": 5})

    assert response.status_code == 400
    assert "must not exceed" in response.json()["detail"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params",
    [
        {"min": 0, "max": 10, "sort": "age"},
        {"min": 0, "max": 10, "offset": -1},
        {"min": 0, "max": 10, "limit": 0},
    ],
)
async def test_invalid_query_params_are_rejected(client, params):
    response = await client.get("/api/v1/users", params=params)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_missing_bounds_fail_validation(client):
    response = await client.get("/api/v1/users", params={"min": 0})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_offset_beyond_results_is_empty(client):
    await _upload(client, "NAME,SALARY\nAlice,50000\nCara,75000")

    response = await client.get("/api/v1/users", params={"min": 0, "max": 100000, "offset": 2})

    assert response.status_code == 200
    assert response.json() == {"results": []}
