"""
Quotes API — HTTP Endpoint Tests
=================================

What:  Exercises /quotes and /health through the full FastAPI stack.
How:   HTTPX AsyncClient over ASGITransport, backed by in-memory SQLite.
"""

import logging

import pytest

QUOTE_FIELDS = {"id", "content", "author", "category", "created_at", "updated_at"}


class TestListQuotes:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/quotes")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_after_seeding(self, seeded_client):
        response = await seeded_client.get("/quotes")

        assert response.status_code == 200
        quotes = response.json()
        assert len(quotes) == 22
        assert quotes[0]["content"] == "Sometimes you win, sometimes you learn."
        assert quotes[0]["author"] == "Unknown"
        assert set(quotes[0]) == QUOTE_FIELDS


class TestGetQuote:

    @pytest.mark.asyncio
    async def test_get_existing(self, seeded_client):
        listing = (await seeded_client.get("/quotes")).json()
        target = listing[1]

        response = await seeded_client.get(f"/quotes/{target['id']}")

        assert response.status_code == 200
        assert response.json() == target

    @pytest.mark.asyncio
    async def test_get_nonexistent(self, seeded_client):
        response = await seeded_client.get("/quotes/999999")

        assert response.status_code == 404
        assert response.json() == {"message": "no quote matches that ID"}

    @pytest.mark.asyncio
    async def test_get_malformed_id(self, seeded_client):
        response = await seeded_client.get("/quotes/not-a-number")

        assert response.status_code == 500
        assert response.json() == {"message": "there was some other error"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("quote_id", ["3000000000", "99999999999999999999", "-3000000000"])
    async def test_get_id_beyond_column_range(self, seeded_client, quote_id):
        response = await seeded_client.get(f"/quotes/{quote_id}")

        assert response.status_code == 404
        assert response.json() == {"message": "no quote matches that ID"}


class TestCreateQuote:

    @pytest.mark.asyncio
    async def test_create_returns_updated_list(self, seeded_client):
        response = await seeded_client.post(
            "/quotes",
            json={"quote": {"content": "Test", "author": "Tester", "category": "test"}},
        )

        assert response.status_code == 200
        quotes = response.json()
        assert len(quotes) == 23
        last = quotes[-1]
        assert last["content"] == "Test"
        assert last["author"] == "Tester"
        assert last["category"] == "test"

    @pytest.mark.asyncio
    async def test_created_quote_is_fetchable(self, test_client):
        created = (await test_client.post(
            "/quotes",
            json={"quote": {"content": "Truth suffers from too much analysis.",
                            "author": "Frank Herbert", "category": "philosophical"}},
        )).json()[-1]

        response = await test_client.get(f"/quotes/{created['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["content"] == "Truth suffers from too much analysis."
        assert body["author"] == "Frank Herbert"
        assert body["category"] == "philosophical"

    @pytest.mark.asyncio
    async def test_create_ignores_unpermitted_fields(self, test_client):
        response = await test_client.post(
            "/quotes",
            json={"quote": {"content": "c", "author": "a", "category": "t",
                            "id": 5000, "likes": 12}},
        )

        assert response.status_code == 200
        created = response.json()[-1]
        assert set(created) == QUOTE_FIELDS
        assert created["id"] != 5000
        assert (await test_client.get("/quotes/5000")).status_code == 404

    @pytest.mark.asyncio
    async def test_create_missing_quote_object(self, seeded_client):
        response = await seeded_client.post("/quotes", json={"content": "no envelope"})

        assert response.status_code == 500
        assert response.json() == {"message": "An error occurred"}

    @pytest.mark.asyncio
    async def test_create_invalid_json(self, test_client):
        response = await test_client.post(
            "/quotes",
            content=b"{oops",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 500
        assert response.json() == {"message": "An error occurred"}

    @pytest.mark.asyncio
    async def test_create_blank_content_persists_nothing(self, seeded_client):
        response = await seeded_client.post(
            "/quotes",
            json={"quote": {"content": "   ", "author": "Nobody"}},
        )

        assert response.status_code == 500
        assert response.json() == {"message": "An error occurred"}
        assert len((await seeded_client.get("/quotes")).json()) == 22

    @pytest.mark.asyncio
    async def test_create_numeric_fields_stored_as_text(self, seeded_client):
        response = await seeded_client.post(
            "/quotes",
            json={"quote": {"content": "Test", "author": "Tester", "category": 2024}},
        )

        assert response.status_code == 200
        last = response.json()[-1]
        assert last["category"] == "2024"
        assert last["author"] == "Tester"

    @pytest.mark.asyncio
    async def test_create_structured_field_rejected(self, seeded_client):
        response = await seeded_client.post(
            "/quotes",
            json={"quote": {"content": "Test", "category": {"name": "test"}}},
        )

        assert response.status_code == 500
        assert response.json() == {"message": "An error occurred"}
        assert len((await seeded_client.get("/quotes")).json()) == 22


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated_request_id(self, test_client):
        response = await test_client.get("/quotes")

        assert response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_client_request_id_echoed(self, test_client):
        response = await test_client.get("/quotes/999999", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("supplied", ["x" * 65, "two words", "id;drop"])
    async def test_unsafe_client_request_id_replaced(self, test_client, supplied):
        response = await test_client.get("/quotes", headers={"X-Request-ID": supplied})

        rid = response.headers["X-Request-ID"]
        assert rid != supplied
        assert len(rid) == 8

    @pytest.mark.asyncio
    async def test_access_log_records_route_template(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="quotes_api.access")

        await test_client.get("/quotes/999999", headers={"X-Request-ID": "trace-1"})

        records = [r for r in caplog.records if r.name == "quotes_api.access"]
        assert len(records) == 1
        assert records[0].route == "/quotes/{quote_id}"
        assert records[0].request_id == "trace-1"
        assert records[0].levelno == logging.WARNING


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
