"""API tests for page and highlight actions."""

from typing import Callable, Dict

import pytest
from httpx import AsyncClient

from textbook_scanner.modules.common.auth import ActingUser

HeaderFactory = Callable[[ActingUser], Dict[str, str]]


class TestPageAPI:
    """API tests for page actions."""

    @pytest.mark.asyncio
    async def test_save_page_defaults(
        self, client: AsyncClient, owner: ActingUser, auth_headers: HeaderFactory, test_document
    ):
        response = await client.post(
            "/api/v1/actions/savePage",
            json={"documentId": test_document.id, "ocrText": "Newton's laws"},
            headers=auth_headers(owner),
        )

        assert response.status_code == 200
        page = response.json()["page"]
        assert page["pageNumber"] == 1
        assert page["documentId"] == test_document.id
        assert page["ocrText"] == "Newton's laws"

    @pytest.mark.asyncio
    async def test_save_page_returns_bare_host_image_url_unchanged(
        self, client: AsyncClient, owner: ActingUser, auth_headers: HeaderFactory, test_document
    ):
        response = await client.post(
            "/api/v1/actions/savePage",
            json={"documentId": test_document.id, "imageUrl": "https://cdn.example.com"},
            headers=auth_headers(owner),
        )

        assert response.status_code == 200
        assert response.json()["page"]["imageUrl"] == "https://cdn.example.com"

    @pytest.mark.asyncio
    async def test_save_page_rejects_invalid_image_url(
        self, client: AsyncClient, owner: ActingUser, auth_headers: HeaderFactory, test_document
    ):
        response = await client.post(
            "/api/v1/actions/savePage",
            json={"documentId": test_document.id, "imageUrl": "not a url"},
            headers=auth_headers(owner),
        )

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION"

    @pytest.mark.asyncio
    async def test_save_page_rejects_non_positive_page_number(
        self, client: AsyncClient, owner: ActingUser, auth_headers: HeaderFactory, test_document
    ):
        response = await client.post(
            "/api/v1/actions/savePage",
            json={"documentId": test_document.id, "pageNumber": 0},
            headers=auth_headers(owner),
        )

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION"

    @pytest.mark.asyncio
    async def test_save_page_with_page_of_other_document(
        self, client: AsyncClient, owner: ActingUser, auth_headers: HeaderFactory, test_page
    ):
        sibling = await client.post(
            "/api/v1/actions/createDocument", json={"title": "Chapter 3"}, headers=auth_headers(owner)
        )

        response = await client.post(
            "/api/v1/actions/savePage",
            json={"id": test_page.id, "documentId": sibling.json()["document"]["id"], "ocrText": "moved"},
            headers=auth_headers(owner),
        )

        assert response.status_code == 404
        assert response.json() == {"code": "NOT_FOUND", "detail": "Page not found."}

    @pytest.mark.asyncio
    async def test_delete_page_twice(
        self, client: AsyncClient, owner: ActingUser, auth_headers: HeaderFactory, test_document, test_page
    ):
        payload = {"id": test_page.id, "documentId": test_document.id}

        first = await client.post("/api/v1/actions/deletePage", json=payload, headers=auth_headers(owner))
        second = await client.post("/api/v1/actions/deletePage", json=payload, headers=auth_headers(owner))

        assert first.status_code == 200
        assert first.json()["page"]["id"] == test_page.id
        assert second.status_code == 404
        assert second.json()["detail"] == "Page not found."

    @pytest.mark.asyncio
    async def test_delete_page_requires_owner(
        self, client: AsyncClient, other_user: ActingUser, auth_headers: HeaderFactory, test_document, test_page
    ):
        response = await client.post(
            "/api/v1/actions/deletePage",
            json={"id": test_page.id, "documentId": test_document.id},
            headers=auth_headers(other_user),
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Document not found."


class TestHighlightAPI:
    """API tests for highlight actions."""

    @pytest.mark.asyncio
    async def test_save_highlight_empty_content(
        self, client: AsyncClient, owner: ActingUser, auth_headers: HeaderFactory, test_document
    ):
        response = await client.post(
            "/api/v1/actions/saveHighlight",
            json={"documentId": test_document.id, "content": ""},
            headers=auth_headers(owner),
        )

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION"

    @pytest.mark.asyncio
    async def test_save_highlight_page_of_other_document(
        self, client: AsyncClient, owner: ActingUser, auth_headers: HeaderFactory, test_document
    ):
        sibling = await client.post(
            "/api/v1/actions/createDocument", json={"title": "Chapter 3"}, headers=auth_headers(owner)
        )
        sibling_id = sibling.json()["document"]["id"]
        sibling_page = await client.post(
            "/api/v1/actions/savePage", json={"documentId": sibling_id}, headers=auth_headers(owner)
        )

        response = await client.post(
            "/api/v1/actions/saveHighlight",
            json={"documentId": test_document.id, "pageId": sibling_page.json()["page"]["id"], "content": "W = Fd"},
            headers=auth_headers(owner),
        )

        assert response.status_code == 404
        assert response.json() == {"code": "NOT_FOUND", "detail": "Page not found."}

    @pytest.mark.asyncio
    async def test_delete_highlight_twice(
        self, client: AsyncClient, owner: ActingUser, auth_headers: HeaderFactory, test_document
    ):
        created = await client.post(
            "/api/v1/actions/saveHighlight",
            json={"documentId": test_document.id, "content": "Inertia", "highlightType": "definition"},
            headers=auth_headers(owner),
        )
        payload = {"id": created.json()["highlight"]["id"], "documentId": test_document.id}

        first = await client.post("/api/v1/actions/deleteHighlight", json=payload, headers=auth_headers(owner))
        second = await client.post("/api/v1/actions/deleteHighlight", json=payload, headers=auth_headers(owner))

        assert first.status_code == 200
        assert first.json()["highlight"]["highlightType"] == "definition"
        assert second.status_code == 404
        assert second.json() == {"code": "NOT_FOUND", "detail": "Highlight not found."}
