"""Tests for source ingestion and status polling."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from mindweave import models
from mindweave.exceptions import ExtractionError
from tests.conftest import FakeJobQueue, FakeTextExtraction, auth_headers, create_test_source


class TestCreateSource:
    def test_article_url_is_scraped_and_queued(
        self,
        client: TestClient,
        db_session: Session,
        headers: dict[str, str],
        test_user: models.User,
        text_extraction: FakeTextExtraction,
        job_queue: FakeJobQueue,
    ) -> None:
        response = client.post(
            "/api/v1/sources", json={"url": "https://example.com/article"}, headers=headers
        )

        assert response.status_code == status.HTTP_202_ACCEPTED
        body = response.json()
        assert body["message"] == "Source accepted and queued for processing."
        data = body["data"]
        assert data["type"] == "url"
        assert data["status"] == "queued"
        assert data["ownerId"] == test_user.id
        assert data["origin"] == "https://example.com/article"

        assert text_extraction.scraped_urls == ["https://example.com/article"]
        assert text_extraction.transcript_urls == []

        assert len(job_queue.jobs) == 1
        assert job_queue.jobs[0].source_id == data["id"]
        assert job_queue.jobs[0].extracted_text == "Article text about photosynthesis."

        stored = db_session.get(models.Source, data["id"])
        assert stored is not None
        assert stored.status == "queued"

    def test_youtube_url_uses_transcript(
        self,
        client: TestClient,
        headers: dict[str, str],
        text_extraction: FakeTextExtraction,
        job_queue: FakeJobQueue,
    ) -> None:
        response = client.post(
            "/api/v1/sources",
            json={"url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ"},
            headers=headers,
        )

        assert response.status_code == status.HTTP_202_ACCEPTED
        assert response.json()["data"]["type"] == "youtube"
        assert text_extraction.transcript_urls == ["https://www.youtube.com/watch?v=dQw4w9WgXcQ"]
        assert job_queue.jobs[0].extracted_text == "Transcript of the video about cells."

    def test_empty_extracted_text_is_400(
        self,
        client: TestClient,
        db_session: Session,
        headers: dict[str, str],
        text_extraction: FakeTextExtraction,
        job_queue: FakeJobQueue,
    ) -> None:
        text_extraction.page_text = "   "

        response = client.post(
            "/api/v1/sources", json={"url": "https://example.com/blank"}, headers=headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert job_queue.jobs == []
        assert db_session.query(models.Source).count() == 0

    def test_extraction_failure_is_400_with_reason(
        self,
        client: TestClient,
        headers: dict[str, str],
        text_extraction: FakeTextExtraction,
        job_queue: FakeJobQueue,
    ) -> None:
        async def failing_scrape(url: str) -> str:
            raise ExtractionError(url, "server responded with HTTP 404")

        text_extraction.scrape_text = failing_scrape  # type: ignore[method-assign]

        response = client.post(
            "/api/v1/sources", json={"url": "https://example.com/gone"}, headers=headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "HTTP 404" in response.json()["message"]
        assert job_queue.jobs == []

    def test_queue_failure_is_502_and_source_is_marked_failed(
        self,
        client: TestClient,
        db_session: Session,
        headers: dict[str, str],
        job_queue: FakeJobQueue,
    ) -> None:
        job_queue.error = ConnectionError("Error 111 connecting to redis:6379")

        response = client.post(
            "/api/v1/sources", json={"url": "https://example.com/article"}, headers=headers
        )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json() == {
            "success": False,
            "message": "The processing queue is currently unavailable.",
        }

        db_session.expire_all()
        stored = db_session.query(models.Source).one()
        assert stored.status == "failed"
        assert stored.error == "The processing queue is currently unavailable."

    def test_missing_url_and_file_is_400(
self, client: TestClient, headers: dict[str, str]) -> None:
        response = client.post("/api/v1/sources", json={}, headers=headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "A 'url' or 'file' must be provided."

    def test_file_upload_is_501(self, client: TestClient, headers: dict[str, str]) -> None:
        response = client.post("/api/v1/sources", json={"file": "notes.pdf"}, headers=headers)

        assert response.status_code == status.HTTP_501_NOT_IMPLEMENTED

    def test_requires_authentication(self, client: TestClient) -> None:
        response = client.post("/api/v1/sources", json={"url": "https://example.com"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestGetSources:
    def test_list_returns_only_own_sources_newest_first(
        self,
        client: TestClient,
        db_session: Session,
        headers: dict[str, str],
        test_user: models.User,
        other_user: models.User,
    ) -> None:
        first = create_test_source(db_session, test_user, origin="https://example.com/1")
        second = create_test_source(db_session, test_user, origin="https://example.com/2")
        create_test_source(db_session, other_user, origin="https://example.com/theirs")

        response = client.get("/api/v1/sources", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        ids = [source["id"] for source in response.json()["data"]]
        assert ids == [second.id, first.id]

    def test_get_source_reports_status_and_error(
        self,
        client: TestClient,
        db_session: Session,
        headers: dict[str, str],
        test_user: models.User,
    ) -> None:
        source = create_test_source(db_session, test_user, status="failed")
        source.error = "The AI model service is currently unavailable."
        db_session.commit()

        response = client.get(f"/api/v1/sources/{source.id}", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["status"] == "failed"
        assert data["error"] == "The AI model service is currently unavailable."

    def test_get_other_users_source_is_403(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        other_user: models.User,
    ) -> None:
        source = create_test_source(db_session, other_user)

        response = client.get(f"/api/v1/sources/{source.id}", headers=auth_headers(test_user.id))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_get_missing_source_is_404(self, client: TestClient, headers: dict[str, str]) -> None:
        response = client.get("/api/v1/sources/999999", headers=headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
