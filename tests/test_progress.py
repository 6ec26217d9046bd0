"""Tests for progress logging and the progress dashboard."""

from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest
from dependency_injector import providers
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from mindweave import models
from mindweave.config import get_settings
from mindweave.core import container
from mindweave.infrastructure.mindmaps.repositories.node_repository import NodeRepository
from tests.conftest import auth_headers, create_test_node, create_test_source


def log_entry(
    db_session: Session,
    user: models.User,
    node: models.Node,
    status: str,
    minutes: int,
    logged_at: datetime,
) -> models.ProgressEntry:
    entry = models.ProgressEntry(
        user_id=user.id,
        node_id=node.id,
        status=status,
        time_spent_minutes=minutes,
        logged_at=logged_at,
    )
    db_session.add(entry)
    db_session.commit()
    return entry


class TestLogProgress:
    def test_log_progress_updates_status_badge(
        self,
        client: TestClient,
        db_session: Session,
        headers: dict[str, str],
        test_user: models.User,
        test_node: models.Node,
    ) -> None:
        response = client.post(
            "/api/v1/progress/log",
            json={"nodeId": test_node.id, "timeSpentMinutes": 25, "status": "in_progress"},
            headers=headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["message"] == "Progress logged successfully."
        assert body["data"]["nodeId"] == test_node.id
        assert body["data"]["userId"] == test_user.id
        assert body["data"]["timeSpentMinutes"] == 25
        assert body["data"]["status"] == "in_progress"

        db_session.expire_all()
        assert db_session.get(models.Node, test_node.id).status_badge == "in_progress"
        assert db_session.query(models.ProgressEntry).count() == 1

    def test_invalid_status_is_400(
        self,
        client: TestClient,
        db_session: Session,
        headers: dict[str, str],
        test_node: models.Node,
    ) -> None:
        response = client.post(
            "/api/v1/progress/log",
            json={"nodeId": test_node.id, "timeSpentMinutes": 5, "status": "done"},
            headers=headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert db_session.query(models.ProgressEntry).count() == 0

    def test_negative_minutes_is_400(
        self, client: TestClient, headers: dict[str, str], test_node: models.Node
    ) -> None:
        response = client.post(
            "/api/v1/progress/log",
            json={"nodeId": test_node.id, "timeSpentMinutes": -5, "status": "completed"},
            headers=headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_missing_fields_is_400(self, client: TestClient, headers: dict[str, str]) -> None:
        response = client.post(
            "/api/v1/progress/log", json={"status": "completed"}, headers=headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_node_is_404(self, client: TestClient, headers: dict[str, str]) -> None:
        response = client.post(
            "/api/v1/progress/log",
            json={"nodeId": 999999, "timeSpentMinutes": 5, "status": "completed"},
            headers=headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_other_users_node_is_403(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        other_user: models.User,
    ) -> None:
        node = create_test_node(db_session, create_test_source(db_session, other_user))

        response = client.post(
            "/api/v1/progress/log",
            json={"nodeId": node.id, "timeSpentMinutes": 5, "status": "completed"},
            headers=auth_headers(test_user.id),
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert db_session.query(models.ProgressEntry).count() == 0

    def test_entry_and_badge_are_written_together(
        self,
        client: TestClient,
        db_session: Session,
        headers: dict[str, str],
        test_node: models.Node,
    ) -> None:
        """If the badge update fails, the entry is not kept either."""
        with patch.object(
            NodeRepository, "update_status_badge", side_effect=RuntimeError("disk full")
        ):
            response = client.post(
                "/api/v1/progress/log",
                json={"nodeId": test_node.id, "timeSpentMinutes": 10, "status": "completed"},
                headers=headers,
            )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"success": False, "message": "Failed to log progress."}

        db_session.expire_all()
        assert db_session.query(models.ProgressEntry).count() == 0
        assert db_session.get(models.Node, test_node.id).status_badge is None


class TestGetProgress:
    def test_latest_status_per_node_wins(
        self,
        client: TestClient,
        db_session: Session,
        headers: dict[str, str],
        test_user: models.User,
        test_source: models.Source,
    ) -> None:
        node_a = create_test_node(db_session, test_source, title="A")
        node_b = create_test_node(db_session, test_source, title="B")
        create_test_node(db_session, test_source, title="C")

        now = datetime.now(UTC)
        log_entry(db_session, test_user, node_a, "in_progress", 30, now - timedelta(hours=3))
        log_entry(db_session, test_user, node_b, "in_progress", 20, now - timedelta(hours=2))
        log_entry(db_session, test_user, node_a, "completed", 40, now - timedelta(hours=1))

        response = client.get("/api/v1/progress", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["chartData"] == {"completed": 1, "in_progress": 1, "not_started": 1}
        assert data["totals"] == {"totalMinutes": 90, "totalHours": 1.5, "totalNodes": 3}
        assert [entry["status"] for entry in data["timeline"]] == [
            "completed",
            "in_progress",
            "in_progress",
        ]

    def test_empty_dashboard(self, client: TestClient, headers: dict[str, str]) -> None:
        response = client.get("/api/v1/progress", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["chartData"] == {"completed": 0, "in_progress": 0, "not_started": 0}
        assert data["totals"] == {"totalMinutes": 0, "totalHours": 0.0, "totalNodes": 0}
        assert data["timeline"] == []

    def test_other_users_nodes_are_not_counted(
        self,
        client: TestClient,
        db_session: Session,
        headers: dict[str, str],
        test_node: models.Node,
        other_user: models.User,
    ) -> None:
        create_test_node(db_session, create_test_source(db_session, other_user))

        response = client.get("/api/v1/progress", headers=headers)

        assert response.json()["data"]["totals"]["totalNodes"] == 1

    def test_requires_authentication(self, client: TestClient) -> None:
        response = client.get("/api/v1/progress")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestProgressSourceCeiling:
    @pytest.fixture
    def three_sources_with_progress(
        self, db_session: Session, test_user: models.User
    ) -> list[models.Node]:
        now = datetime.now(UTC)
        nodes = []
        for index, (status_value, minutes) in enumerate(
            [("completed", 10), ("in_progress", 20), ("completed", 30)]
        ):
            source = create_test_source(
                db_session, test_user, origin=f"https://example.com/{index}"
            )
            node = create_test_node(db_session, source, title=f"Node {index}")
            log_entry(
                db_session, test_user, node, status_value, minutes, now - timedelta(hours=index)
            )
            nodes.append(node)
        return nodes

    @staticmethod
    def _with_limit(limit: int) -> providers.Object:
        return providers.Object(
            get_settings().model_copy(update={"PROGRESS_SOURCE_QUERY_LIMIT": limit})
        )

    @pytest.mark.usefixtures("three_sources_with_progress")
    def test_nodes_beyond_the_ceiling_are_not_counted(
        self,
        client: TestClient,
        headers: dict[str, str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with container.settings.override(self._with_limit(2)):
            response = client.get("/api/v1/progress", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["chartData"] == {"completed": 1, "in_progress": 1, "not_started": 0}
        # Time totals still cover entries on the uncounted source
        assert data["totals"] == {"totalMinutes": 60, "totalHours": 1.0, "totalNodes": 2}
        assert len(data["timeline"]) == 3
        assert any("progress_sources_truncated" in record.message for record in caplog.records)

    @pytest.mark.usefixtures("three_sources_with_progress")
    def test_zero_ceiling_counts_every_source(
        self,
        client: TestClient,
        headers: dict[str, str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with container.settings.override(self._with_limit(0)):
            response = client.get("/api/v1/progress", headers=headers)

        data = response.json()["data"]
        assert data["chartData"] == {"completed": 2, "in_progress": 1, "not_started": 0}
        assert data["totals"] == {"totalMinutes": 60, "totalHours": 1.0, "totalNodes": 3}
        assert not any(
            "progress_sources_truncated" in record.message for record in caplog.records
        )
