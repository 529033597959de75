import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from retro.core.db import get_db
from retro.main import app
from retro.models.base import Base
from retro.models import entities  # noqa: F401
from retro.services import presence


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db

AS_A = {"X-User-Id": "A"}
AS_B = {"X-User-Id": "B"}


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    presence.reset()
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def propose(client):
    def _propose(headers=AS_A, **overrides):
        payload = {
            "name": "New car",
            "period": "Spring 2024",
            "context": "Old car kept breaking down before the winter.",
            "financial_scale": "around 18k",
            "emotional_impact": "stressful for both of us",
        }
        payload.update(overrides)
        response = client.post("/v1/decisions", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _propose


@pytest.fixture
def approved_decision_id(client, propose):
    decision = propose(headers=AS_A)
    response = client.post(f"/v1/decisions/{decision['id']}/approve", headers=AS_B)
    assert response.status_code == 200, response.text
    assert response.json()["status"] == "approved"
    return decision["id"]


@pytest.fixture
def fill_in(client):
    """Writes a complete assessment and responsibility for one party."""

    def _fill_in(decision_id, headers, rating=4, would_do_again=True, risk="Insurance costs"):
        assessment = client.put(
            f"/v1/decisions/{decision_id}/assessments/mine",
            json={
                "rating": rating,
                "would_do_again": would_do_again,
                "biggest_ignored_risk": risk,
                "items": [
                    {"type": "pro", "text": "Reliable commute", "sort_order": 0},
                    {"type": "con", "text": "Monthly payment", "sort_order": 1},
                ],
            },
            headers=headers,
        )
        assert assessment.status_code == 200, assessment.text
        responsibility = client.put(
            f"/v1/decisions/{decision_id}/responsibilities/mine",
            json={"brought_topic": "me", "pushed_execution": "both", "main_burden": "partner"},
            headers=headers,
        )
        assert responsibility.status_code == 200, responsibility.text
        return assessment.json()

    return _fill_in


@pytest.fixture
def revealed_decision_id(client, approved_decision_id, fill_in):
    fill_in(approved_decision_id, AS_A, rating=4)
    fill_in(approved_decision_id, AS_B, rating=2, would_do_again=False)
    for headers in (AS_A, AS_B):
        response = client.post(f"/v1/decisions/{approved_decision_id}/assessments/mine/lock", headers=headers)
        assert response.status_code == 200, response.text
    return approved_decision_id


@pytest.fixture
def file_sessions(tmp_path):
    """Independent sessions on one file-backed database, one per simulated request."""
    file_engine = create_engine(
        f"sqlite:///{tmp_path / 'retro.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=file_engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=file_engine)
    file_engine.dispose()
