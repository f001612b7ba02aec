"""
Tests for POST /interested
"""

import asyncio
import time
import uuid

import httpx
import pytest

from main import app
from rsvp.models import InterestedPerson
from rsvp.services.repositories import EventRepo

@pytest.fixture
def events(db_session):
    """Two events to register interest in"""
    return [
        EventRepo.create(
            db_session,
            event_uuid=str(uuid.uuid4()),
            title=title,
            link="https://example.com",
            date_time="Sunday",
            description="Details",
        )
        for title in ("Picnic", "Quiz")
    ]

def persons(db_session):
    return db_session.query(InterestedPerson).order_by(InterestedPerson.id).all()

def test_register_single_event(client, db_session, mailgun, events):
    event = events[0]
    response = client.post("/interested", data={"name": "Ada", "event_uuid": event.uuid})
    
    assert response.status_code == 303
    assert response.headers["location"] == f"/event/{event.uuid}"
    
    rows = persons(db_session)
    assert len(rows) == 1
    assert rows[0].event_id == event.id
    assert rows[0].name == "Ada"
    assert rows[0].displayed is False
    
    assert len(mailgun.requests) == 1

def test_notification_email(client, mailgun, events):
    event = events[0]
    client.post("/interested", data={"name": "Ada", "event_uuid": event.uuid})
    
    request = mailgun.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.mailgun.net/v3/events.example.com/messages"
    assert request.headers["authorization"].startswith("Basic ")
    
    form = mailgun.sent_forms()[0]
    assert form["from"] == "Event RSVP <rsvp@events.example.com>"
    assert form["to"] == "organiser@example.com"
    assert form["subject"] == "Someone is interested in Picnic"
    assert form["text"] == f"Ada is interested in Picnic: {event.uuid}"

def test_show_name_true_lists_name(client, events):
    event = events[0]
    client.post("/interested", data={"name": "Ada", "show_name": "true", "event_uuid": event.uuid})
    
    response = client.get(f"/event/{event.uuid}")
    assert "<li>Ada</li>" in response.text

@pytest.mark.parametrize("show_name", ["on", "True", "1", ""])
def test_show_name_other_values_count_anonymously(client, db_session, events, show_name):
    event = events[0]
    client.post("/interested", data={"name": "Ada", "show_name": show_name, "event_uuid": event.uuid})
    
    assert persons(db_session)[0].displayed is False
    response = client.get(f"/event/{event.uuid}")
    assert "<li>Ada</li>" not in response.text
    assert "1 person" in response.text

def test_register_multiple_events_with_checkboxes(client, db_session, mailgun, events):
    first, second = events
    response = client.post("/interested", data={
        "name": "Ada",
        f"event-{first.uuid}": "true",
        f"event-{second.uuid}": "true",
    })
    
    assert response.status_code == 303
    assert response.headers["location"] == f"/events/{first.uuid},{second.uuid}"
    assert [row.event_id for row in persons(db_session)] == [first.id, second.id]
    assert len(mailgun.requests) == 2

def test_unchecked_checkboxes_are_ignored(client, db_session, events):
    first, second = events
    response = client.post("/interested", data={
        "name": "Ada",
        f"event-{first.uuid}": "true",
        f"event-{second.uuid}": "false",
    })
    
    assert response.headers["location"] == f"/event/{first.uuid}"
    assert len(persons(db_session)) == 1

def test_missing_name_is_400(client, db_session, mailgun, events):
    response = client.post("/interested", data={"event_uuid": events[0].uuid})
    
    assert response.status_code == 400
    assert response.text == "Error: Missing field: name"
    assert persons(db_session) == []
    assert mailgun.requests == []

def test_missing_event_is_400(client):
    response = client.post("/interested", data={"name": "Ada"})
    
    assert response.status_code == 400
    assert response.text == "Error: Missing field: event_uuid"

def test_unknown_event_is_404(client, db_session, mailgun, events):
    response = client.post("/interested", data={"name": "Ada", "event_uuid": str(uuid.uuid4())})
    
    assert response.status_code == 404
    assert persons(db_session) == []
    assert mailgun.requests == []

def test_malformed_event_uuid_is_400(client):
    response = client.post("/interested", data={"name": "Ada", "event_uuid": "nope"})

    assert response.status_code == 400

def test_mail_failure_is_500(client, db_session, mailgun, events):
    mailgun.status_code = 502
    response = client.post("/interested", data={"name": "Ada", "event_uuid": events[0].uuid})
    
    assert response.status_code == 500
    assert response.text == "Error: Error occurred sending email"

def test_batch_failure_keeps_earlier_rows(client, db_session, mailgun, events):
    first = events[0]
    missing = uuid.uuid4()
    response = client.post("/interested", data={
        "name": "Ada",
        f"event-{first.uuid}": "true",
        f"event-{missing}": "true",
    })
    
    assert response.status_code == 404
    rows = persons(db_session)
    assert len(rows) == 1
    assert rows[0].event_id == first.id
    assert len(mailgun.requests) == 1

def test_same_event_in_different_case_registers_once(client, db_session, mailgun, events):
    event = events[0]
    response = client.post("/interested", data={
        "name": "Ada",
        "event_uuid": event.uuid.upper(),
        f"event-{event.uuid}": "true",
    })
    
    assert response.status_code == 303
    assert response.headers["location"] == f"/event/{event.uuid}"
    assert len(persons(db_session)) == 1
    assert len(mailgun.requests) == 1

def test_mail_in_flight_does_not_block_other_requests(client, mailgun, events):
    mailgun.delay = 1.0
    
    async def scenario():
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
            registration = asyncio.create_task(
                http.post("/interested", data={"name": "Ada", "event_uuid": events[0].uuid})
            )
            await asyncio.sleep(0.2)
            started = time.perf_counter()
            health = await http.get("/health")
            elapsed = time.perf_counter() - started
            return await registration, health, elapsed
    
    registration, health, elapsed = asyncio.run(scenario())
    
    assert health.status_code == 200
    assert elapsed < 0.5
    assert registration.status_code == 303
    assert len(mailgun.requests) == 1
