"""Tests for the contact form endpoint."""

from unittest.mock import patch

from techstock.config import settings
from techstock.exceptions import EmailTransportError

CONTACT = {"name": "Dana", "email": "dana@example.com", "message": "Do you ship to Eilat?"}


@patch("techstock.routers.contact.EmailService.send_contact_message")
def test_contact_logged_only_when_email_off(mock_send, auth_client):
    test_client, _ = auth_client

    response = test_client.post("/api/contact", json=CONTACT)

    assert response.status_code == 200
    assert response.json() == {"message": "Message sent successfully!"}
    mock_send.assert_not_called()


@patch("techstock.routers.contact.EmailService.send_contact_message")
def test_contact_forwarded_when_configured(mock_send, auth_client, monkeypatch):
    test_client, _ = auth_client
    monkeypatch.setattr(settings, "sendgrid_api_key", "SG.test-key")
    monkeypatch.setattr(settings, "contact_inbox_address", "owner@techstock.com")

    response = test_client.post("/api/contact", json=CONTACT)

    assert response.status_code == 200
    mock_send.assert_called_once_with("Dana", "dana@example.com", "Do you ship to Eilat?")


@patch("techstock.routers.contact.EmailService.send_contact_message")
def test_contact_transport_failure(mock_send, auth_client, monkeypatch):
    test_client, _ = auth_client
    monkeypatch.setattr(settings, "sendgrid_api_key", "SG.test-key")
    monkeypatch.setattr(settings, "contact_inbox_address", "owner@techstock.com")
    mock_send.side_effect = EmailTransportError()

    response = test_client.post("/api/contact", json=CONTACT)

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to send message. Please try again later."


def test_contact_requires_all_fields(auth_client):
    test_client, _ = auth_client

    response = test_client.post("/api/contact", json={"name": "Dana"})

    assert response.status_code == 400
    fields = {detail["field"] for detail in response.json()["details"]}
    assert fields == {"email", "message"}
