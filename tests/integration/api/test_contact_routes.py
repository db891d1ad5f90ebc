from practicals.api.deps import get_dev_email_adapter

VALID = {"name": "Priya", "email": "priya@example.com", "message": "Hello, I like your work!"}


def test_send_contact_message(client):
    resp = client.post("/api/contact", json=VALID)
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Thanks! Your message has been sent."
    assert body["previewId"].startswith("dev-")

    sent = get_dev_email_adapter().get_last_email()
    assert sent is not None
    assert sent.recipient == "owner@example.com"
    assert sent.subject == "New message from Priya"
    assert sent.reply_to == "priya@example.com"
    assert "site@example.com" in sent.sender


def test_contact_message_is_escaped(client):
    client.post("/api/contact", json={**VALID, "message": "<script>alert(1)</script>"})
    sent = get_dev_email_adapter().get_last_email()
    assert "<script>" not in sent.body_html
    assert "&lt;script&gt;" in sent.body_html


def test_contact_validation_errors(client):
    resp = client.post("/api/contact", json={"name": "P", "email": "nope", "message": "short"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert set(body["errors"]) == {"name", "email", "message"}
    assert get_dev_email_adapter().email_count == 0


def test_contact_is_rate_limited(client):
    for _ in range(5):
        assert client.post("/api/contact", json=VALID).status_code == 200

    resp = client.post("/api/contact", json=VALID)
    assert resp.status_code == 429
    assert resp.json()["message"] == "Too many messages. Please try again later."
