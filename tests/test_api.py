"""
HTTP API tests - packaging endpoints, PDF download, /api/chat.

The recommendation client is replaced through dependency_overrides;
nothing here talks to a provider.
"""

from unittest.mock import MagicMock

from packbot.main import app
from packbot.pdf_generator import generate_packaging_pdf
from packbot.recommender import RecommendationError
from packbot.routers.chat import get_client
from packbot import compute_packaging


def _override_client(generate):
    fake = MagicMock()
    fake.generate.side_effect = generate
    app.dependency_overrides[get_client] = lambda: fake
    return fake


# ============================================================
# Health + intake
# ============================================================

def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_steps_endpoint(client):
    response = client.get("/api/packaging/steps")
    assert response.status_code == 200
    steps = response.json()["steps"]
    assert [s["step"] for s in steps] == ["dimensions", "weight", "fragility", "quantity", "complete"]


def test_validate_endpoint(client):
    ok = client.post("/api/packaging/validate", json={"step": "fragility", "value": "4"})
    assert ok.status_code == 200
    assert ok.json() == {"valid": True, "error": None, "next_step": "quantity"}

    bad = client.post("/api/packaging/validate", json={"step": "fragility", "value": "9"})
    assert bad.json()["valid"] is False
    assert bad.json()["error"] == "Enter 1-5"


def test_validate_unknown_step_is_400(client):
    response = client.post("/api/packaging/validate", json={"step": "colour", "value": "red"})
    assert response.status_code == 400


# ============================================================
# Calculate
# ============================================================

def test_calculate_returns_product_and_result(client, raw_input):
    response = client.post("/api/packaging/calculate", json=raw_input)
    assert response.status_code == 200
    data = response.json()
    assert data["product"]["fragility_level"] == 3
    assert data["result"]["box_size"] == "13.6x8.6x6.6"
    assert data["result"]["discount_pct"] == 12
    assert data["result"]["total_cost"] == 215.0


def test_calculate_metric_input(client):
    response = client.post("/api/packaging/calculate", json={
        "dimensions": "25x12x8 cm", "weight": "2kg", "fragility": "1", "quantity": "2499",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["product"]["length"] == 9.8
    assert data["product"]["weight"] == 4.4
    assert data["result"]["discount_pct"] == 30
    assert data["result"]["discount_tier"] == 1000


def test_calculate_rejects_invalid_input(client, raw_input):
    raw_input["dimensions"] = "10x5"
    response = client.post("/api/packaging/calculate", json=raw_input)
    assert response.status_code == 400
    assert "Invalid input" in response.json()["detail"]


def test_calculate_rejects_missing_field(client):
    response = client.post("/api/packaging/calculate", json={"dimensions": "10x5x3"})
    assert response.status_code == 400


def test_oversized_numbers_are_400_not_500(client, raw_input):
    raw_input["dimensions"] = "1" + "0" * 28 + "x5x3"
    response = client.post("/api/packaging/calculate", json=raw_input)
    assert response.status_code == 400

    response = client.post(
        "/api/packaging/validate", json={"step": "dimensions", "value": raw_input["dimensions"]}
    )
    assert response.status_code == 200
    assert response.json()["valid"] is False


# ============================================================
# PDF
# ============================================================

def test_pdf_endpoint_returns_pdf(client, raw_input):
    response = client.post("/api/packaging/pdf", json=raw_input)
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content[:5] == b"%PDF-"


def test_pdf_with_recommendation_text(product):
    result = compute_packaging(product)
    pdf_bytes = generate_packaging_pdf(product, result, recommendation="Box: 13.6 x 8.6 x 6.6 — double wall")
    assert isinstance(pdf_bytes, bytes)
    assert pdf_bytes.startswith(b"%PDF-")


# ============================================================
# /api/chat
# ============================================================

def test_chat_returns_suggestion(client, raw_input):
    fake = _override_client(lambda prompt: "PACKAGING RECOMMENDATION ...")
    response = client.post("/api/chat", json=raw_input)
    assert response.status_code == 200
    assert response.json() == {"suggestion": "PACKAGING RECOMMENDATION ..."}

    prompt = fake.generate.call_args[0][0]
    assert "Recommended Box Size: 13.6x8.6x6.6" in prompt


def test_chat_invalid_input_never_calls_provider(client, raw_input):
    fake = _override_client(lambda prompt: "unused")
    raw_input["quantity"] = "0"
    response = client.post("/api/chat", json=raw_input)
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid input"
    fake.generate.assert_not_called()


def test_chat_provider_error_keeps_status(client, raw_input):
    def fail(prompt):
        raise RecommendationError("Rate limit exceeded", status_code=429)

    _override_client(fail)
    response = client.post("/api/chat", json=raw_input)
    assert response.status_code == 429
    assert response.json()["detail"] == "Rate limit exceeded"


def test_chat_only_accepts_post(client):
    assert client.get("/api/chat").status_code == 405
