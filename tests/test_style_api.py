from fastapi.testclient import TestClient

from api.app import app


client = TestClient(app)

PAYLOAD = {
    "natal_placements": [
        {"planet": "Sun", "sign": "Leo"},
        {"planet": "Venus", "sign": "Taurus"},
        {"planet": "Moon", "sign": "Pisces"},
    ],
    "natal_tokens": [{"name": "elegant", "category": "structure", "weight": 1.5}],
    "transit_aspects": [
        {"transit_planet": "Moon", "natal_planet": "Venus", "aspect_type": "Trine", "orb": 1.2, "applying": True},
        {"transit_planet": "Saturn", "natal_planet": "Sun", "aspect_type": "Square", "orb": 3.5},
    ],
    "weather": {"temperature": 18.5, "condition": "cloudy"},
    "lunar_phase": 182.0,
    "identity": "user-123",
    "date": "2025-03-14",
}


def test_health():
    r = client.get("/__health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_daily_style_shape():
    r = client.post("/v1/style/daily", json=PAYLOAD)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["narrative"]
    assert sum(body["energy_breakdown"].values()) == 21
    assert set(body["energy_breakdown"]) == {"classic", "playful", "romantic", "utility", "drama", "edge"}
    assert 0 <= body["brightness"] <= 100
    assert 0 <= body["vibrancy"] <= 100
    assert body["weather_condition"] == "cloudy"


def test_daily_style_is_repeatable():
    first = client.post("/v1/style/daily", json=PAYLOAD).json()
    second = client.post("/v1/style/daily", json=PAYLOAD).json()
    assert first == second


def test_empty_request_uses_defaults():
    r = client.post("/v1/style/daily", json={"date": "2025-03-14"})
    assert r.status_code == 200
    assert sum(r.json()["energy_breakdown"].values()) == 21


def test_custom_fractions_override_preset():
    payload = dict(PAYLOAD, weighting={"preset": "blueprint", "fractions": {"weather": 0.5}})
    r = client.post("/v1/style/daily", json=payload)
    assert r.status_code == 200


def test_negative_token_weight_is_unprocessable():
    payload = dict(PAYLOAD, natal_tokens=[{"name": "bold", "category": "color", "weight": -1}])
    assert client.post("/v1/style/daily", json=payload).status_code == 422


def test_unknown_category_is_unprocessable():
    payload = dict(PAYLOAD, natal_tokens=[{"name": "bold", "category": "vibe"}])
    assert client.post("/v1/style/daily", json=payload).status_code == 422


def test_unknown_preset_is_bad_request():
    payload = dict(PAYLOAD, weighting={"preset": "horoscope"})
    r = client.post("/v1/style/daily", json=payload)
    assert r.status_code == 400
    assert "Unknown weighting preset" in r.json()["detail"]


def test_negative_fraction_is_bad_request():
    payload = dict(PAYLOAD, weighting={"fractions": {"natal": -0.5}})
    assert client.post("/v1/style/daily", json=payload).status_code == 400


def test_presets_listing():
    r = client.get("/v1/style/presets")
    assert r.status_code == 200
    body = r.json()
    assert body["default"] == "daily_fit"
    assert set(body["presets"]) == {"daily_fit", "blueprint", "legacy"}
    assert body["presets"]["blueprint"]["temporal"] == 0.0
