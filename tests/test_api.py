import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_generator, get_registry
from api.main import create_app
from config import Settings
from llm.generation import GenerationError
from registry.client import LoginResult
from registry.exceptions import AuthError, UpstreamUnavailable


class FakeRegistry:
    def __init__(self, *, login_error=None, scores=None, golfer=None, search_results=None,
                 service_error=None):
        self.calls = []
        self.login_error = login_error
        self.scores = scores or []
        self.golfer = golfer
        self.search_results = search_results or []
        self.service_error = service_error

    async def login(self, identifier, secret):
        self.calls.append(("login", identifier))
        if self.login_error:
            raise self.login_error
        profile = {"ghin": 1234567, "player_name": "Jane Doe", "display": "14.2", "club_name": "Pine Hills"}
        return LoginResult(profile=profile, token="tok", registry_id="1234567")

    async def fetch_scores(self, registry_id, token, limit=20):
        self.calls.append(("fetch_scores", registry_id))
        return self.scores

    async def service_token(self):
        self.calls.append(("service_token",))
        if self.service_error:
            raise self.service_error
        return "svc-tok"

    async def get_golfer(self, registry_id, token):
        self.calls.append(("get_golfer", registry_id))
        return self.golfer

    async def search_golfers(self, last_name, token, first_name=None, limit=10):
        self.calls.append(("search_golfers", first_name, last_name))
        return self.search_results


class FakeGenerator:
    def __init__(self, text="Nice swing. Shame about the rest.", error=None, configured=True):
        self.text = text
        self.error = error
        self.is_configured = configured
        self.calls = []

    def generate(self, system, user, temperature):
        self.calls.append({"system": system, "user": user, "temperature": temperature})
        if self.error:
            raise self.error
        return self.text


def _raw_score(score, differential, hole_details=None):
    return {
        "course_name": "Pine Hills",
        "adjusted_gross_score": score,
        "differential": differential,
        "played_at": "2024-06-01",
        "number_of_holes": 18,
        "hole_details": hole_details or [],
    }


@pytest.fixture
def make_client():
    clients = []

    def _make(registry=None, generator=None):
        app = create_app(Settings(static_dir="__no_static__"))
        if registry is not None:
            app.dependency_overrides[get_registry] = lambda: registry
        if generator is not None:
            app.dependency_overrides[get_generator] = lambda: generator
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


# ================================================================
# /api/ghin
# ================================================================

def test_login_returns_profile_with_reduced_scores(make_client):
    registry = FakeRegistry(scores=[
        _raw_score(95, 18.3, [{"hole_number": 7, "par": 4, "raw_score": 9}]),
    ])
    resp = make_client(registry=registry).post(
        "/api/ghin", json={"email_or_ghin": "jane@example.com", "password": "pw"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["player_name"] == "Jane Doe"
    assert body["recent_scores"][0]["worst_hole"] == {"hole_number": 7, "score": 9, "par": 4, "over": 5}
    assert "hole_details" not in body["recent_scores"][0]
    assert registry.calls == [("login", "jane@example.com"), ("fetch_scores", "1234567")]


def test_login_missing_password_is_400_without_registry_call(make_client):
    registry = FakeRegistry()
    resp = make_client(registry=registry).post("/api/ghin", json={"email_or_ghin": "jane@example.com"})

    assert resp.status_code == 400
    assert "error" in resp.json()
    assert registry.calls == []


def test_login_sanitizes_identifier(make_client):
    registry = FakeRegistry()
    make_client(registry=registry).post(
        "/api/ghin", json={"email_or_ghin": "  <jane@example.com>\n", "password": "pw"},
    )
    assert registry.calls[0] == ("login", "jane@example.com")


def test_login_bad_credentials_is_401(make_client):
    registry = FakeRegistry(login_error=AuthError("Invalid credentials or no golfer found"))
    resp = make_client(registry=registry).post(
        "/api/ghin", json={"email_or_ghin": "jane@example.com", "password": "nope"},
    )
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials or no golfer found"}


def test_login_upstream_down_is_500(make_client):
    registry = FakeRegistry(login_error=UpstreamUnavailable("Failed to connect to GHIN"))
    resp = make_client(registry=registry).post(
        "/api/ghin", json={"email_or_ghin": "jane@example.com", "password": "pw"},
    )
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to connect to GHIN"}


# ================================================================
# /api/lookup
# ================================================================

def test_lookup_short_query_is_400(make_client):
    registry = FakeRegistry()
    resp = make_client(registry=registry).post("/api/lookup", json={"query": " a "})
    assert resp.status_code == 400
    assert registry.calls == []


def test_lookup_by_name(make_client):
    registry = FakeRegistry(search_results=[
        {"ghin": 1, "first_name": "Tiger", "last_name": "Woods", "club_name": "Medalist",
         "handicap_index": "+5.4", "state": "FL"},
    ])
    resp = make_client(registry=registry).post("/api/lookup", json={"query": "Tiger Woods"})

    assert resp.status_code == 200
    assert resp.json() == {"results": [{
        "ghin": "1", "player_name": "Tiger Woods", "club_name": "Medalist",
        "display": "+5.4", "state": "FL",
    }]}
    assert ("search_golfers", "Tiger", "Woods") in registry.calls


def test_lookup_by_name_not_found(make_client):
    resp = make_client(registry=FakeRegistry()).post("/api/lookup", json={"query": "Nobody"})
    assert resp.status_code == 404


def test_lookup_by_ghin_returns_profile(make_client):
    registry = FakeRegistry(
        golfer={"ghin": 7654321, "player_name": "John Smith", "display": "22.0"},
        scores=[_raw_score(104, 28.1)],
    )
    resp = make_client(registry=registry).post("/api/lookup", json={"query": "7654321"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["lookup_mode"] is True
    assert body["recent_scores"][0]["adjusted_gross_score"] == 104
    assert ("fetch_scores", "7654321") in registry.calls


def test_lookup_by_ghin_normalizes_search_record(make_client):
    registry = FakeRegistry(
        golfer={"ghin": 7654321, "first_name": "Tiger", "last_name": "Woods",
                "handicap_index": "12.0", "low_hi": "9.8", "club_name": "Medalist"},
        scores=[_raw_score(90, 13.0)],
    )
    body = make_client(registry=registry).post("/api/lookup", json={"query": "7654321"}).json()

    assert body["player_name"] == "Tiger Woods"
    assert body["display"] == "12.0"
    assert body["low_hi_display"] == "9.8"


def test_lookup_then_roast_keeps_identity(make_client):
    registry = FakeRegistry(
        golfer={"ghin": 7654321, "first_name": "Tiger", "last_name": "Woods",
                "handicap_index": "12.0", "club_name": "Medalist"},
        scores=[_raw_score(90, 13.0), _raw_score(92, 14.0)],
    )
    generator = FakeGenerator()
    client = make_client(registry=registry, generator=generator)

    profile = client.post("/api/lookup", json={"query": "7654321"}).json()
    resp = client.post("/api/roast", json={"golferData": profile, "intensity": "light"})

    assert resp.status_code == 200
    user = generator.calls[0]["user"]
    assert "Golfer: Tiger" in user
    assert "Handicap: 12.0" in user
    # average differential 13.5 is within 2 of a 12.0 index
    assert "Trend:" not in user


def test_lookup_by_ghin_not_found(make_client):
    resp = make_client(registry=FakeRegistry()).post("/api/lookup", json={"query": "7654321"})
    assert resp.status_code == 404


def test_lookup_service_unavailable(make_client):
    registry = FakeRegistry(service_error=UpstreamUnavailable("Lookup service is not configured"))
    resp = make_client(registry=registry).post("/api/lookup", json={"query": "Woods"})
    assert resp.status_code == 500


# ================================================================
# /api/roast
# ================================================================

JANE = {
    "player_name": "Jane Doe",
    "display": "14.2",
    "low_hi_display": "10.1",
    "club_name": "Pine Hills",
    "recent_scores": [],
}


def test_roast_identity_only(make_client):
    generator = FakeGenerator()
    resp = make_client(generator=generator).post(
        "/api/roast", json={"golferData": JANE, "intensity": "light"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"roast": "Nice swing. Shame about the rest."}
    sent = generator.calls[0]
    assert "Jane" in sent["user"] and "14.2" in sent["user"]
    assert "Worst recent round" not in sent["user"]
    assert "Best recent round" not in sent["user"]
    assert "No profanity." in sent["system"]


def test_roast_with_scores(make_client):
    generator = FakeGenerator()
    golfer = dict(JANE, recent_scores=[
        {"course_name": "Pine Hills", "adjusted_gross_score": 80, "differential": 9.0, "number_of_holes": 18},
        {"course_name": "Muni", "adjusted_gross_score": 110, "differential": 31.0, "number_of_holes": 18},
    ])
    resp = make_client(generator=generator).post("/api/roast", json={"golferData": golfer})

    assert resp.status_code == 200
    user = generator.calls[0]["user"]
    assert "Worst recent round: 110 at Muni" in user
    assert "Best recent round: 80 at Pine Hills" in user


def test_roast_without_key_is_fallback(make_client):
    resp = make_client(generator=FakeGenerator(configured=False)).post(
        "/api/roast", json={"golferData": JANE},
    )
    assert resp.status_code == 500
    assert resp.json() == {"error": "API key not configured", "fallback": True}


def test_roast_generation_failure_is_fallback(make_client):
    resp = make_client(generator=FakeGenerator(error=GenerationError("boom"))).post(
        "/api/roast", json={"golferData": JANE},
    )
    assert resp.status_code == 500
    assert resp.json() == {"error": "Roast generation failed", "fallback": True}


def test_roast_rejects_unknown_intensity(make_client):
    resp = make_client(generator=FakeGenerator()).post(
        "/api/roast", json={"golferData": JANE, "intensity": "nuclear"},
    )
    assert resp.status_code == 400


# ================================================================
# Rate limiting
# ================================================================

def test_eleventh_request_in_a_minute_is_429(make_client):
    client = make_client(generator=FakeGenerator())
    statuses = [client.post("/api/roast", json={"golferData": JANE}).status_code for _ in range(11)]

    assert statuses[:10] == [200] * 10
    assert statuses[10] == 429
    assert "error" in client.post("/api/roast", json={"golferData": JANE}).json()


def test_health_not_rate_limited(make_client):
    client = make_client()
    for _ in range(12):
        assert client.get("/api/health").status_code == 200
