from unittest.mock import AsyncMock, MagicMock, patch

from travelai.dependencies import verify_id_token_dependency
from travelai.main import app
from travelai.models.destination import TravelPreferences
from travelai.models.user import UserData
from travelai.services.auth_service import AuthError, get_auth_service
from travelai.services.chat_service import APOLOGY, ChatService, get_chat_service
from travelai.services.itinerary_service import ItineraryService, get_itinerary_service
from travelai.services.recommendation_service import RecommendationService, get_recommendation_service

from tests.mock_llm_service import SAMPLE_DESTINATIONS, MockLLMService, failure, success

KYOTO = {"name": "Kyoto", "country": "Japan", "highlights": ["Temples", "Gardens", "Tea"]}
GOA = {"name": "Goa", "country": "India", "highlights": ["Beaches"]}


def test_health_and_root(client):
    assert client.get("/health").json()["status"] == "ok"
    assert client.get("/").json()["docs_url"] == "/docs"


def test_recommend_then_filter(client, store):
    app.dependency_overrides[get_recommendation_service] = lambda: RecommendationService(
        llm_service=MockLLMService(success(SAMPLE_DESTINATIONS)))
    with patch("travelai.services.recommendation_service.enrich_destinations",
               new=AsyncMock(side_effect=lambda dests: dests)):
        response = client.post("/api/v1/destinations/recommend", json={"budget": "100000", "tripDuration": "4"})

    assert response.status_code == 200
    assert [d["name"] for d in response.json()["destinations"]] == ["Kyoto", "Goa"]
    assert store.state.preferences.budget == "100000"

    listing = client.get("/api/v1/destinations").json()
    assert [d["name"] for d in listing["trending"]] == ["Kyoto"]
    assert [d["name"] for d in listing["regular"]] == ["Goa"]

    filtered = client.get("/api/v1/destinations", params={"filter": "Budget Friendly"}).json()
    assert filtered["trending"] == []
    assert [d["name"] for d in filtered["regular"]] == ["Goa"]

    assert client.get("/api/v1/destinations", params={"filter": "Cheap"}).status_code == 400


def test_compare_flow(client):
    assert client.post("/api/v1/compare", json=KYOTO).status_code == 200
    assert client.get("/api/v1/compare").status_code == 400

    client.post("/api/v1/compare", json=GOA)
    listing = client.post("/api/v1/compare", json=GOA).json()
    assert len(listing["compareList"]) == 2

    body = client.get("/api/v1/compare").json()
    assert body["summary"] == {"bestBudget": "Goa", "mostActivities": "Kyoto"}
    kyoto = body["entries"][0]
    assert kyoto["weather"]["weather"] == "Pleasant"
    assert len(kyoto["prosCons"]["pros"]) == 3
    assert kyoto["bestFor"] == ["🏯 Culture", "🍣 Cuisine", "🚅 Technology"]

    remaining = client.delete("/api/v1/compare", params={"name": "Kyoto", "country": "Japan"}).json()
    assert [d["name"] for d in remaining["compareList"]] == ["Goa"]


def test_store_endpoints(client):
    client.post("/api/v1/compare", json=GOA)
    assert client.get("/api/v1/store").json()["compareList"][0]["name"] == "Goa"
    assert client.delete("/api/v1/store").json()["compareList"] == []


def test_itinerary_fallback(client):
    app.dependency_overrides[get_itinerary_service] = lambda: ItineraryService(llm_service=MockLLMService(failure()))
    body = client.post("/api/v1/itinerary", json={"destination": "Porto", "duration": "2"}).json()
    assert body["fallbackUsed"] is True
    assert [d["day"] for d in body["itinerary"]] == [1, 2]


def test_itinerary_requires_destination(client):
    assert client.post("/api/v1/itinerary", json={"destination": ""}).status_code == 422


def test_chat(client):
    app.dependency_overrides[get_chat_service] = lambda: ChatService(llm_service=MockLLMService(failure()))
    response = client.post("/api/v1/chat", json={"message": "Hello", "history": []})
    assert "X-Request-Timeout" not in response.headers
    body = response.json()
    assert body["reply"] == APOLOGY
    assert [m["sender"] for m in body["messages"]] == ["user", "assistant"]


def test_pexels_proxy(client):
    with patch("travelai.routers.images.search_photos", return_value={"photos": []}) as search:
        assert client.get("/api/pexels", params={"query": "Goa"}).json() == {"photos": []}
    search.assert_called_once_with("Goa")


def test_signup_validation(client):
    app.dependency_overrides[get_auth_service] = lambda: MagicMock()
    response = client.post("/api/v1/auth/signup", json={
        "firstName": "Ada", "lastName": "L", "email": "ada@example.com",
        "password": "secret1", "confirmPassword": "secret2"})
    assert response.status_code == 422
    assert "Passwords do not match" in response.text


def test_login_error_message(client):
    service = MagicMock()
    service.login.side_effect = AuthError("Incorrect password. Please try again.", status_code=401)
    app.dependency_overrides[get_auth_service] = lambda: service

    response = client.post("/api/v1/auth/login", json={"email": "ada@example.com", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Incorrect password. Please try again."


def test_profile_requires_token(client):
    assert client.get("/api/v1/auth/profile").status_code == 401


def test_profile_with_token(client):
    service = MagicMock()
    service.get_profile.return_value = UserData(uid="u1", email="ada@example.com", displayName="Ada L")
    app.dependency_overrides[get_auth_service] = lambda: service
    app.dependency_overrides[verify_id_token_dependency] = lambda: {"uid": "u1"}

    body = client.get("/api/v1/auth/profile").json()
    assert body["user"]["displayName"] == "Ada L"
    service.get_profile.assert_called_once_with("u1")


def test_compare_with_non_finite_trip_duration(client, store):
    store.set_preferences(TravelPreferences(tripDuration="inf", budget="1e999"))
    client.post("/api/v1/compare", json=KYOTO)
    client.post("/api/v1/compare", json=GOA)

    response = client.get("/api/v1/compare")
    assert response.status_code == 200
    assert len(response.json()["entries"]) == 2
