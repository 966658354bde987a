from gradewise.schema.base import BaseResponse

from conftest import SUGGESTIONS_TEXT, request_body

SCENARIO_A = request_body((30, 30, 40), (80, 90, 70))


def test_health(api_client):
    response = api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_check_weights_valid(api_client):
    response = api_client.post("/grades/weights", json=SCENARIO_A)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] is True
    assert body["data"] == {
        "total_weight": 100,
        "required_total": 100,
        "is_valid": True,
    }


def test_check_weights_partial_form(api_client):
    response = api_client.post(
        "/grades/weights", json={"homework": {"weight": 25}}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["data"]["total_weight"] == 25
    assert body["data"]["is_valid"] is False
    assert body["message"] == "Total must be 100% to calculate"


def test_calculate_grade(api_client):
    response = api_client.post("/grades/", json=SCENARIO_A)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["display_grade"] == "79.0"
    assert data["label"] == "Good"
    assert data["components"]["final_exam"] == {"weight": 40, "score": 70}


def test_calculate_grade_weight_mismatch(api_client):
    response = api_client.post(
        "/grades/", json=request_body((30, 30, 30), (80, 90, 70))
    )

    assert response.status_code == 422
    body = response.json()
    assert body["status"] is False
    assert body["message"] == (
        "The total weight must be exactly 100%. Current total: 90%."
    )
    assert body["error"]["type"] == "weight_sum"
    assert body["error"]["total_weight"] == 90


def test_out_of_range_input_rejected(api_client):
    response = api_client.post(
        "/grades/", json={"homework": {"weight": 100, "score": 101}}
    )

    assert response.status_code == 422
    body = response.json()
    assert body["status"] is False
    assert body["error"]["type"] == "validation"


def test_submit_returns_grade_and_suggestions(api_client):
    response = api_client.post("/grades/submit", json=SCENARIO_A)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] is True
    assert body["data"]["state"] == "done"
    assert body["data"]["grade"]["label"] == "Good"
    assert body["data"]["suggestions"] == SUGGESTIONS_TEXT


def test_submit_weight_mismatch(api_client):
    response = api_client.post(
        "/grades/submit", json=request_body((30, 30, 30), (80, 90, 70))
    )

    assert response.status_code == 422
    assert response.json()["error"]["total_weight"] == 90


def test_submit_suggestion_failure_keeps_grade(failing_api_client):
    response = failing_api_client.post("/grades/submit", json=SCENARIO_A)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] is False
    assert body["message"] == "Could not fetch suggestions. Please try again."
    assert body["error"]["type"] == "suggestion_fetch_failed"
    assert body["data"]["grade"]["display_grade"] == "79.0"
    assert body["data"]["grade"]["label"] == "Good"
    assert body["data"]["suggestions"] is None


def test_unknown_route_uses_envelope(api_client):
    response = api_client.get("/nope")

    assert response.status_code == 404
    assert response.json()["status"] is False


def test_submit_without_model_credentials_keeps_grade(unconfigured_api_client):
    response = unconfigured_api_client.post("/grades/submit", json=SCENARIO_A)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] is False
    assert body["error"]["type"] == "suggestion_fetch_failed"
    assert body["data"]["grade"]["label"] == "Good"
    assert body["data"]["suggestions"] is None


def test_failure_envelope():
    body = BaseResponse.failure("Nope", "http", status_code=418)

    assert body.status is False
    assert body.data is None
    assert body.error == {"type": "http", "status_code": 418}
