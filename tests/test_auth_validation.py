# tests/test_auth_validation.py
import pytest
from fastapi.testclient import TestClient

from product_api.auth import authenticate
from product_api.config import Settings
from product_api.errors import AuthenticationError
from product_api.main import create_app
from product_api.validation import validate_product

API_KEY = "test-secret"
VALID = {"name": "Headphones", "price": 99.99, "category": "audio"}


def fresh_client():
    return TestClient(create_app(Settings(api_key=API_KEY)))


# ---------------------------
# Auth check
# ---------------------------
def test_authenticate_accepts_exact_key():
    assert authenticate(API_KEY, API_KEY) is None


@pytest.mark.parametrize("presented", [None, "", "TEST-SECRET", "test-secret ", "wrong"])
def test_authenticate_rejects(presented):
    with pytest.raises(AuthenticationError) as exc:
        authenticate(presented, API_KEY)
    assert exc.value.message == "Authentication failed. Invalid or missing API key."


# ---------------------------
# Validation rules
# ---------------------------
def test_valid_product_has_no_defects():
    assert validate_product(VALID) == []
    assert validate_product({**VALID, "inStock": False, "description": "wireless"}) == []


def test_all_defects_are_collected_in_order():
    assert validate_product({"name": "ab", "price": -1, "category": ""}) == [
        "Name: required, string, min 3 characters.",
        "Price: required, positive number.",
        "Category: required, string.",
    ]


def test_type_checks():
    defects = validate_product({"name": 123, "price": "10", "category": ["x"], "inStock": "yes"})
    assert defects == [
        "Name: required, string, min 3 characters.",
        "Price: required, positive number.",
        "Category: required, string.",
        "inStock: must be a boolean (true/false) if provided.",
    ]


def test_boolean_price_and_zero_price_rejected():
    assert validate_product({**VALID, "price": True}) == ["Price: required, positive number."]
    assert validate_product({**VALID, "price": 0}) == ["Price: required, positive number."]


def test_null_in_stock_rejected_but_null_description_allowed():
    assert validate_product({**VALID, "inStock": None}) == [
        "inStock: must be a boolean (true/false) if provided."
    ]
    assert validate_product({**VALID, "description": None}) == []
    assert validate_product({**VALID, "description": 5}) == ["Description: must be a string if provided."]


def test_non_object_body_is_validated_as_empty():
    assert len(validate_product([1, 2, 3])) == 3
    assert len(validate_product(None)) == 3


# ---------------------------
# Middleware order over HTTP
# ---------------------------
@pytest.mark.parametrize("headers", [{}, {"x-api-key": "wrong"}])
def test_unauthenticated_writes_leave_store_unchanged(headers):
    client = fresh_client()
    before = client.get("/api/products").json()

    r = client.post("/api/products", json=VALID, headers=headers)
    assert r.status_code == 401
    assert r.json() == {"status": "error", "message": "Authentication failed. Invalid or missing API key."}

    r = client.put("/api/products/1", json=VALID, headers=headers)
    assert r.status_code == 401

    assert client.get("/api/products").json() == before


def test_auth_runs_before_validation():
    client = fresh_client()
    r = client.post("/api/products", json={"name": "x"})
    assert r.status_code == 401
    assert "details" not in r.json()


def test_invalid_create_reports_three_details():
    client = fresh_client()
    r = client.post("/api/products", json={"name": "ab", "price": -1, "category": ""},
                    headers={"x-api-key": API_KEY})
    assert r.status_code == 400
    body = r.json()
    assert body["status"] == "error"
    assert body["message"] == "Product data validation failed."
    assert len(body["details"]) == 3
    assert client.get("/api/products").json()["totalItems"] == 3


def test_empty_body_fails_validation():
    client = fresh_client()
    r = client.post("/api/products", headers={"x-api-key": API_KEY})
    assert r.status_code == 400
    assert len(r.json()["details"]) == 3


def test_validation_runs_before_not_found_on_update():
    client = fresh_client()
    r = client.put("/api/products/404", json={"name": "ab"}, headers={"x-api-key": API_KEY})
    assert r.status_code == 400


def test_non_finite_prices_are_rejected():
    assert validate_product({**VALID, "price": float("inf")}) == ["Price: required, positive number."]
    assert validate_product({**VALID, "price": float("nan")}) == ["Price: required, positive number."]
    assert validate_product({**VALID, "price": 10 ** 400}) == []


@pytest.mark.parametrize("raw_price", [b"1e400", b"NaN", b"Infinity"])
def test_non_finite_price_over_http_is_not_stored(raw_price):
    client = fresh_client()
    body = b'{"name": "Huge", "price": ' + raw_price + b', "category": "x"}'
    r = client.post("/api/products", content=body,
                    headers={"x-api-key": API_KEY, "content-type": "application/json"})
    assert r.status_code == 400
    assert r.json()["details"] == ["Price: required, positive number."]

    r = client.get("/api/products")
    assert r.status_code == 200
    assert r.json()["totalItems"] == 3
