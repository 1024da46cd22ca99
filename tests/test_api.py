import pytest
from fastapi.testclient import TestClient

from main import app

Q = 998244353


@pytest.fixture
def client():
    return TestClient(app)


def test_list_moduli(client):
    res = client.get("/moduli")
    assert res.status_code == 200
    moduli = {m["modulus"]: m["primitive_root"] for m in res.json()["moduli"]}
    assert moduli[Q] == 3
    assert len(moduli) == 6


def test_convolve(client):
    res = client.post("/convolve", json={"f": [0, 1, 2, 3, 4], "g": [0, 1, 2, 4, 8]})
    assert res.status_code == 200
    assert res.json() == {"modulus": Q, "result": [0, 0, 1, 4, 11, 26, 36, 40, 32, 0, 0]}


def test_convolve_other_modulus(client):
    res = client.post("/convolve", json={"f": [-1], "g": [1], "modulus": 469762049})
    assert res.json()["result"] == [469762048, 0, 0]


def test_unsupported_modulus(client):
    res = client.post("/convolve", json={"f": [1], "g": [1], "modulus": 7})
    assert res.status_code == 422


@pytest.mark.parametrize("operation, coeffs, expected", [
    ("inverse", [5, 4, 3, 2, 1], [598946612, 718735934, 862483121, 635682004, 163871793]),
    ("exp", [0, 1, 2, 3, 4], [1, 1, 499122179, 166374064, 291154613]),
    ("log", [1, 1, 499122179, 166374064, 291154613], [0, 1, 2, 3, 4]),
])
def test_series_operations(client, operation, coeffs, expected):
    res = client.post(f"/fps/{operation}", json={"coeffs": coeffs})
    assert res.status_code == 200
    assert res.json()["result"] == expected


def test_series_degree(client):
    res = client.post("/fps/inverse", json={"coeffs": [1, 1], "degree": 4})
    assert res.json()["result"] == [1, Q - 1, 1, Q - 1]


def test_series_precondition_is_bad_request(client):
    res = client.post("/fps/log", json={"coeffs": [2, 1]})
    assert res.status_code == 400


def test_unknown_operation(client):
    res = client.post("/fps/sqrt", json={"coeffs": [1]})
    assert res.status_code == 404


def test_pow(client):
    res = client.post("/fps/pow", json={"coeffs": [1, 1], "exponent": 3, "degree": 5})
    assert res.status_code == 200
    assert res.json()["result"] == [1, 3, 3, 1, 0]


def test_pow_negative_exponent(client):
    res = client.post("/fps/pow", json={"coeffs": [1, 1], "exponent": -1})
    assert res.status_code == 422
