"""Integration tests for the main application."""

import pytest
from fastapi.testclient import TestClient

from src.main import app

client = TestClient(app)

CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def assert_cors_headers(response):
    for name, value in CORS_HEADERS.items():
        assert response.headers[name] == value


def test_health_check():
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.content == b'{"status":"healthy"}'
    assert response.headers["content-type"] == "application/json"


@pytest.mark.parametrize("method", ["HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "PROPFIND"])
def test_health_check_any_method(method):
    """Health check has no method guard."""
    response = client.request(method, "/health")
    assert response.status_code == 200
    if method != "HEAD":
        assert response.json() == {"status": "healthy"}


def test_health_check_skips_cors():
    """Health check sits outside the calculation middleware."""
    response = client.get("/health")
    assert "access-control-allow-origin" not in response.headers


class TestCalculationEndpoints:
    """End-to-end tests for each calculation endpoint."""
    
    @pytest.mark.parametrize("path,body,result,operation", [
        ("add", {"a": 10, "b": 5}, 15, "addition"),
        ("subtract", {"a": 10, "b": 5}, 5, "subtraction"),
        ("multiply", {"a": 10, "b": 5}, 50, "multiplication"),
        ("divide", {"a": 10, "b": 5}, 2, "division"),
        ("power", {"a": 2, "b": 8}, 256, "power"),
        ("sqrt", {"a": 16}, 4, "sqrt"),
        ("percentage", {"a": 20, "b": 50}, 10, "percentage"),
    ])
    def test_success(self, path, body, result, operation):
        """Each endpoint returns its result and operation tag."""
        response = client.post(f"/api/v1/calculate/{path}", json=body)
        
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"result": result, "operation": operation}
    
    def test_whole_number_result_has_no_fraction(self):
        """Integral results are written as JSON integers."""
        response = client.post("/api/v1/calculate/add", json={"a": 10, "b": 5})
        
        assert response.content == b'{"result":15,"operation":"addition"}'
    
    def test_fractional_result_kept(self):
        response = client.post("/api/v1/calculate/divide", json={"a": 1, "b": 4})
        
        assert response.content == b'{"result":0.25,"operation":"division"}'
    
    @pytest.mark.parametrize("body,result", [
        (b"null", 0),
        (b'{"a": null, "b": 2}', 2),
        (b'{"A": 3, "B": 2}', 5),
        (b'{"a": 1, "A": 7, "b": 1}', 8),
    ])
    def test_lenient_operand_decoding(self, body, result):
        """Null counts as missing and keys match case-insensitively."""
        response = client.post("/api/v1/calculate/add", content=body)
        
        assert response.status_code == 200
        assert response.json() == {"result": result, "operation": "addition"}
    
    def test_missing_operands_default_to_zero(self):
        response = client.post("/api/v1/calculate/add", json={})
        
        assert response.status_code == 200
        assert response.json() == {"result": 0, "operation": "addition"}
    
    def test_body_without_content_type(self):
        """The body is decoded regardless of Content-Type."""
        response = client.post(
            "/api/v1/calculate/multiply",
            content=b'{"a": 3, "b": 4}',
            headers={"Content-Type": "text/plain"},
        )
        
        assert response.status_code == 200
        assert response.json()["result"] == 12


class TestErrorResponses:
    """Tests for 400 and 405 responses."""
    
    def test_division_by_zero(self):
        response = client.post("/api/v1/calculate/divide", json={"a": 10, "b": 0})
        
        assert response.status_code == 400
        assert response.json() == {"error": "division by zero"}
    
    def test_division_missing_divisor(self):
        """A missing divisor defaults to zero."""
        response = client.post("/api/v1/calculate/divide", json={"a": 10})
        
        assert response.status_code == 400
        assert response.json() == {"error": "division by zero"}
    
    def test_negative_square_root(self):
        response = client.post("/api/v1/calculate/sqrt", json={"a": -16})
        
        assert response.status_code == 400
        assert response.json() == {"error": "cannot calculate square root of negative number"}
    
    @pytest.mark.parametrize("path", [
        "add", "subtract", "multiply", "divide", "power", "sqrt", "percentage",
    ])
    def test_invalid_json(self, path):
        """Unparsable bodies are rejected with 400."""
        response = client.post(f"/api/v1/calculate/{path}", content=b"{invalid}")
        
        assert response.status_code == 400
        assert response.json() == {"error": "invalid request body"}
        assert response.headers["content-type"] == "application/json"
    
    def test_non_numeric_operand(self):
        response = client.post("/api/v1/calculate/add", json={"a": "ten", "b": 5})
        
        assert response.status_code == 400
        assert response.json() == {"error": "invalid request body"}
    
    @pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE"])
    def test_method_not_allowed(self, method):
        """Non-POST requests return 405 regardless of body."""
        response = client.request(
            method,
            "/api/v1/calculate/add",
            content=b'{"a": 10, "b": 5}',
        )
        
        assert response.status_code == 405
        assert response.json() == {"error": "method not allowed"}
    
    def test_method_checked_before_body(self):
        """An invalid body still yields 405 on the wrong method."""
        response = client.request("PUT", "/api/v1/calculate/divide", content=b"{invalid}")
        
        assert response.status_code == 405
        assert response.json() == {"error": "method not allowed"}
    
    def test_unknown_path(self):
        response = client.post("/api/v1/calculate/modulo", json={"a": 1, "b": 2})
        
        assert response.status_code == 404
        assert "error" in response.json()
        assert "access-control-allow-origin" not in response.headers
    
    def test_non_finite_result_is_server_error(self):
        """NaN cannot be encoded as JSON and falls through to the framework 500."""
        lenient_client = TestClient(app, raise_server_exceptions=False)
        
        response = lenient_client.post("/api/v1/calculate/power", json={"a": -8, "b": 0.5})
        
        assert response.status_code == 500
    
    @pytest.mark.parametrize("body", [
        b'{"a": NaN, "b": 1}',
        b'{"a": Infinity, "b": 1}',
        b'{"a": -Infinity, "b": 1}',
        b'{"a": 1e400, "b": 1}',
        b'{"a": "10", "b": "5"}',
        b'{"a": true, "b": 1}',
    ])
    def test_rejected_operands(self, body):
        """Non-finite, quoted and boolean operands are a bad body, not a crash."""
        response = client.post("/api/v1/calculate/add", content=body)
        
        assert response.status_code == 400
        assert response.json() == {"error": "invalid request body"}
    

class TestCORS:
    """Tests for CORS headers on calculation endpoints."""
    
    def test_headers_on_success(self):
        response = client.post("/api/v1/calculate/add", json={"a": 1, "b": 2})
        
        assert_cors_headers(response)
    
    def test_headers_on_errors(self):
        """Error responses carry the headers too."""
        bad_request = client.post("/api/v1/calculate/divide", json={"a": 1, "b": 0})
        wrong_method = client.get("/api/v1/calculate/divide")
        
        assert_cors_headers(bad_request)
        assert_cors_headers(wrong_method)
    
    @pytest.mark.parametrize("path", [
        "add", "subtract", "multiply", "divide", "power", "sqrt", "percentage",
    ])
    def test_preflight(self, path):
        """OPTIONS returns 200 without processing the body."""
        response = client.options(f"/api/v1/calculate/{path}")
        
        assert response.status_code == 200
        assert response.content == b""
        assert_cors_headers(response)


def test_openapi_schema_generated():
    """Test that OpenAPI schema is generated successfully."""
    response = client.get("/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/v1/calculate/add" in paths
