"""
Tests for the HTTP surface of the request core.
"""

import json


REQUEST = {
    "method": "POST",
    "url": "{{baseUrl}}/users",
    "headers": [
        {"key": "Authorization", "value": "Bearer {{token}}", "enabled": True},
        {"key": "X-Debug", "value": "{{debug}}", "enabled": False},
    ],
    "query_params": [{"key": "page", "value": "{{page}}", "enabled": True}],
    "body_type": "json",
    "body_content": '{"name": "{{name}}"}',
    "auth_type": "bearer",
    "auth_config": {"type": "bearer", "token": "{{token}}"},
}

VARIABLES = [
    {"key": "baseUrl", "value": "https://api.example.com"},
    {"key": "token", "value": "abc123"},
    {"key": "page", "value": "2"},
    {"key": "name", "value": "disabled", "enabled": False},
]


class TestServiceInfo:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "Apiary"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestResolveEndpoint:

    def test_resolves_request(self, client):
        response = client.post("/api/variables/resolve", json={"request": REQUEST, "variables": VARIABLES})

        assert response.status_code == 200
        data = response.json()
        resolved = data["request"]
        assert resolved["url"] == "https://api.example.com/users"
        assert resolved["headers"][0]["value"] == "Bearer abc123"
        assert resolved["headers"][1]["enabled"] is False
        assert resolved["query_params"][0]["value"] == "2"
        assert resolved["auth_config"] == {"type": "bearer", "token": "abc123"}
        assert resolved["settings"] == {"timeout_ms": 30000, "follow_redirects": True, "max_redirects": 10}

    def test_disabled_variables_are_not_used(self, client):
        response = client.post("/api/variables/resolve", json={"request": REQUEST, "variables": VARIABLES})

        data = response.json()
        assert data["request"]["body_content"] == '{"name": "{{name}}"}'
        assert data["warnings"] == [
            "Undefined variable in headers: {{debug}}",
            "Undefined variable in body: {{name}}",
        ]

    def test_variables_default_to_empty(self, client):
        response = client.post("/api/variables/resolve", json={"request": REQUEST})

        assert response.status_code == 200
        assert response.json()["request"]["url"] == "{{baseUrl}}/users"

    def test_graphql_body(self, client):
        request = dict(
            REQUEST,
            body_type="graphql",
            body_content=json.dumps({"query": "{ user(id: \"{{page}}\") { id } }", "variables": "", "operationName": ""}),
        )

        response = client.post("/api/variables/resolve", json={"request": request, "variables": VARIABLES})

        body = json.loads(response.json()["request"]["body_content"])
        assert body["query"] == '{ user(id: "2") { id } }'


class TestVariableRefsEndpoint:

    def test_lists_refs(self, client):
        response = client.post("/api/variables/refs", json={"text": "{{a}}/{{b}}/{{a}}"})

        assert response.status_code == 200
        assert response.json() == {"variables": ["a", "b", "a"]}


class TestExportEndpoint:

    def test_exports_curl(self, client):
        response = client.post(
            "/api/export",
            json={
                "request": {
                    "method": "GET",
                    "url": "https://api.example.com/users",
                    "headers": [],
                    "queryParams": [],
                    "bodyType": "none",
                    "bodyContent": None,
                },
                "format": "curl",
            },
        )

        assert response.status_code == 200
        assert response.json() == {"format": "curl", "content": "curl 'https://api.example.com/users'"}

    def test_resolves_before_export(self, client):
        response = client.post(
            "/api/export",
            json={
                "request": {
                    "method": "GET",
                    "url": "{{baseUrl}}/users",
                    "queryParams": [{"key": "page", "value": "{{page}}", "enabled": True}],
                },
                "format": "httpie",
                "variables": VARIABLES,
            },
        )

        assert response.json()["content"] == "http GET 'https://api.example.com/users?page=2'"

    def test_rejects_unknown_format(self, client):
        response = client.post(
            "/api/export",
            json={"request": {"method": "GET", "url": "https://x.test"}, "format": "powershell"},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"


class TestAuthEndpoints:

    def test_default_config(self, client):
        response = client.get("/api/auth/defaults/api_key")

        assert response.status_code == 200
        assert response.json() == {"type": "api_key", "key": "", "value": "", "location": "header"}

    def test_unknown_auth_type(self, client):
        response = client.get("/api/auth/defaults/kerberos")

        assert response.status_code == 422

    def test_switch(self, client):
        response = client.post("/api/auth/switch", json={"request": REQUEST, "auth_type": "basic"})

        assert response.status_code == 200
        data = response.json()
        assert data["auth_type"] == "basic"
        assert data["auth_config"] == {"type": "basic", "username": "", "password": ""}
        assert data["url"] == REQUEST["url"]
