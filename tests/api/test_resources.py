"""API resource tests."""

from falcon.testing import TestClient

from useroverrides.domain.entities import ChatData, OverrideRecord, PermissionSet
from useroverrides.interfaces.api.middleware.auth import AuthMiddleware

from tests.api.conftest import build_app


def _put(client: TestClient, user_id: int, **body):
    return client.simulate_put(f"/v1/overrides/{user_id}", json=body)


# --- Overrides ---


def test_list_overrides_empty(client: TestClient) -> None:
    result = client.simulate_get("/v1/overrides")
    assert result.status_code == 200
    assert result.json == {"items": []}


def test_put_get_delete_override(client: TestClient) -> None:
    """PUT creates, GET reads, DELETE removes."""
    result = _put(client, 5, prefix="[A]", color=" 255, 0,0", permissions=["x", "!y"])
    assert result.status_code == 200
    assert result.json == {
        "user_id": 5,
        "prefix": "[A]",
        "suffix": None,
        "color": "255,0,0",
        "permissions": ["x", "!y"],
    }

    result = client.simulate_get("/v1/overrides/5")
    assert result.status_code == 200
    assert result.json["permissions"] == ["x", "!y"]

    result = client.simulate_get("/v1/overrides")
    assert [item["user_id"] for item in result.json["items"]] == [5]

    result = client.simulate_delete("/v1/overrides/5")
    assert result.status_code == 204

    result = client.simulate_get("/v1/overrides/5")
    assert result.status_code == 404
    assert result.json["error"] == "Override record not found"


def test_put_replaces_whole_record(client: TestClient) -> None:
    _put(client, 5, prefix="[A]", suffix="!", permissions=["x"])
    result = _put(client, 5, suffix="?")

    assert result.status_code == 200
    assert result.json["prefix"] is None
    assert result.json["suffix"] == "?"
    assert result.json["permissions"] == []


def test_put_empty_body_deletes(client: TestClient) -> None:
    _put(client, 5, prefix="[A]")
    assert _put(client, 5).status_code == 204
    assert client.simulate_get("/v1/overrides/5").status_code == 404
    assert _put(client, 6).status_code == 204


def test_put_rejects_invalid_values(client: TestClient) -> None:
    assert _put(client, 5, color="999,0,0").status_code == 400
    assert _put(client, 5, prefix="x" * 11).status_code == 400
    assert _put(client, 5, suffix=7).status_code == 400
    assert _put(client, 5, permissions=["!!x"]).status_code == 400
    assert _put(client, 5, permissions="x").status_code == 400
    assert client.simulate_put("/v1/overrides/5", json=["x"]).status_code == 400
    assert client.simulate_get("/v1/overrides/5").status_code == 404


def test_put_storage_failure(client: TestClient, fake_db) -> None:
    fake_db.fail_writes = True
    result = _put(client, 5, prefix="[A]")
    assert result.status_code == 503
    assert result.json == {"error": "Storage failure"}


def test_delete_missing_override(client: TestClient) -> None:
    result = client.simulate_delete("/v1/overrides/5")
    assert result.status_code == 404


def test_non_integer_user_id_not_routed(client: TestClient) -> None:
    assert client.simulate_get("/v1/overrides/abc").status_code == 404


# --- Resolve ---


def test_resolve_merges_group_defaults(client: TestClient) -> None:
    _put(client, 1, suffix="!", permissions=["!tshock.tp"])

    result = client.simulate_get("/v1/overrides/1/resolve", params={"permission": "tshock.tp"})

    assert result.status_code == 200
    assert result.json == {
        "user_id": 1,
        "prefix": "[Guest] ",
        "suffix": "!",
        "color": "255,255,255",
        "permission": "tshock.tp",
        "result": "denied",
    }


def test_resolve_without_record(client: TestClient) -> None:
    result = client.simulate_get("/v1/overrides/4/resolve", params={"permission": "x"})
    assert result.json["prefix"] == "[Admin] "
    assert result.json["result"] == "unhandled"


def test_resolve_storage_failure(client: TestClient, fake_db) -> None:
    fake_db.fail_reads = True
    result = client.simulate_get("/v1/overrides/1/resolve")
    assert result.status_code == 503
    assert result.json == {"error": "Storage failure"}


# --- Permissions ---


def test_add_and_list_permissions(client: TestClient) -> None:
    result = client.simulate_post(
        "/v1/overrides/5/permissions", json={"permissions": ["a", "!b"]}
    )
    assert result.status_code == 201
    assert result.json == {"items": ["a", "!b"]}

    result = client.simulate_post("/v1/overrides/5/permissions", json={"permissions": ["b"]})
    assert result.json == {"items": ["a", "!b"]}

    result = client.simulate_get("/v1/overrides/5/permissions")
    assert result.json == {
        "items": [{"name": "a", "negated": False}, {"name": "b", "negated": True}]
    }


def test_add_permissions_validation(client: TestClient) -> None:
    result = client.simulate_post("/v1/overrides/5/permissions", json={})
    assert result.status_code == 400
    assert "Missing required field" in result.json["error"]

    result = client.simulate_post("/v1/overrides/5/permissions", json={"permissions": []})
    assert result.status_code == 400

    result = client.simulate_post("/v1/overrides/5/permissions", json={"permissions": [""]})
    assert result.status_code == 400


def test_list_permissions_without_record(client: TestClient) -> None:
    result = client.simulate_get("/v1/overrides/5/permissions")
    assert result.status_code == 200
    assert result.json == {"items": []}


def test_delete_permission(client: TestClient) -> None:
    """Deleting the last permission of a record without chat data removes it."""
    _put(client, 5, permissions=["a", "!b"])

    assert client.simulate_delete("/v1/overrides/5/permissions/b").status_code == 204
    assert client.simulate_get("/v1/overrides/5").json["permissions"] == ["a"]

    assert client.simulate_delete("/v1/overrides/5/permissions/b").status_code == 404

    assert client.simulate_delete("/v1/overrides/5/permissions/a").status_code == 204
    assert client.simulate_get("/v1/overrides/5").status_code == 404


# --- Reload ---


def test_reload(client: TestClient, fake_db) -> None:
    fake_db.records[3] = OverrideRecord(
        user_id=3, chat=ChatData(prefix="[B]"), permissions=PermissionSet(["x"])
    )
    result = client.simulate_post("/v1/reload")
    assert result.status_code == 200
    assert result.json == {"records": 1}
    assert client.simulate_get("/v1/overrides/3").json["prefix"] == "[B]"


# --- Auth ---


def test_bearer_token_required(services, uow_factory) -> None:
    client = TestClient(build_app(services, uow_factory, [AuthMiddleware("secret")]))

    assert client.simulate_get("/v1/overrides").status_code == 401
    result = client.simulate_get(
        "/v1/overrides", headers={"Authorization": "Bearer wrong"}
    )
    assert result.status_code == 401
    assert result.json == {"error": "Unauthorized"}

    result = client.simulate_get(
        "/v1/overrides", headers={"Authorization": "Bearer secret"}
    )
    assert result.status_code == 200
    assert client.simulate_get("/v1/health").status_code == 200


def test_no_token_configured_allows_requests(services, uow_factory) -> None:
    client = TestClient(build_app(services, uow_factory, [AuthMiddleware()]))
    assert client.simulate_get("/v1/overrides").status_code == 200


# --- Health ---


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready_after_load(client: TestClient) -> None:
    """GET /v1/health/ready is 503 until the override cache is loaded."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "loading"

    client.simulate_post("/v1/reload")

    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"
