"""
API Tests

Smoke tests for the catalog endpoints.
"""


def test_health_endpoint(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "hooks": 25}


def test_list_hooks(client):
    response = client.get("/api/catalog/hooks")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 25
    assert data[0]["id"] == "useState"
    assert data[0]["category"] == "state"


def test_list_hooks_by_category(client):
    response = client.get("/api/catalog/hooks", params={"category": "react19"})

    assert response.status_code == 200
    assert [h["id"] for h in response.json()] == [
        "useActionState", "useFormStatus", "useOptimistic", "use",
    ]


def test_list_hooks_unknown_category_is_empty(client):
    response = client.get("/api/catalog/hooks", params={"category": "invalid"})

    assert response.status_code == 200
    assert response.json() == []


def test_get_hook(client):
    response = client.get("/api/catalog/hooks/useMemo")

    assert response.status_code == 200
    assert response.json() == {
        "id": "useMemo",
        "name": "useMemo",
        "category": "performance",
        "description": "Memoize a computed value",
        "introduced": "16.8+",
        "path": "/hooks/useMemo",
    }


def test_get_hook_not_found(client):
    response = client.get("/api/catalog/hooks/nonExistentHook")

    assert response.status_code == 404
    assert response.json()["detail"] == "Hook not found"


def test_categories_overview(client):
    response = client.get("/api/catalog/categories")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 8
    assert data[0]["category"] == "state"
    assert data[0]["count"] == 3


def test_category_hooks(client):
    response = client.get("/api/catalog/categories/dom")

    assert response.status_code == 200
    assert [h["id"] for h in response.json()] == ["useRef", "useImperativeHandle"]


def test_category_hooks_unknown(client):
    response = client.get("/api/catalog/categories/nope")

    assert response.status_code == 200
    assert response.json() == []


def test_navigation(client):
    response = client.get("/api/catalog/navigation", params={"path": "/hooks/use"})

    assert response.status_code == 200
    active = [link["id"] for s in response.json() for link in s["links"] if link["active"]]
    assert active == ["use"]
