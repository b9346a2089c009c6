def _payload(title, description="", category="data", **extra):
    body = {
        "title": title,
        "description": description,
        "category": category,
        "image_url": "https://example.com/image.png",
        "created_by": "Test Team",
    }
    body.update(extra)
    return body


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_create_and_list(client):
    response = client.post("/api/dashboards", json=_payload("Revenue Forecast", category="business"))
    assert response.status_code == 201
    created = response.json()
    assert created["id"] == 1
    assert created["views"] == 0
    assert created["embeddings"] is not None

    listing = client.get("/api/dashboards").json()
    assert [d["title"] for d in listing] == ["Revenue Forecast"]


def test_create_rejects_unknown_category(client):
    response = client.post("/api/dashboards", json=_payload("Revenue Forecast", category="finance"))
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request"


def test_get_dashboard_detail(client):
    client.post("/api/dashboards", json=_payload("Revenue Forecast"))

    body = client.get("/api/dashboards/1").json()
    assert body["views"] == 1
    assert body["is_favorite"] is False

    recent = client.get("/api/dashboards/recent").json()
    assert [d["id"] for d in recent] == [1]


def test_get_dashboard_errors(client):
    missing = client.get("/api/dashboards/99")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Dashboard not found"

    assert client.get("/api/dashboards/abc").status_code == 400


def test_error_responses_are_documented(client):
    schema = client.get("/openapi.json").json()

    detail_route = schema["paths"]["/api/dashboards/{dashboard_id}"]["get"]["responses"]
    assert detail_route["404"]["content"]["application/json"]["schema"]["$ref"] == "#/components/schemas/ErrorResponse"
    assert set(schema["components"]["schemas"]["ErrorResponse"]["properties"]) == {"detail", "errors"}


def test_category_listing(client):
    client.post("/api/dashboards", json=_payload("Funnel", category="ecom"))
    client.post("/api/dashboards", json=_payload("Pipelines", category="data"))

    ecom = client.get("/api/dashboards/category/ecom").json()
    assert [d["title"] for d in ecom] == ["Funnel"]
    assert client.get("/api/dashboards/category/unknown").status_code == 400


def test_featured_listing(client):
    client.post("/api/dashboards", json=_payload("Plain"))
    client.post("/api/dashboards", json=_payload("Spotlight", is_featured=True))

    featured = client.get("/api/dashboards/featured").json()
    assert [d["title"] for d in featured] == ["Spotlight"]


def test_update_and_delete(client):
    client.post("/api/dashboards", json=_payload("Revenue Forecast", category="business"))

    updated = client.put("/api/dashboards/1", json={"title": "Churn Outlook"})
    assert updated.status_code == 200
    assert updated.json()["title"] == "Churn Outlook"
    assert client.put("/api/dashboards/7", json={"title": "x"}).status_code == 404

    assert client.delete("/api/dashboards/1").status_code == 204
    assert client.get("/api/dashboards/1").status_code == 404
    assert client.delete("/api/dashboards/1").status_code == 404


def test_search(client):
    client.post("/api/dashboards", json=_payload("Sales Performance Dashboard", category="ecom"))
    client.post("/api/dashboards", json=_payload("Financial KPIs Dashboard", category="business"))

    response = client.post("/api/dashboards/search", json={"query": "sales"})
    assert response.status_code == 200
    hits = response.json()["dashboards"]
    assert [hit["dashboard"]["title"] for hit in hits] == [
        "Sales Performance Dashboard", "Financial KPIs Dashboard"
    ]
    assert hits[0]["similarity"] > hits[1]["similarity"]

    limited = client.post("/api/dashboards/search", json={"query": "dashboard", "limit": 1}).json()
    assert len(limited["dashboards"]) == 1


def test_search_validation(client):
    assert client.post("/api/dashboards/search", json={"query": ""}).status_code == 400
    assert client.post("/api/dashboards/search", json={"query": "   "}).status_code == 400
    assert client.post("/api/dashboards/search", json={"query": "sales", "limit": 0}).status_code == 400
    assert client.post("/api/dashboards/search", json={}).status_code == 400


def test_keyword_search(client):
    client.post("/api/dashboards", json=_payload("Data Quality Monitoring"))
    client.post("/api/dashboards", json=_payload("Revenue Forecast"))

    results = client.get("/api/dashboards/keyword-search", params={"q": "monitoring"}).json()
    assert [d["title"] for d in results] == ["Data Quality Monitoring"]


def test_favorites_flow(client):
    client.post("/api/dashboards", json=_payload("Revenue Forecast"))

    added = client.post("/api/dashboards/favorite", json={"dashboard_id": 1})
    assert added.status_code == 201
    assert added.json()["dashboard_id"] == 1

    duplicate = client.post("/api/dashboards/favorite", json={"dashboard_id": 1})
    assert duplicate.status_code == 400
    assert duplicate.json()["detail"] == "Dashboard already in favorites"

    assert [d["id"] for d in client.get("/api/dashboards/favorites").json()] == [1]
    assert client.get("/api/dashboards/1").json()["is_favorite"] is True

    assert client.delete("/api/dashboards/favorite/1").status_code == 204
    assert client.get("/api/dashboards/1").json()["is_favorite"] is False

    again = client.delete("/api/dashboards/favorite/1")
    assert again.status_code == 400
    assert again.json()["detail"] == "Dashboard not in favorites"


def test_favorite_missing_dashboard(client):
    assert client.post("/api/dashboards/favorite", json={"dashboard_id": 3}).status_code == 404
    assert client.delete("/api/dashboards/favorite/3").status_code == 404


def test_refresh_embeddings_endpoint(client, store, dashboard_factory):
    store.create_dashboard(dashboard_factory("Revenue Forecast"))

    metrics = client.post("/api/dashboards/embeddings/refresh").json()
    assert metrics["embeddings_computed"] == 1

    forced = client.post("/api/dashboards/embeddings/refresh", params={"force": True}).json()
    assert forced["forced"] is True
    assert forced["embeddings_computed"] == 1
