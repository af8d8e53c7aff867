"""Tag API tests."""


def test_create_tag(client, auth_headers):
    response = client.post("/api/v1/tags", headers=auth_headers, json={"name": " Vegan "})
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Vegan"
    assert data["color"] == "#3b82f6"


def test_create_duplicate_tag(client, auth_headers):
    client.post("/api/v1/tags", headers=auth_headers, json={"name": "Vegan"})

    response = client.post("/api/v1/tags", headers=auth_headers, json={"name": "Vegan"})
    assert response.status_code == 409


def test_same_tag_name_for_different_users(client, auth_headers, other_auth_headers):
    client.post("/api/v1/tags", headers=auth_headers, json={"name": "Vegan"})

    response = client.post("/api/v1/tags", headers=other_auth_headers, json={"name": "Vegan"})
    assert response.status_code == 201


def test_create_blank_tag(client, auth_headers):
    response = client.post("/api/v1/tags", headers=auth_headers, json={"name": "  "})
    assert response.status_code == 400


def test_list_tags_by_name(client, auth_headers):
    for name in ["Spicy", "Breakfast", "Quick"]:
        client.post("/api/v1/tags", headers=auth_headers, json={"name": name})

    response = client.get("/api/v1/tags", headers=auth_headers)
    assert [t["name"] for t in response.json()] == ["Breakfast", "Quick", "Spicy"]


def test_update_tag(client, auth_headers):
    tag = client.post("/api/v1/tags", headers=auth_headers, json={"name": "Old"}).json()

    response = client.put(
        f"/api/v1/tags/{tag['id']}", headers=auth_headers, json={"name": "New", "color": "#000"}
    )
    assert response.status_code == 200
    assert response.json()["name"] == "New"
    assert response.json()["color"] == "#000"


def test_rename_tag_collision(client, auth_headers):
    client.post("/api/v1/tags", headers=auth_headers, json={"name": "Taken"})
    tag = client.post("/api/v1/tags", headers=auth_headers, json={"name": "Other"}).json()

    response = client.put(
        f"/api/v1/tags/{tag['id']}",
        headers=auth_headers,
        json={"name": "Taken", "color": "#fff"},
    )
    assert response.status_code == 409


def test_delete_tag_keeps_ingredients(client, auth_headers):
    tag = client.post("/api/v1/tags", headers=auth_headers, json={"name": "Temp"}).json()
    ingredient = client.post(
        "/api/v1/ingredients",
        headers=auth_headers,
        json={"name": "Nori", "tag_ids": [tag["id"]]},
    ).json()

    response = client.delete(f"/api/v1/tags/{tag['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = client.get(f"/api/v1/ingredients/{ingredient['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["tags"] == []


def test_cannot_touch_other_users_tag(client, auth_headers, other_auth_headers):
    tag = client.post("/api/v1/tags", headers=auth_headers, json={"name": "Mine"}).json()

    response = client.put(
        f"/api/v1/tags/{tag['id']}",
        headers=other_auth_headers,
        json={"name": "Stolen", "color": "#fff"},
    )
    assert response.status_code == 404
    response = client.delete(f"/api/v1/tags/{tag['id']}", headers=other_auth_headers)
    assert response.status_code == 404
