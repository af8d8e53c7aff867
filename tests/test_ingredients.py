"""User ingredient API tests."""


def create_ingredient(client, headers, name, **extra):
    response = client.post("/api/v1/ingredients", headers=headers, json={"name": name, **extra})
    assert response.status_code == 201, response.text
    return response.json()


def test_create_catalog_ingredient(client, auth_headers, catalog):
    """A catalog name is linked, with the catalog's details."""
    data = create_ingredient(client, auth_headers, "  milk ")

    assert data["name"] == "Milk"
    assert data["link_kind"] == "catalog"
    assert data["shop_ingredient_id"] == catalog["Milk"].id
    assert data["custom_user_ingredient_id"] is None
    assert data["type"] == "drink"
    assert data["storage_type"] == "fridge"
    assert data["category_name"] == "Dairy"


def test_create_custom_ingredient(client, auth_headers):
    data = create_ingredient(client, auth_headers, "Grandma's Spice Mix")

    assert data["name"] == "Grandma's Spice Mix"
    assert data["link_kind"] == "custom"
    assert data["shop_ingredient_id"] is None
    assert data["type"] == "food"
    assert data["storage_type"] is None


def test_create_duplicate_ingredient(client, auth_headers, catalog):
    create_ingredient(client, auth_headers, "Butter")

    response = client.post("/api/v1/ingredients", headers=auth_headers, json={"name": "BUTTER"})
    assert response.status_code == 409


def test_create_blank_ingredient(client, auth_headers):
    response = client.post("/api/v1/ingredients", headers=auth_headers, json={"name": "  "})
    assert response.status_code == 400


def test_create_with_tags_and_store_links(client, auth_headers):
    tag = client.post("/api/v1/tags", headers=auth_headers, json={"name": "Baking"}).json()

    data = create_ingredient(
        client,
        auth_headers,
        "Vanilla pods",
        tag_ids=[tag["id"]],
        store_links=["https://shop.example.com/vanilla", "  "],
    )

    assert [t["name"] for t in data["tags"]] == ["Baking"]
    assert [link["url"] for link in data["store_links"]] == ["https://shop.example.com/vanilla"]


def test_create_with_someone_elses_tag(client, auth_headers, other_auth_headers):
    tag = client.post("/api/v1/tags", headers=other_auth_headers, json={"name": "Mine"}).json()

    response = client.post(
        "/api/v1/ingredients",
        headers=auth_headers,
        json={"name": "Saffron", "tag_ids": [tag["id"]]},
    )
    assert response.status_code == 404


def test_list_ingredients_sorted_by_name(client, auth_headers, catalog):
    create_ingredient(client, auth_headers, "Sugar")
    create_ingredient(client, auth_headers, "apricot jam")
    create_ingredient(client, auth_headers, "Eggs")

    response = client.get("/api/v1/ingredients", headers=auth_headers)
    assert response.status_code == 200
    assert [i["name"] for i in response.json()] == ["apricot jam", "Eggs", "Sugar"]


def test_ingredients_are_private(client, auth_headers, other_auth_headers):
    data = create_ingredient(client, auth_headers, "Truffle")

    response = client.get(f"/api/v1/ingredients/{data['id']}", headers=other_auth_headers)
    assert response.status_code == 404
    assert client.get("/api/v1/ingredients", headers=other_auth_headers).json() == []


def test_update_replaces_tags_and_links(client, auth_headers):
    first = client.post("/api/v1/tags", headers=auth_headers, json={"name": "A"}).json()
    second = client.post("/api/v1/tags", headers=auth_headers, json={"name": "B"}).json()
    data = create_ingredient(
        client, auth_headers, "Capers", tag_ids=[first["id"]], store_links=["https://a"]
    )

    response = client.put(
        f"/api/v1/ingredients/{data['id']}",
        headers=auth_headers,
        json={"tag_ids": [second["id"]]},
    )
    assert response.status_code == 200
    updated = response.json()
    assert [t["name"] for t in updated["tags"]] == ["B"]
    assert [link["url"] for link in updated["store_links"]] == ["https://a"]

    response = client.put(
        f"/api/v1/ingredients/{data['id']}",
        headers=auth_headers,
        json={"store_links": []},
    )
    assert response.json()["store_links"] == []


def test_delete_ingredient_removes_lines(client, auth_headers, catalog):
    """Deleting an ingredient removes its lines but keeps the catalog entry."""
    flour = create_ingredient(client, auth_headers, "Plain flour")
    eggs = create_ingredient(client, auth_headers, "Eggs")
    recipe = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={
            "name": "Pasta",
            "ingredients": [
                {"ingredient_id": flour["id"], "quantity": 200, "unit": "g"},
                {"ingredient_id": eggs["id"], "quantity": 2, "unit": "piece"},
            ],
        },
    ).json()
    stored = client.post(
        "/api/v1/stored", headers=auth_headers, json={"name": "Cupboard", "type": "pantry"}
    ).json()
    client.post(
        f"/api/v1/stored/{stored['id']}/ingredients",
        headers=auth_headers,
        json={"ingredient_id": flour["id"], "quantity": 1, "unit": "kg"},
    )

    response = client.delete(f"/api/v1/ingredients/{flour['id']}", headers=auth_headers)
    assert response.status_code == 204

    recipe = client.get(f"/api/v1/recipes/{recipe['id']}", headers=auth_headers).json()
    assert [line["ingredient_name"] for line in recipe["ingredients"]] == ["Eggs"]
    stored = client.get(f"/api/v1/stored/{stored['id']}", headers=auth_headers).json()
    assert stored["ingredients"] == []

    catalog_names = [e["name"] for e in client.get("/api/v1/catalog", headers=auth_headers).json()]
    assert "Plain flour" in catalog_names


def test_delete_someone_elses_ingredient(client, auth_headers, other_auth_headers):
    data = create_ingredient(client, auth_headers, "Truffle")

    response = client.delete(f"/api/v1/ingredients/{data['id']}", headers=other_auth_headers)
    assert response.status_code == 404
