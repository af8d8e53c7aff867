"""Recipe CRUD tests."""

import pytest


@pytest.fixture
def ingredients(client, auth_headers, catalog):
    """The test user's flour, eggs and a custom ingredient, keyed by name."""
    result = {}
    for name in ["Plain flour", "Eggs", "Saffron threads"]:
        response = client.post("/api/v1/ingredients", headers=auth_headers, json={"name": name})
        assert response.status_code == 201
        result[name] = response.json()["id"]
    return result


def recipe_body(name, *lines):
    return {
        "name": name,
        "ingredients": [
            {"ingredient_id": ingredient_id, "quantity": quantity, "unit": unit}
            for ingredient_id, quantity, unit in lines
        ],
    }


def test_create_recipe(client, auth_headers, ingredients):
    response = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json=recipe_body(
            "  Pasta ",
            (ingredients["Plain flour"], 200, "g"),
            (ingredients["Eggs"], 2, "piece"),
        ),
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Pasta"
    assert data["user_id"] == auth_headers.user_id
    assert data["original_url"] is None
    assert {(i["ingredient_name"], i["quantity"], i["unit"]) for i in data["ingredients"]} == {
        ("Plain flour", 200.0, "g"),
        ("Eggs", 2.0, "piece"),
    }


def test_create_recipe_blank_name(client, auth_headers):
    response = client.post("/api/v1/recipes", headers=auth_headers, json=recipe_body("  "))
    assert response.status_code == 400


def test_create_recipe_rejects_non_positive_quantity(client, auth_headers, ingredients):
    response = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json=recipe_body("Bad", (ingredients["Eggs"], 0, "piece")),
    )
    assert response.status_code == 422


def test_create_recipe_with_foreign_ingredient(
    client, auth_headers, other_auth_headers, ingredients
):
    """Another user's ingredient ids are rejected."""
    response = client.post(
        "/api/v1/recipes",
        headers=other_auth_headers,
        json=recipe_body("Stolen", (ingredients["Eggs"], 2, "piece")),
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Some ingredients are invalid"


def test_create_recipe_with_unknown_ingredient(client, auth_headers):
    response = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json=recipe_body("Ghost", (99999, 1, "g")),
    )
    assert response.status_code == 400


def test_list_recipes_newest_first(client, auth_headers, ingredients):
    client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json=recipe_body("First", (ingredients["Eggs"], 1, "piece")),
    )
    client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json=recipe_body(
            "Second",
            (ingredients["Eggs"], 2, "piece"),
            (ingredients["Saffron threads"], 1, "tsp"),
        ),
    )

    response = client.get("/api/v1/recipes", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert [r["name"] for r in data] == ["Second", "First"]
    assert [r["ingredient_count"] for r in data] == [2, 1]


def test_recipes_are_private(client, auth_headers, other_auth_headers, ingredients):
    recipe = client.post(
        "/api/v1/recipes", headers=auth_headers, json=recipe_body("Mine")
    ).json()

    assert client.get("/api/v1/recipes", headers=other_auth_headers).json() == []
    response = client.get(f"/api/v1/recipes/{recipe['id']}", headers=other_auth_headers)
    assert response.status_code == 404


def test_get_recipe(client, auth_headers, ingredients):
    recipe = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json=recipe_body("Saffron Rice", (ingredients["Saffron threads"], 1, "tsp")),
    ).json()

    response = client.get(f"/api/v1/recipes/{recipe['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["ingredients"][0]["ingredient_name"] == "Saffron threads"


def test_get_missing_recipe(client, auth_headers):
    response = client.get("/api/v1/recipes/99999", headers=auth_headers)
    assert response.status_code == 404


def test_update_recipe_replaces_lines(client, auth_headers, ingredients):
    recipe = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json=recipe_body(
            "Pasta",
            (ingredients["Plain flour"], 200, "g"),
            (ingredients["Eggs"], 2, "piece"),
        ),
    ).json()

    response = client.put(
        f"/api/v1/recipes/{recipe['id']}",
        headers=auth_headers,
        json=recipe_body("Egg Pasta", (ingredients["Eggs"], 3, "piece")),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Egg Pasta"
    assert [(i["ingredient_name"], i["quantity"]) for i in data["ingredients"]] == [
        ("Eggs", 3.0)
    ]


def test_update_recipe_with_foreign_ingredient(
    client, auth_headers, other_auth_headers, ingredients
):
    recipe = client.post(
        "/api/v1/recipes", headers=other_auth_headers, json=recipe_body("Theirs")
    ).json()

    response = client.put(
        f"/api/v1/recipes/{recipe['id']}",
        headers=other_auth_headers,
        json=recipe_body("Theirs", (ingredients["Eggs"], 1, "piece")),
    )
    assert response.status_code == 400


def test_delete_recipe(client, auth_headers, ingredients):
    recipe = client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json=recipe_body("Gone", (ingredients["Eggs"], 1, "piece")),
    ).json()

    response = client.delete(f"/api/v1/recipes/{recipe['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert client.get(f"/api/v1/recipes/{recipe['id']}", headers=auth_headers).status_code == 404

    # The ingredient itself is untouched
    response = client.get(f"/api/v1/ingredients/{ingredients['Eggs']}", headers=auth_headers)
    assert response.status_code == 200


def test_delete_other_users_recipe(client, auth_headers, other_auth_headers):
    recipe = client.post(
        "/api/v1/recipes", headers=auth_headers, json=recipe_body("Mine")
    ).json()

    response = client.delete(f"/api/v1/recipes/{recipe['id']}", headers=other_auth_headers)
    assert response.status_code == 404
