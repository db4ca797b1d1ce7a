"""Category endpoint tests."""

from blog_api.models.category import Category


def test_create_category(client, admin_headers):
    """Test creating a category."""
    response = client.post(
        "/api/categories",
        headers=admin_headers,
        json={"name": "Science", "description": "Papers and experiments"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Science"
    assert data["description"] == "Papers and experiments"


def test_create_category_requires_admin(client, auth_headers):
    response = client.post("/api/categories", headers=auth_headers, json={"name": "Science"})
    assert response.status_code == 403


def test_create_category_requires_auth(client):
    response = client.post("/api/categories", json={"name": "Science"})
    assert response.status_code == 401


def test_create_duplicate_category(client, admin_headers, category):
    response = client.post("/api/categories", headers=admin_headers, json={"name": "Tech"})
    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"


def test_category_names_are_case_insensitive(client, admin_headers, category):
    """'tech' collides with the existing 'Tech'."""
    response = client.post("/api/categories", headers=admin_headers, json={"name": "tech"})
    assert response.status_code == 409

    response = client.post("/api/categories", headers=admin_headers, json={"name": " TECH "})
    assert response.status_code == 409


def test_create_category_blank_name(client, admin_headers):
    response = client.post("/api/categories", headers=admin_headers, json={"name": " "})
    assert response.status_code == 400


def test_list_categories_is_public(client, admin_headers, category):
    client.post("/api/categories", headers=admin_headers, json={"name": "Art"})

    response = client.get("/api/categories")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Art", "Tech"]


def test_get_category(client, category):
    response = client.get(f"/api/categories/{category['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "Tech"

    assert client.get("/api/categories/99999").status_code == 404


def test_update_category(client, admin_headers, category):
    """Test updating a category name."""
    response = client.put(
        f"/api/categories/{category['id']}",
        headers=admin_headers,
        json={"name": "Technology"},
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Technology"
    assert response.json()["description"] == category["description"]


def test_update_category_case_of_own_name(client, admin_headers, category):
    response = client.put(
        f"/api/categories/{category['id']}", headers=admin_headers, json={"name": "TECH"}
    )
    assert response.status_code == 200
    assert response.json()["name"] == "TECH"


def test_update_category_to_taken_name(client, admin_headers, category):
    other = client.post("/api/categories", headers=admin_headers, json={"name": "Art"}).json()
    response = client.put(
        f"/api/categories/{other['id']}", headers=admin_headers, json={"name": "tech"}
    )
    assert response.status_code == 409


def test_update_category_requires_admin(client, auth_headers, category):
    response = client.put(
        f"/api/categories/{category['id']}", headers=auth_headers, json={"name": "Mine"}
    )
    assert response.status_code == 403


def test_update_missing_category(client, admin_headers):
    response = client.put("/api/categories/99999", headers=admin_headers, json={"name": "X"})
    assert response.status_code == 404


def test_delete_category_uncategorizes_posts(client, db, admin_headers, category, post):
    response = client.delete(f"/api/categories/{category['id']}", headers=admin_headers)
    assert response.status_code == 204

    assert db.query(Category).filter(Category.id == category["id"]).first() is None
    fetched = client.get(f"/api/posts/{post['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["categoryId"] is None


def test_delete_category_requires_admin(client, auth_headers, category):
    response = client.delete(f"/api/categories/{category['id']}", headers=auth_headers)
    assert response.status_code == 403
