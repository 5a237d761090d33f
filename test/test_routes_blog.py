"""
Tests for blog routes

Tests the public read endpoints, admin-only writes and the error envelope
through the full application stack.
"""

from conftest import blog_payload


class TestCreateBlogPost:
    """Test POST /api/blog"""

    def test_create_returns_id(self, client, admin_headers):
        response = client.post("/api/blog", json=blog_payload(), headers=admin_headers)
        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["message"] == "Article créé avec succès"

    def test_requires_admin(self, client):
        response = client.post("/api/blog", json=blog_payload())
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["error"]["error_code"] == "AUTH_FAILED"

    def test_rejects_invalid_token(self, client):
        response = client.post("/api/blog", json=blog_payload(), headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401
        assert response.json()["error"]["error_code"] == "AUTH_TOKEN_INVALID"

    def test_duplicate_slug_is_conflict(self, client, admin_headers):
        assert client.post("/api/blog", json=blog_payload(), headers=admin_headers).status_code == 201

        response = client.post("/api/blog", json=blog_payload(), headers=admin_headers)

        assert response.status_code == 409
        assert response.json()["error"]["error_code"] == "VALIDATION_DUPLICATE_RESOURCE"

    def test_missing_translations_is_bad_request(self, client, admin_headers):
        payload = blog_payload()
        del payload["translations"]
        response = client.post("/api/blog", json=payload, headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid request data"

    def test_empty_translations_is_bad_request(self, client, admin_headers):
        response = client.post("/api/blog", json=blog_payload(translations=[]), headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["error"]["details"]["field"] == "translations"

    def test_duplicate_language_is_bad_request(self, client, admin_headers):
        translations = [{"language": "fr", "title": "Un"}, {"language": "fr", "title": "Deux"}]
        response = client.post("/api/blog", json=blog_payload(translations=translations), headers=admin_headers)
        assert response.status_code == 400

    def test_unsupported_translation_language(self, client, admin_headers):
        translations = [{"language": "de", "title": "Hallo"}]
        response = client.post("/api/blog", json=blog_payload(translations=translations), headers=admin_headers)
        assert response.status_code == 400
        assert response.json()["error"]["error_code"] == "VALIDATION_UNSUPPORTED_LANGUAGE"


class TestReadBlogPost:
    """Test GET /api/blog/{slug}"""

    def test_translation_per_language(self, client, admin_headers):
        client.post("/api/blog", json=blog_payload(), headers=admin_headers)

        english = client.get("/api/blog/hello", params={"language": "en"})
        arabic = client.get("/api/blog/hello", params={"language": "ar"})

        assert english.status_code == 200
        assert english.json()["translation"]["title"] == "Hello"
        assert english.json()["translation"]["language"] == "en"
        assert arabic.status_code == 404
        assert arabic.json()["error"]["error_code"] == "RESOURCE_NOT_FOUND"

    def test_default_language_is_french(self, client, admin_headers):
        client.post("/api/blog", json=blog_payload(), headers=admin_headers)

        response = client.get("/api/blog/hello")

        assert response.json()["translation"]["title"] == "Bonjour"

    def test_views_are_monotonic(self, client, admin_headers):
        client.post("/api/blog", json=blog_payload(), headers=admin_headers)

        first = client.get("/api/blog/hello", params={"language": "fr"}).json()
        second = client.get("/api/blog/hello", params={"language": "fr"}).json()

        assert second["views"] >= first["views"]
        assert second["views"] == first["views"] + 1

    def test_draft_hidden_from_public(self, client, admin_headers):
        client.post("/api/blog", json=blog_payload(status="draft"), headers=admin_headers)

        assert client.get("/api/blog/hello").status_code == 404
        assert client.get("/api/blog/hello", headers=admin_headers).status_code == 200

    def test_unsupported_language_is_bad_request(self, client):
        response = client.get("/api/blog/hello", params={"language": "de"})
        assert response.status_code == 400
        assert response.json()["error"]["details"]["supported_languages"] == ["fr", "en", "ar"]


class TestListBlogPosts:
    """Test GET /api/blog"""

    def test_pages_cover_full_set(self, client, admin_headers):
        for index in range(12):
            client.post("/api/blog", json=blog_payload(slug=f"post-{index:02d}"), headers=admin_headers)

        slugs = []
        for page in (1, 2, 3):
            response = client.get("/api/blog", params={"page": page, "limit": 5})
            data = response.json()
            assert data["pagination"] == {"page": page, "limit": 5, "total": 12, "pages": 3}
            assert len(data["items"]) <= 5
            slugs.extend(item["slug"] for item in data["items"])

        assert len(slugs) == len(set(slugs)) == 12

    def test_empty_list(self, client):
        response = client.get("/api/blog")
        assert response.status_code == 200
        assert response.json() == {"items": [], "pagination": {"page": 1, "limit": 10, "total": 0, "pages": 0}}

    def test_status_filter_only_for_admins(self, client, admin_headers):
        client.post("/api/blog", json=blog_payload(slug="live"), headers=admin_headers)
        client.post("/api/blog", json=blog_payload(slug="wip", status="draft"), headers=admin_headers)

        public = client.get("/api/blog", params={"status": "draft"}).json()
        admin_drafts = client.get("/api/blog", params={"status": "draft"}, headers=admin_headers).json()
        admin_all = client.get("/api/blog", headers=admin_headers).json()

        assert [item["slug"] for item in public["items"]] == ["live"]
        assert [item["slug"] for item in admin_drafts["items"]] == ["wip"]
        assert admin_all["pagination"]["total"] == 2

    def test_filters_by_tag_and_category(self, client, admin_headers):
        client.post(
            "/api/blog",
            json=blog_payload(
                slug="solar",
                translations=[{"language": "fr", "title": "Solaire", "category": "Énergie", "tags": ["solaire"]}],
            ),
            headers=admin_headers,
        )
        client.post(
            "/api/blog",
            json=blog_payload(
                slug="water",
                translations=[{"language": "fr", "title": "Eau", "category": "Eau", "tags": ["eau"]}],
            ),
            headers=admin_headers,
        )

        by_tag = client.get("/api/blog", params={"tag": "solaire"}).json()
        by_category = client.get("/api/blog", params={"category": "Eau"}).json()

        assert [item["slug"] for item in by_tag["items"]] == ["solar"]
        assert [item["slug"] for item in by_category["items"]] == ["water"]

    def test_ampersand_category_round_trips_and_filters(self, client, admin_headers):
        client.post(
            "/api/blog",
            json=blog_payload(
                translations=[{"language": "fr", "title": "R&D", "category": "Énergie & Climat", "tags": ["R&D"]}]
            ),
            headers=admin_headers,
        )

        item = client.get("/api/blog/hello").json()
        by_category = client.get("/api/blog", params={"category": "Énergie & Climat"}).json()
        by_tag = client.get("/api/blog", params={"tag": "R&D"}).json()

        assert item["translation"]["title"] == "R&D"
        assert item["translation"]["category"] == "Énergie & Climat"
        assert by_category["pagination"]["total"] == 1
        assert by_tag["pagination"]["total"] == 1

    def test_meta_endpoints(self, client, admin_headers):
        client.post(
            "/api/blog",
            json=blog_payload(
                translations=[
                    {"language": "fr", "title": "Bonjour", "category": "Actualités", "tags": ["b", "a"]},
                    {"language": "en", "title": "Hello", "category": "News", "tags": ["x"]},
                ]
            ),
            headers=admin_headers,
        )

        assert client.get("/api/blog/meta/categories", params={"language": "en"}).json() == {"categories": ["News"]}
        assert client.get("/api/blog/meta/tags", params={"language": "fr"}).json() == {"tags": ["a", "b"]}


class TestUpdateDeleteBlogPost:
    def test_update_replaces_translations(self, client, admin_headers):
        client.post("/api/blog", json=blog_payload(), headers=admin_headers)

        response = client.put(
            "/api/blog/hello",
            json={"read_time": 4, "translations": [{"language": "ar", "title": "مرحبا"}]},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Article mis à jour avec succès"}
        assert client.get("/api/blog/hello", params={"language": "fr"}).status_code == 404
        arabic = client.get("/api/blog/hello", params={"language": "ar"}).json()
        assert arabic["translation"]["title"] == "مرحبا"
        assert arabic["read_time"] == 4
        assert arabic["status"] == "published"

    def test_update_missing_slug(self, client, admin_headers):
        response = client.put(
            "/api/blog/ghost", json={"translations": [{"language": "fr", "title": "X"}]}, headers=admin_headers
        )
        assert response.status_code == 404

    def test_update_requires_admin(self, client):
        response = client.put("/api/blog/hello", json={"translations": [{"language": "fr", "title": "X"}]})
        assert response.status_code == 401

    def test_delete(self, client, admin_headers):
        client.post("/api/blog", json=blog_payload(), headers=admin_headers)

        response = client.delete("/api/blog/hello", headers=admin_headers)

        assert response.status_code == 200
        assert client.get("/api/blog/hello").status_code == 404
        assert client.delete("/api/blog/hello", headers=admin_headers).status_code == 404


class TestUnknownRoute:
    def test_unknown_route_envelope(self, client):
        response = client.get("/api/unknown")
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Route not found"
        assert response.json()["error"]["details"] == {"method": "GET"}
