"""
Review endpoint tests
"""
from bson import ObjectId


def missing_id():
    return str(ObjectId())


class TestCreateReview:
    def test_review_is_enriched_with_game_title(self, client, create_game):
        game = create_game(title="Outer Wilds")

        response = client.post(
            "/api/reviews",
            json={"game": game["_id"], "author": "Sam", "rating": 5, "comment": "Unforgettable"},
        )

        assert response.status_code == 201
        review = response.json()
        assert ObjectId.is_valid(review["_id"])
        assert review["game"] == game["_id"]
        assert review["gameTitle"] == "Outer Wilds"
        assert review["author"] == "Sam"
        assert review["rating"] == 5
        assert review["comment"] == "Unforgettable"
        assert review["createdAt"] is not None

    def test_author_defaults_to_anonymous(self, client, create_game, create_review):
        game = create_game()

        review = create_review(game["_id"])

        assert review["author"] == "Anonymous"

    def test_content_is_accepted_for_comment(self, client, create_game):
        game = create_game()

        response = client.post(
            "/api/reviews",
            json={"game": game["_id"], "rating": 3, "content": "Solid"},
        )

        assert response.status_code == 201
        assert response.json()["comment"] == "Solid"

    def test_missing_fields_are_rejected(self, client, create_game):
        game = create_game()

        for payload in (
            {"rating": 4, "comment": "x"},
            {"game": game["_id"], "comment": "x"},
            {"game": game["_id"], "rating": 4},
            {"game": game["_id"], "rating": 4, "comment": "  "},
        ):
            response = client.post("/api/reviews", json=payload)
            assert response.status_code == 400, payload

        assert client.get("/api/reviews").json() == []

    def test_rating_bounds(self, client, create_game):
        game = create_game()

        for rating in (0, 6, 5.1, 0.9):
            response = client.post(
                "/api/reviews", json={"game": game["_id"], "rating": rating, "comment": "x"}
            )
            assert response.status_code == 400, rating

        for rating in (1, 5):
            response = client.post(
                "/api/reviews", json={"game": game["_id"], "rating": rating, "comment": "x"}
            )
            assert response.status_code == 201, rating

    def test_unknown_game_is_not_found_and_not_persisted(self, client):
        response = client.post(
            "/api/reviews", json={"game": missing_id(), "rating": 4, "comment": "x"}
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Game not found for this review"}
        assert client.get("/api/reviews").json() == []

    def test_malformed_game_id_is_a_validation_error(self, client):
        response = client.post(
            "/api/reviews", json={"game": "not-a-game", "rating": 4, "comment": "x"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid game id"}


class TestReadReviews:
    def test_list_includes_game_titles(self, client, create_game, create_review):
        first = create_game(title="Celeste")
        second = create_game(title="Hades")
        create_review(first["_id"])
        create_review(second["_id"])

        reviews = client.get("/api/reviews").json()

        assert [r["gameTitle"] for r in reviews] == ["Celeste", "Hades"]

    def test_deleted_game_falls_back_to_unknown_title(self, client, create_game, create_review):
        kept = create_game(title="Kept")
        removed = create_game(title="Removed")
        create_review(kept["_id"])
        orphan = create_review(removed["_id"])

        client.delete(f"/api/games/{removed['_id']}")

        reviews = client.get("/api/reviews").json()
        assert len(reviews) == 2
        assert [r["gameTitle"] for r in reviews] == ["Kept", "Unknown Game"]

        fetched = client.get(f"/api/reviews/{orphan['_id']}")
        assert fetched.status_code == 200
        assert fetched.json()["gameTitle"] == "Unknown Game"

    def test_get_by_id(self, client, create_game, create_review):
        game = create_game(title="Celeste")
        review = create_review(game["_id"], comment="Hard but fair")

        fetched = client.get(f"/api/reviews/{review['_id']}").json()

        assert fetched["comment"] == "Hard but fair"
        assert fetched["gameTitle"] == "Celeste"

    def test_unknown_and_malformed_ids(self, client):
        assert client.get(f"/api/reviews/{missing_id()}").status_code == 404
        response = client.get("/api/reviews/abc")
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid review id"}


class TestUpdateReview:
    def test_null_author_resets_to_anonymous(self, client, create_game, create_review):
        game = create_game()
        review = create_review(game["_id"], author="Kim")

        response = client.put(f"/api/reviews/{review['_id']}", json={"author": None})

        assert response.status_code == 200
        assert response.json()["author"] == "Anonymous"

    def test_null_comment_or_game_is_rejected(self, client, create_game, create_review):
        game = create_game(title="Original")
        review = create_review(game["_id"], comment="Keep me")

        for payload in ({"comment": None}, {"game": None}, {"rating": None}):
            response = client.put(f"/api/reviews/{review['_id']}", json=payload)
            assert response.status_code == 400, payload

        fetched = client.get(f"/api/reviews/{review['_id']}").json()
        assert fetched["comment"] == "Keep me"
        assert fetched["gameTitle"] == "Original"

    def test_only_supplied_fields_change(self, client, create_game, create_review):
        game = create_game()
        review = create_review(game["_id"], author="Kim", rating=2, comment="Meh")

        updated = client.put(f"/api/reviews/{review['_id']}", json={"rating": 5}).json()

        assert updated["rating"] == 5
        assert updated["author"] == "Kim"
        assert updated["comment"] == "Meh"

    def test_game_can_be_repointed(self, client, create_game, create_review):
        old = create_game(title="Old")
        new = create_game(title="New")
        review = create_review(old["_id"])

        updated = client.put(f"/api/reviews/{review['_id']}", json={"game": new["_id"]}).json()

        assert updated["game"] == new["_id"]
        assert updated["gameTitle"] == "New"

    def test_repointing_to_missing_game_is_rejected(self, client, create_game, create_review):
        game = create_game(title="Original")
        review = create_review(game["_id"])

        response = client.put(f"/api/reviews/{review['_id']}", json={"game": missing_id()})
        assert response.status_code == 404

        response = client.put(f"/api/reviews/{review['_id']}", json={"game": "bad"})
        assert response.status_code == 400

        assert client.get(f"/api/reviews/{review['_id']}").json()["gameTitle"] == "Original"

    def test_out_of_range_rating_is_rejected(self, client, create_game, create_review):
        game = create_game()
        review = create_review(game["_id"], rating=3)

        assert client.put(f"/api/reviews/{review['_id']}", json={"rating": 0}).status_code == 400
        assert client.get(f"/api/reviews/{review['_id']}").json()["rating"] == 3

    def test_unknown_and_malformed_ids(self, client):
        assert client.put(f"/api/reviews/{missing_id()}", json={"rating": 3}).status_code == 404
        assert client.put("/api/reviews/xyz", json={"rating": 3}).status_code == 400


class TestDeleteReview:
    def test_delete_removes_review(self, client, create_game, create_review):
        game = create_game()
        review = create_review(game["_id"])

        response = client.delete(f"/api/reviews/{review['_id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Review deleted"}
        assert client.get(f"/api/reviews/{review['_id']}").status_code == 404

    def test_delete_unknown_id_is_not_found(self, client):
        response = client.delete(f"/api/reviews/{missing_id()}")

        assert response.status_code == 404
        assert response.json() == {"message": "Review not found"}

    def test_delete_malformed_id_is_a_validation_error(self, client):
        assert client.delete("/api/reviews/nope").status_code == 400
