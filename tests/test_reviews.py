from conftest import complaint_payload
from models import Review


def create_complaint(client):
    return client.post("/api/complaints", json=complaint_payload()).json()["id"]


def test_review_creation_and_listing(client):
    complaint_id = create_complaint(client)

    # 1. No reviews yet is an empty list, not a 404
    response = client.get(f"/api/complaints/{complaint_id}/reviews")
    assert response.status_code == 200
    assert response.json() == []

    # 2. Leave a review once the complaint is resolved
    client.patch(f"/api/complaints/{complaint_id}/status", json={"status": "resolved"})
    response = client.post(
        "/api/reviews",
        json={"complaintId": complaint_id, "rating": 5, "reviewText": "Fixed fast"},
    )
    assert response.status_code == 201
    review = response.json()
    assert review["complaintId"] == complaint_id
    assert review["rating"] == 5
    assert review["reviewText"] == "Fixed fast"
    assert review["createdAt"]

    response = client.get(f"/api/complaints/{complaint_id}/reviews")
    assert response.status_code == 200
    assert response.json() == [review]


def test_review_text_is_optional(client):
    complaint_id = create_complaint(client)

    response = client.post("/api/reviews", json={"complaintId": complaint_id, "rating": 3})
    assert response.status_code == 201
    assert response.json()["reviewText"] is None


def test_review_validation(client, test_db):
    complaint_id = create_complaint(client)

    response = client.post("/api/reviews", json={"complaintId": complaint_id})
    assert response.status_code == 400
    assert "rating" in response.json()["error"]

    response = client.post("/api/reviews", json={"rating": 4})
    assert response.status_code == 400
    assert "complaintId" in response.json()["error"]

    # Numeric strings are not silently coerced
    response = client.post(
        "/api/reviews", json={"complaintId": str(complaint_id), "rating": 4}
    )
    assert response.status_code == 400

    assert test_db.query(Review).count() == 0


def test_review_for_unknown_complaint_fails_on_foreign_key(client, test_db):
    response = client.post("/api/reviews", json={"complaintId": 999, "rating": 4})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create review"}
    assert test_db.query(Review).count() == 0


def test_reviews_for_unknown_complaint_are_empty(client):
    response = client.get("/api/complaints/31337/reviews")
    assert response.status_code == 200
    assert response.json() == []
