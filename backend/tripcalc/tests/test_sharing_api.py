"""
Tests for public link sharing, explicit shares and token lookup.
"""
from datetime import date
from decimal import Decimal
from tripcalc.models import Expense, ItemCategory, SharedTrip


def test_share_generates_token_and_url(client, owner, make_trip, auth):
    """Test that sharing a private trip creates a token and a share URL."""
    trip = make_trip(owner)

    response = client.post(f"/api/trips/{trip.id}/share", json={"is_public": True}, headers=auth(owner))

    assert response.status_code == 200
    data = response.json()
    token = data["trip"]["share_token"]
    assert data["trip"]["is_public"] is True
    assert len(token) == 12
    assert data["share_url"].endswith(f"/shared/{token}")


def test_revoke_and_reshare_keep_token(client, owner, city, make_trip, auth):
    """Test the full toggle cycle: the same link works again after re-sharing."""
    trip = make_trip(owner)

    shared = client.post(f"/api/trips/{trip.id}/share", json={"is_public": True}, headers=auth(owner))
    token = shared.json()["trip"]["share_token"]
    assert client.get(f"/api/shared/{token}").status_code == 200

    unshared = client.post(f"/api/trips/{trip.id}/share", json={"is_public": False}, headers=auth(owner))
    assert unshared.json()["trip"]["is_public"] is False
    assert unshared.json()["trip"]["share_token"] == token
    assert unshared.json()["share_url"] is None
    assert client.get(f"/api/shared/{token}").status_code == 404

    reshared = client.post(f"/api/trips/{trip.id}/share", json={"is_public": True}, headers=auth(owner))
    assert reshared.json()["trip"]["share_token"] == token
    assert client.get(f"/api/shared/{token}").status_code == 200


def test_only_owner_can_toggle_sharing(client, db, owner, other, make_trip, auth):
    trip = make_trip(owner)
    db.add(SharedTrip(trip_id=trip.id, shared_with_id=other.id, shared_by_id=owner.id))
    db.commit()

    response = client.post(f"/api/trips/{trip.id}/share", json={"is_public": True}, headers=auth(other))

    assert response.status_code == 403


def test_toggle_sharing_on_missing_trip(client, owner, auth):
    response = client.post("/api/trips/999/share", json={"is_public": True}, headers=auth(owner))

    assert response.status_code == 404


def test_unknown_token_not_found(client):
    response = client.get("/api/shared/does-not-exist")

    assert response.status_code == 404


def test_never_shared_trip_not_reachable_by_token(client, owner, make_trip):
    """Test that a trip that was never shared cannot be found by any token."""
    make_trip(owner)

    assert client.get("/api/shared/None").status_code == 404
    assert client.get("/api/shared/null").status_code == 404


def test_public_trip_by_token(client, db, owner, city, make_trip):
    """Test the anonymous view: expenses newest first and resolved costs."""
    trip = make_trip(owner, is_public=True, share_token="tok-anon0001", budget_food=2500)
    db.add_all([
        Expense(trip_id=trip.id, name="Museum", category=ItemCategory.ACTIVITIES,
                amount=1500, currency="EUR", date=date(2025, 5, 1)),
        Expense(trip_id=trip.id, name="Dinner", category=ItemCategory.FOOD,
                amount=3200, currency="EUR", date=date(2025, 5, 2)),
    ])
    db.commit()

    response = client.get("/api/shared/tok-anon0001")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == trip.id
    assert "share_token" not in data
    assert "user_id" not in data
    assert [expense["name"] for expense in data["expenses"]] == ["Dinner", "Museum"]
    assert Decimal(data["effective_costs"]["food"]) == Decimal("25")
    assert Decimal(data["effective_costs"]["accommodation"]) == Decimal("80")


def test_share_with_user(client, owner, other, make_trip, auth):
    trip = make_trip(owner)

    response = client.post(
        f"/api/trips/{trip.id}/share/user",
        json={"email": other.email, "message": "Come along"},
        headers=auth(owner)
    )

    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == other.id
    assert data["message"] == "Come along"

    listed = client.get(f"/api/trips/{trip.id}/share/user", headers=auth(owner))
    assert [share["email"] for share in listed.json()] == [other.email]

    read = client.get(f"/api/trips/{trip.id}", headers=auth(other))
    assert read.status_code == 200


def test_share_with_user_errors(client, owner, other, make_trip, auth):
    trip = make_trip(owner)
    url = f"/api/trips/{trip.id}/share/user"

    unknown = client.post(url, json={"email": "nobody@example.com"}, headers=auth(owner))
    self_share = client.post(url, json={"email": owner.email}, headers=auth(owner))
    first = client.post(url, json={"email": other.email}, headers=auth(owner))
    duplicate = client.post(url, json={"email": other.email}, headers=auth(owner))
    invalid = client.post(url, json={"email": "not-an-email"}, headers=auth(owner))

    assert unknown.status_code == 404
    assert self_share.status_code == 400
    assert first.status_code == 201
    assert duplicate.status_code == 409
    assert invalid.status_code == 422


def test_share_list_and_grant_are_owner_only(client, owner, other, make_trip, auth):
    trip = make_trip(owner, is_public=True, share_token="tok-ownonly1")

    listed = client.get(f"/api/trips/{trip.id}/share/user", headers=auth(other))
    granted = client.post(
        f"/api/trips/{trip.id}/share/user", json={"email": owner.email}, headers=auth(other)
    )

    assert listed.status_code == 403
    assert granted.status_code == 403


def test_revoke_user_share(client, db, owner, other, make_trip, auth):
    """Test that revoking an explicit share removes the recipient's access."""
    trip = make_trip(owner)
    db.add(SharedTrip(trip_id=trip.id, shared_with_id=other.id, shared_by_id=owner.id))
    db.commit()

    by_recipient = client.delete(f"/api/trips/{trip.id}/share/user/{other.id}", headers=auth(other))
    revoked = client.delete(f"/api/trips/{trip.id}/share/user/{other.id}", headers=auth(owner))
    again = client.delete(f"/api/trips/{trip.id}/share/user/{other.id}", headers=auth(owner))

    assert by_recipient.status_code == 403
    assert revoked.status_code == 200
    assert revoked.json() == {"success": True}
    assert again.status_code == 404
    assert client.get(f"/api/trips/{trip.id}", headers=auth(other)).status_code == 403


def test_revoked_link_with_kept_token_not_found(client, owner, make_trip):
    make_trip(owner, is_public=False, share_token="tok-revoked1")

    response = client.get("/api/shared/tok-revoked1")

    assert response.status_code == 404
