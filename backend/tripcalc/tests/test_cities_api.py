"""
Tests for public city endpoints and admin city management.
"""
from tripcalc.models import City


def city_payload(**overrides):
    payload = {
        "id": "lisbon",
        "name": "Lisbon",
        "country": "Portugal",
        "country_code": "PT",
        "currency": "EUR",
        "currency_symbol": "€",
        "language": "Portuguese",
        "latitude": 38.7223,
        "longitude": -9.1393,
        "last_updated": "2025-03",
    }
    payload.update(overrides)
    return payload


def test_list_cities_only_published(client, db, city):
    db.add(City(id="draft-town", name="Draft Town", country="Nowhere", currency="USD",
                currency_symbol="$", language="English", is_published=False, last_updated="2025-01"))
    db.commit()

    response = client.get("/api/cities")

    assert response.status_code == 200
    data = response.json()
    assert [c["id"] for c in data] == ["barcelona"]
    assert data[0]["flag"] == "\U0001F1EA\U0001F1F8"
    assert data[0]["distance_km"] is None


def test_list_cities_sorted_by_distance(client, db, city):
    db.add(City(id="madrid", name="Madrid", country="Spain", country_code="ES", currency="EUR",
                currency_symbol="€", language="Spanish", latitude=40.4168, longitude=-3.7038,
                is_published=True, last_updated="2025-01"))
    db.add(City(id="nowhere", name="Atlantis", country="Sea", currency="USD",
                currency_symbol="$", language="Greek", is_published=True, last_updated="2025-01"))
    db.commit()

    # Toledo, just south of Madrid
    response = client.get("/api/cities", params={"lat": 39.8628, "lon": -4.0273})

    data = response.json()
    assert [c["id"] for c in data] == ["madrid", "barcelona", "nowhere"]
    assert data[0]["distance_label"].endswith(" km")
    assert data[2]["distance_km"] is None


def test_get_city_detail(client, city):
    response = client.get("/api/cities/barcelona")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Barcelona"
    assert {cost["travel_style"] for cost in data["daily_costs"]} == {"budget", "midRange"}
    assert data["cash_info"] is None


def test_get_unpublished_city_not_found(client, db, city):
    city.is_published = False
    db.commit()

    assert client.get("/api/cities/barcelona").status_code == 404
    assert client.get("/api/cities/unknown").status_code == 404


def test_admin_routes_require_admin(client, owner, auth):
    assert client.get("/api/admin/cities").status_code == 401
    assert client.get("/api/admin/cities", headers=auth(owner)).status_code == 403
    assert client.post("/api/admin/cities", json=city_payload(), headers=auth(owner)).status_code == 403


def test_admin_create_and_publish_city(client, admin, auth):
    """Test that a new city stays hidden until published."""
    created = client.post("/api/admin/cities", json=city_payload(), headers=auth(admin))
    assert created.status_code == 201
    assert created.json()["is_published"] is False
    assert client.get("/api/cities/lisbon").status_code == 404

    published = client.post("/api/admin/cities/lisbon/publish", json={"is_published": True}, headers=auth(admin))

    assert published.status_code == 200
    assert client.get("/api/cities/lisbon").status_code == 200


def test_admin_create_city_validation_and_conflict(client, admin, city, auth):
    duplicate = client.post("/api/admin/cities", json=city_payload(id="barcelona"), headers=auth(admin))
    bad_id = client.post("/api/admin/cities", json=city_payload(id="Lisbon City"), headers=auth(admin))
    bad_month = client.post("/api/admin/cities", json=city_payload(last_updated="March"), headers=auth(admin))

    assert duplicate.status_code == 409
    assert bad_id.status_code == 422
    assert bad_month.status_code == 422


def test_admin_list_and_update_city(client, admin, city, auth):
    listed = client.get("/api/admin/cities", headers=auth(admin))
    assert listed.json()[0]["daily_cost_count"] == 2

    response = client.patch(
        "/api/admin/cities/barcelona", json={"description": "Gaudi and beaches"}, headers=auth(admin)
    )

    assert response.status_code == 200
    assert response.json()["description"] == "Gaudi and beaches"
    assert response.json()["name"] == "Barcelona"


def test_admin_daily_cost_presets(client, admin, owner, city, make_trip, auth):
    """Test that preset changes flow into trip cost resolution."""
    conflict = client.post(
        "/api/admin/cities/barcelona/costs",
        json={"travel_style": "budget", "accommodation": 100, "food": 100, "transport": 100, "activities": 100},
        headers=auth(admin)
    )
    assert conflict.status_code == 409

    created = client.post(
        "/api/admin/cities/barcelona/costs",
        json={"travel_style": "luxury", "accommodation": 30000, "food": 12000, "transport": 5000, "activities": 8000},
        headers=auth(admin)
    )
    assert created.status_code == 201
    cost_id = created.json()["id"]

    patched = client.patch(
        f"/api/admin/cities/barcelona/costs/{cost_id}", json={"food": 15000}, headers=auth(admin)
    )
    assert patched.json()["food"] == 15000
    assert patched.json()["accommodation"] == 30000

    trip = make_trip(owner, trip_style="LUXURY")
    costs = client.get(f"/api/trips/{trip.id}/costs", headers=auth(owner)).json()
    assert float(costs["effective_costs"]["food"]) == 150.0

    deleted = client.delete(f"/api/admin/cities/barcelona/costs/{cost_id}", headers=auth(admin))
    assert deleted.status_code == 200
    missing = client.delete(f"/api/admin/cities/barcelona/costs/{cost_id}", headers=auth(admin))
    assert missing.status_code == 404


def test_admin_transport_and_tips(client, admin, city, auth):
    transport = client.post(
        "/api/admin/cities/barcelona/transport",
        json={"type": "metro", "name": "T-casual", "price": 1215, "price_note": "10 rides"},
        headers=auth(admin)
    )
    tip = client.post(
        "/api/admin/cities/barcelona/tips",
        json={"category": "safety", "title": "Pickpockets", "content": "Watch your bag on La Rambla."},
        headers=auth(admin)
    )
    assert transport.status_code == 201
    assert tip.status_code == 201

    patched = client.patch(
        f"/api/admin/cities/barcelona/tips/{tip.json()['id']}", json={"order": 2}, headers=auth(admin)
    )
    assert patched.json()["order"] == 2

    detail = client.get("/api/cities/barcelona").json()
    assert [t["name"] for t in detail["transport"]] == ["T-casual"]
    assert [t["title"] for t in detail["tips"]] == ["Pickpockets"]

    wrong_city = client.delete(
        f"/api/admin/cities/madrid/transport/{transport.json()['id']}", headers=auth(admin)
    )
    assert wrong_city.status_code == 404


def test_admin_cash_info_is_unique_per_city(client, admin, city, auth):
    payload = {
        "cash_needed": "low",
        "cards_accepted": "widely",
        "atm_availability": "everywhere",
        "recommendations": "Cards work almost everywhere.",
    }

    first = client.post("/api/admin/cities/barcelona/cash-info", json=payload, headers=auth(admin))
    second = client.post("/api/admin/cities/barcelona/cash-info", json=payload, headers=auth(admin))
    invalid = client.patch(
        f"/api/admin/cities/barcelona/cash-info/{first.json()['id']}",
        json={"cash_needed": "none"},
        headers=auth(admin)
    )

    assert first.status_code == 201
    assert second.status_code == 409
    assert invalid.status_code == 422


def test_admin_delete_city(client, admin, city, auth):
    response = client.delete("/api/admin/cities/barcelona", headers=auth(admin))

    assert response.status_code == 200
    assert client.get("/api/admin/cities/barcelona", headers=auth(admin)).status_code == 404


def test_admin_patch_null_keeps_required_fields(client, admin, city, auth):
    """Test that null on a required field leaves it unchanged instead of failing."""
    response = client.patch(
        "/api/admin/cities/barcelona",
        json={"name": None, "description": "Gaudi", "region": None},
        headers=auth(admin)
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Barcelona"
    assert response.json()["description"] == "Gaudi"
    assert response.json()["region"] is None


def test_admin_patch_null_on_child_rows(client, admin, city, auth):
    cost_id = client.get("/api/admin/cities/barcelona", headers=auth(admin)).json()["daily_costs"][0]["id"]
    tip = client.post(
        "/api/admin/cities/barcelona/tips",
        json={"category": "food", "title": "Lunch menu", "content": "Menu del dia is cheap."},
        headers=auth(admin)
    ).json()

    cost = client.patch(
        f"/api/admin/cities/barcelona/costs/{cost_id}",
        json={"accommodation": None, "breakfast": None},
        headers=auth(admin)
    )
    patched_tip = client.patch(
        f"/api/admin/cities/barcelona/tips/{tip['id']}", json={"title": None, "order": None}, headers=auth(admin)
    )

    assert cost.status_code == 200
    assert cost.json()["accommodation"] > 0
    assert patched_tip.status_code == 200
    assert patched_tip.json()["title"] == "Lunch menu"
    assert patched_tip.json()["order"] == 0
