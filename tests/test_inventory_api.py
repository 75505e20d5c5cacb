import pytest


def _headers(supplier_id):
    return {"X-Supplier-ID": str(supplier_id)}


@pytest.fixture()
def supplier(make_supplier):
    return make_supplier("Owner")


@pytest.fixture()
def rival(make_supplier):
    return make_supplier("Rival")


def test_create_item_sets_owner_from_header(client, supplier):
    response = client.post(
        "/inventory",
        json={"name": "Widget", "category": "Parts", "quantity": 5},
        headers=_headers(supplier["id"]),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Inventory item created successfully"
    assert body["data"]["supplier_id"] == supplier["id"]
    assert body["data"]["quantity"] == 5


def test_create_item_ignores_supplier_id_in_body(client, supplier, rival):
    response = client.post(
        "/inventory",
        json={"name": "Widget", "category": "Parts", "supplier_id": rival["id"]},
        headers=_headers(supplier["id"]),
    )

    assert response.status_code == 201
    assert response.json()["data"]["supplier_id"] == supplier["id"]


def test_create_item_defaults_quantity_to_zero(client, make_item, supplier):
    item = make_item(supplier["id"])

    assert item["quantity"] == 0


@pytest.mark.parametrize("header", [None, "", "abc", "0", "-3"])
def test_create_item_without_valid_header_fails(client, header):
    headers = {} if header is None else {"X-Supplier-ID": header}

    response = client.post("/inventory", json={"name": "Widget", "category": "Parts"}, headers=headers)

    assert response.status_code == 400
    assert response.json()["errors"] == ["Supplier ID is required in header (X-Supplier-ID)"]


def test_create_item_with_unknown_supplier_fails(client):
    response = client.post("/inventory", json={"name": "Widget", "category": "Parts"}, headers=_headers(99))

    assert response.status_code == 400
    assert response.json()["errors"] == ["Supplier does not exist"]


def test_create_item_with_negative_quantity_fails(client, supplier):
    response = client.post(
        "/inventory",
        json={"name": "Widget", "category": "Parts", "quantity": -1},
        headers=_headers(supplier["id"]),
    )

    assert response.status_code == 400
    assert response.json()["errors"] == ["Quantity must be a non-negative number"]


def test_create_item_collects_all_field_errors(client, supplier):
    response = client.post("/inventory", json={"category": "c" * 300}, headers=_headers(supplier["id"]))

    assert response.status_code == 400
    assert response.json()["errors"] == [
        "Name is required",
        "Category cannot exceed 255 characters",
    ]


def test_create_item_with_non_numeric_quantity_fails(client, supplier):
    response = client.post(
        "/inventory",
        json={"name": "Widget", "category": "Parts", "quantity": "lots"},
        headers=_headers(supplier["id"]),
    )

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert len(errors) == 1
    assert errors[0].startswith("quantity:")


def test_create_item_with_oversized_quantity_fails(client, supplier):
    response = client.post(
        "/inventory",
        json={"name": "Widget", "category": "Parts", "quantity": 2**70},
        headers=_headers(supplier["id"]),
    )

    assert response.status_code == 400
    assert response.json()["errors"] == ["Quantity cannot exceed 2147483647"]


@pytest.mark.parametrize("quantity", [True, 3.0, "4"])
def test_create_item_rejects_non_integer_quantity_types(client, supplier, quantity):
    response = client.post(
        "/inventory",
        json={"name": "Widget", "category": "Parts", "quantity": quantity},
        headers=_headers(supplier["id"]),
    )

    assert response.status_code == 400
    assert response.json()["errors"][0].startswith("quantity:")
    assert client.get("/inventory").json()["data"] == []


def test_list_inventory_scoped_by_header(client, make_item, supplier, rival):
    mine = make_item(supplier["id"], name="Mine")
    make_item(rival["id"], name="Theirs")

    everything = client.get("/inventory").json()["data"]
    scoped = client.get("/inventory", headers=_headers(supplier["id"])).json()["data"]

    assert len(everything) == 2
    assert [item["id"] for item in scoped] == [mine["id"]]


def test_list_inventory_with_unknown_supplier_fails(client):
    response = client.get("/inventory", headers=_headers(404))

    assert response.status_code == 400
    assert response.json()["errors"] == ["Supplier does not exist"]


def test_get_item(client, make_item, supplier):
    item = make_item(supplier["id"], quantity=3)

    response = client.get(f"/inventory/{item['id']}")

    assert response.status_code == 200
    assert response.json()["data"] == item


def test_get_item_owned_by_someone_else_is_forbidden(client, make_item, supplier, rival):
    item = make_item(supplier["id"])

    response = client.get(f"/inventory/{item['id']}", headers=_headers(rival["id"]))

    assert response.status_code == 403
    assert response.json() == {"message": "Forbidden", "error": "Inventory item does not belong to this supplier"}


def test_get_missing_item_returns_404(client):
    response = client.get("/inventory/12345")

    assert response.status_code == 404
    assert response.json()["error"] == "Inventory item not found"


def test_update_item_by_owner(client, make_item, supplier):
    item = make_item(supplier["id"], quantity=4)

    response = client.put(
        f"/inventory/{item['id']}",
        json={"name": "Renamed", "category": "Tools", "quantity": 12},
        headers=_headers(supplier["id"]),
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert (data["name"], data["category"], data["quantity"], data["supplier_id"]) == ("Renamed", "Tools", 12, supplier["id"])


def test_update_item_without_quantity_resets_it(client, make_item, supplier):
    item = make_item(supplier["id"], quantity=9)

    response = client.put(
        f"/inventory/{item['id']}",
        json={"name": "Bolt", "category": "Hardware"},
        headers=_headers(supplier["id"]),
    )

    assert response.json()["data"]["quantity"] == 0


def test_update_item_by_non_owner_is_forbidden_and_leaves_item(client, make_item, supplier, rival):
    item = make_item(supplier["id"], quantity=4)

    response = client.put(
        f"/inventory/{item['id']}",
        json={"name": "Stolen", "category": "Hardware", "quantity": 0},
        headers=_headers(rival["id"]),
    )

    assert response.status_code == 403
    assert client.get(f"/inventory/{item['id']}").json()["data"] == item


def test_update_checks_existence_before_fields(client, supplier):
    response = client.put("/inventory/77", json={"name": ""}, headers=_headers(supplier["id"]))

    assert response.status_code == 404


def test_update_checks_ownership_before_fields(client, make_item, supplier, rival):
    item = make_item(supplier["id"])

    response = client.put(f"/inventory/{item['id']}", json={"name": ""}, headers=_headers(rival["id"]))

    assert response.status_code == 403


def test_update_item_requires_header(client, make_item, supplier):
    item = make_item(supplier["id"])

    response = client.put(f"/inventory/{item['id']}", json={"name": "X", "category": "Y"})

    assert response.status_code == 400


def test_detached_item_cannot_be_updated(client, make_item, supplier, rival):
    item = make_item(supplier["id"])
    client.delete(f"/suppliers/{supplier['id']}")

    response = client.put(
        f"/inventory/{item['id']}",
        json={"name": "Claimed", "category": "Hardware"},
        headers=_headers(rival["id"]),
    )

    assert response.status_code == 403


def test_delete_item_by_owner(client, make_item, supplier):
    item = make_item(supplier["id"])

    response = client.delete(f"/inventory/{item['id']}", headers=_headers(supplier["id"]))

    assert response.status_code == 200
    assert response.json() == {"message": "Inventory item deleted successfully", "data": {"id": item["id"]}}
    assert client.get(f"/inventory/{item['id']}").status_code == 404


def test_delete_item_by_non_owner_is_forbidden(client, make_item, supplier, rival):
    item = make_item(supplier["id"])

    response = client.delete(f"/inventory/{item['id']}", headers=_headers(rival["id"]))

    assert response.status_code == 403
    assert client.get(f"/inventory/{item['id']}").status_code == 200


def test_delete_missing_item_returns_404(client, supplier):
    assert client.delete("/inventory/5", headers=_headers(supplier["id"])).status_code == 404


@pytest.fixture()
def stocked(make_item, supplier, rival):
    return {
        "empty": make_item(supplier["id"], name="Empty", category="Hardware", quantity=0),
        "few": make_item(supplier["id"], name="Few", category="Hardware", quantity=9),
        "edge": make_item(supplier["id"], name="Edge", category="Paint", quantity=10),
        "many": make_item(rival["id"], name="Many", category="Hardware", quantity=50),
    }


def _names(response):
    assert response.status_code == 200, response.text
    return sorted(item["name"] for item in response.json()["data"])


def test_filter_low_stock(client, stocked):
    assert _names(client.get("/inventory/filter", params={"stock": "low"})) == ["Empty", "Few"]


def test_filter_out_of_stock(client, stocked):
    assert _names(client.get("/inventory/filter", params={"stock": "out"})) == ["Empty"]


def test_filter_in_stock(client, stocked):
    assert _names(client.get("/inventory/filter", params={"stock": "in"})) == ["Edge", "Few", "Many"]


def test_filter_by_category(client, stocked):
    assert _names(client.get("/inventory/filter", params={"category": "Paint"})) == ["Edge"]


def test_filter_combines_category_stock_and_supplier(client, stocked, supplier):
    response = client.get(
        "/inventory/filter",
        params={"category": "Hardware", "stock": "in"},
        headers=_headers(supplier["id"]),
    )

    assert _names(response) == ["Few"]


def test_filter_without_parameters_returns_everything(client, stocked):
    response = client.get("/inventory/filter")

    assert response.json()["message"] == "Inventory filtered successfully"
    assert len(response.json()["data"]) == 4


def test_filter_rejects_unknown_stock_value(client, stocked):
    response = client.get("/inventory/filter", params={"stock": "bogus"})

    assert response.status_code == 400
    assert response.json()["errors"] == ["Invalid stock filter. Use low, out, or in"]


def test_filter_rejects_oversized_category(client):
    response = client.get("/inventory/filter", params={"category": "x" * 256})

    assert response.status_code == 400
    assert response.json()["errors"] == ["Invalid category"]


def test_filter_with_unknown_supplier_fails(client):
    response = client.get("/inventory/filter", headers=_headers(31))

    assert response.status_code == 400


def test_supplier_deletion_round_trip(client, make_supplier, make_item):
    supplier = make_supplier("Round Trip")
    item = make_item(supplier["id"])

    assert client.get(f"/inventory/{item['id']}").json()["data"]["supplier_id"] == supplier["id"]

    client.delete(f"/suppliers/{supplier['id']}")

    assert client.get(f"/inventory/{item['id']}").json()["data"]["supplier_id"] is None


def test_oversized_header_is_treated_as_absent(client, make_item, supplier, rival):
    make_item(supplier["id"], name="Mine")
    make_item(rival["id"], name="Theirs")
    oversized = "99999999999999999999"

    listed = client.get("/inventory", headers={"X-Supplier-ID": oversized})
    assert listed.status_code == 200
    assert len(listed.json()["data"]) == 2

    created = client.post("/inventory", json={"name": "Widget", "category": "Parts"}, headers={"X-Supplier-ID": oversized})
    assert created.status_code == 400
    assert created.json()["errors"] == ["Supplier ID is required in header (X-Supplier-ID)"]


@pytest.mark.parametrize("method", ["get", "delete"])
def test_oversized_item_id_is_a_validation_error(client, supplier, method):
    response = getattr(client, method)("/inventory/99999999999999999999", headers=_headers(supplier["id"]))

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_update_with_oversized_item_id_is_a_validation_error(client, supplier):
    response = client.put(
        "/inventory/2147483648",
        json={"name": "Widget", "category": "Parts"},
        headers=_headers(supplier["id"]),
    )

    assert response.status_code == 400
