from unittest import mock

import pytest

from stockroom.app import create_app, main
from stockroom.inventory import Inventory


@pytest.fixture
def inventory():
    return Inventory()


@pytest.fixture
def client(inventory):
    app = create_app(inventory)
    app.testing = True
    return app.test_client()


def _add_source(client, name="Warehouse"):
    return client.post("/sources", json={"name": name}).get_json()["data"]


def _add_product(client, source_id, price=10.0, stock=5, name="Widget"):
    body = {"name": name, "price": price, "stock": stock, "source_id": source_id}
    return client.post("/products", json=body).get_json()["data"]


def test_welcome_and_ping(client):
    assert client.get("/").get_json() == {"message": "welcome!"}
    assert client.get("/ping").get_json() == {"message": "pong!"}


def test_list_products_starts_empty(client):
    response = client.get("/products")
    assert response.status_code == 200
    assert response.get_json() == {
        "message": "success get all products",
        "data": [],
        "error": None,
    }


def test_add_product_then_fetch(client):
    response = client.post(
        "/products",
        json={"name": "Widget", "description": "small", "price": 2.5, "stock": 4},
    )
    assert response.status_code == 201
    body = response.get_json()
    assert body["message"] == "Success - Product added"
    assert body["error"] is None
    created = body["data"]
    assert created["name"] == "Widget"
    assert created["stock"] == 4

    fetched = client.get(f"/products/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.get_json()["data"] == created
    assert client.get("/products").get_json()["data"] == [created]


def test_add_product_rejects_bad_values(client):
    response = client.post("/products", json={"name": "", "price": 1.0, "stock": 1})
    assert response.status_code == 400
    assert response.get_json() == {
        "message": "error - Invalid product input",
        "data": None,
        "error": "Invalid product input",
    }


def test_malformed_json_is_invalid_input(client):
    response = client.post(
        "/products", data="{not json", content_type="application/json"
    )
    assert response.status_code == 400
    body = response.get_json()
    assert body["message"] == "error - Invalid input"
    assert body["data"] is None
    assert body["error"]


def test_missing_product_is_404(client):
    response = client.get("/products/missing")
    assert response.status_code == 404
    assert response.get_json() == {
        "message": "Error - Product not found",
        "data": None,
        "error": "Product not found",
    }


def test_update_product(client):
    created = _add_product(client, "")
    response = client.put(
        f"/products/{created['id']}", json={"name": "Gadget", "stock": 9}
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body["message"] == "Success - Product updated"
    assert body["data"]["name"] == "Gadget"
    assert body["data"]["stock"] == 9
    assert body["data"]["price"] == created["price"]


@pytest.mark.parametrize(
    "update, error",
    [
        ({"name": ""}, "Product name cannot be empty"),
        ({"price": 0}, "Product price must be greater than 0"),
        ({"stock": -1}, "Product stock cannot be negative"),
    ],
)
def test_update_product_validation(client, update, error):
    created = _add_product(client, "")
    response = client.put(f"/products/{created['id']}", json=update)
    assert response.status_code == 400
    assert response.get_json()["error"] == error
    assert client.get(f"/products/{created['id']}").get_json()["data"] == created


def test_update_missing_product_is_404(client):
    response = client.put("/products/missing", json={"name": "Gadget"})
    assert response.status_code == 404
    assert response.get_json()["error"] == "Product not found"


def test_delete_product(client):
    created = _add_product(client, "")
    response = client.delete(f"/products/{created['id']}")
    assert response.status_code == 200
    assert response.get_json() == {"message": "Success - Product deleted"}
    assert client.get(f"/products/{created['id']}").status_code == 404
    assert client.delete(f"/products/{created['id']}").status_code == 404


def test_source_lifecycle(client):
    response = client.post("/sources", json={"name": "Warehouse"})
    assert response.status_code == 201
    assert response.get_json()["message"] == "Success - Source added"
    created = response.get_json()["data"]
    assert created["name"] == "Warehouse"

    fetched = client.get(f"/sources/{created['id']}").get_json()
    assert fetched["message"] == "success get source by ID"
    assert fetched["data"] == created

    updated = client.put(f"/sources/{created['id']}", json={"name": "Depot"}).get_json()
    assert updated["message"] == "Success - Source updated"
    assert updated["data"]["name"] == "Depot"

    listed = client.get("/sources").get_json()
    assert listed["message"] == "success get all sources"
    assert listed["data"] == [updated["data"]]

    deleted = client.delete(f"/sources/{created['id']}")
    assert deleted.status_code == 200
    assert deleted.get_json() == {
        "message": "Success - Source deleted",
        "data": None,
        "error": None,
    }
    missing = client.get(f"/sources/{created['id']}")
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "Source not found"


def test_transaction_reduces_stock(client):
    source = _add_source(client)
    product = _add_product(client, source["id"])
    response = client.post(
        "/transactions", json={"product_id": product["id"], "quantity": 2}
    )
    assert response.status_code == 201
    body = response.get_json()
    assert body["message"] == "Success - Transaction created"
    transaction = body["data"]
    assert transaction["product_id"] == product["id"]
    assert transaction["quantity"] == 2

    after = client.get(f"/products/{product['id']}").get_json()["data"]
    assert after["stock"] + transaction["quantity"] == product["stock"]

    fetched = client.get(f"/transactions/{transaction['id']}").get_json()
    assert fetched["message"] == "success get transaction by ID"
    assert fetched["data"] == transaction
    assert client.get("/transactions").get_json()["data"] == [transaction]


def test_transaction_errors(client):
    missing = client.post("/transactions", json={"product_id": "nope", "quantity": 1})
    assert missing.status_code == 404
    assert missing.get_json()["error"] == "Product not found"

    orphan = _add_product(client, "no-such-source")
    no_source = client.post(
        "/transactions", json={"product_id": orphan["id"], "quantity": 1}
    )
    assert no_source.status_code == 404
    assert no_source.get_json()["error"] == "Source for this product not found"

    source = _add_source(client)
    product = _add_product(client, source["id"], stock=1)
    zero = client.post("/transactions", json={"product_id": product["id"], "quantity": 0})
    assert zero.status_code == 400
    assert zero.get_json()["error"] == "Quantity must be greater than 0"

    too_many = client.post(
        "/transactions", json={"product_id": product["id"], "quantity": 2}
    )
    assert too_many.status_code == 400
    assert too_many.get_json()["error"] == "Not enough stock"


def test_missing_transaction_is_404(client):
    response = client.get("/transactions/missing")
    assert response.status_code == 404
    assert response.get_json()["message"] == "Error - Transaction not found"


def test_app_shares_given_inventory(client, inventory):
    created = _add_product(client, "")
    assert [p.to_dict() for p in inventory.list_products()] == [created]


def test_main_runs_server(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    with mock.patch("flask.Flask.run") as run:
        assert main([]) == 0
    run.assert_called_once_with(host="0.0.0.0", port=8080)


def test_main_honours_options(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    with mock.patch("flask.Flask.run") as run:
        result = main(["--host", "127.0.0.1"])
    assert result == 0
    assert run.call_count == 1
    assert run.call_args.kwargs == {"host": "127.0.0.1", "port": 9001}