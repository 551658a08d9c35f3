"""Tests for the session cart routes."""

from decimal import Decimal
from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs, urlparse

import pytest

from apnacart.api.deps import get_catalog
from apnacart.services.catalog_client import CatalogClient


@pytest.fixture
def tomato_id(client):
    return client.post("/api/vegetables", json={"name": "Tomato", "fixed_weight": "500g"}).json()["id"]


@pytest.fixture
def beetroot_id(client):
    return client.post("/api/vegetables", json={"name": "Beetroot", "fixed_weight": "250g"}).json()["id"]


@pytest.fixture
def cart_id(client):
    resp = client.post("/carts")
    assert resp.status_code == 201
    return resp.json()["cart_id"]


def select(client, cart_id, size):
    resp = client.put(f"/carts/{cart_id}/size", json={"cart_size": size})
    assert resp.status_code == 200
    return resp.json()


def add(client, cart_id, vegetable_id, **extra):
    return client.post(f"/carts/{cart_id}/items", json={"vegetable_id": vegetable_id, **extra})


class TestCartLifecycle:
    def test_new_cart_is_unset(self, client, cart_id):
        body = client.get(f"/carts/{cart_id}").json()
        assert body["cart_size"] is None
        assert body["items"] == []
        assert body["remaining_weight"] == "0.00kg"
        assert Decimal(body["capacity_kg"]) == 0

    def test_unknown_cart(self, client):
        assert client.get("/carts/does-not-exist").status_code == 404

    def test_discard(self, client, cart_id):
        assert client.delete(f"/carts/{cart_id}").status_code == 204
        assert client.get(f"/carts/{cart_id}").status_code == 404
        assert client.delete(f"/carts/{cart_id}").status_code == 404

    def test_add_before_size_rejected(self, client, cart_id, tomato_id):
        resp = add(client, cart_id, tomato_id)
        assert resp.status_code == 409
        assert "cart size" in resp.json()["detail"]

    def test_invalid_size(self, client, cart_id):
        assert client.put(f"/carts/{cart_id}/size", json={"cart_size": "huge"}).status_code == 422


class TestCartFlow:
    def test_scenario_a(self, client, cart_id, tomato_id):
        select(client, cart_id, "small")
        resp = add(client, cart_id, tomato_id)
        assert resp.status_code == 200

        body = resp.json()
        assert Decimal(body["total_weight_kg"]) == Decimal("0.5")
        assert body["total_weight"] == "0.5kg"
        assert body["remaining_weight"] == "4.00kg"
        assert body["items"][0]["name"] == "Tomato"
        assert body["items"][0]["weight"] == "500g"
        assert body["items"][0]["quantity"] == 1
        assert body["items"][0]["image_url"] == "/images/Tomato.jpeg"

    def test_fill_to_capacity_then_reject(self, client, cart_id, tomato_id, beetroot_id):
        select(client, cart_id, "small")
        add(client, cart_id, tomato_id)

        body = client.patch(f"/carts/{cart_id}/items/{tomato_id}", json={"quantity": 9}).json()
        assert Decimal(body["total_weight_kg"]) == Decimal("4.5")
        assert body["is_at_capacity"] is True

        assert add(client, cart_id, beetroot_id).status_code == 409
        assert client.patch(f"/carts/{cart_id}/items/{tomato_id}", json={"quantity": 10}).status_code == 409

        body = client.get(f"/carts/{cart_id}").json()
        assert body["items"][0]["quantity"] == 9
        assert len(body["items"]) == 1

    def test_weight_override(self, client, cart_id, tomato_id):
        select(client, cart_id, "family")
        body = add(client, cart_id, tomato_id, weight="1kg").json()
        assert body["items"][0]["weight"] == "1kg"
        assert Decimal(body["total_weight_kg"]) == Decimal("1")

    def test_line_display_weights(self, client, cart_id, tomato_id, beetroot_id):
        select(client, cart_id, "small")
        add(client, cart_id, beetroot_id)
        add(client, cart_id, tomato_id)
        body = client.patch(f"/carts/{cart_id}/items/{tomato_id}", json={"quantity": 3}).json()

        beetroot, tomato = body["items"]
        assert beetroot["weight"] == "250g"
        assert beetroot["line_weight"] == "250g"
        assert tomato["weight"] == "500g"
        assert tomato["line_weight"] == "1.5kg"
        assert Decimal(tomato["line_weight_kg"]) == Decimal("1.5")

    def test_unknown_vegetable(self, client, cart_id):
        select(client, cart_id, "small")
        assert add(client, cart_id, 999).status_code == 404

    def test_quantity_zero_removes(self, client, cart_id, tomato_id):
        select(client, cart_id, "small")
        add(client, cart_id, tomato_id)
        body = client.patch(f"/carts/{cart_id}/items/{tomato_id}", json={"quantity": 0}).json()
        assert body["items"] == []

    def test_quantity_of_missing_line(self, client, cart_id, tomato_id):
        select(client, cart_id, "small")
        assert client.patch(f"/carts/{cart_id}/items/{tomato_id}", json={"quantity": 2}).status_code == 404

    def test_remove_missing_is_noop(self, client, cart_id, tomato_id):
        select(client, cart_id, "small")
        add(client, cart_id, tomato_id)
        resp = client.delete(f"/carts/{cart_id}/items/999")
        assert resp.status_code == 200
        assert len(resp.json()["items"]) == 1

    def test_remove_and_clear(self, client, cart_id, tomato_id, beetroot_id):
        select(client, cart_id, "family")
        add(client, cart_id, tomato_id)
        add(client, cart_id, beetroot_id)

        body = client.delete(f"/carts/{cart_id}/items/{tomato_id}").json()
        assert [i["name"] for i in body["items"]] == ["Beetroot"]

        body = client.delete(f"/carts/{cart_id}/items").json()
        assert body["items"] == []
        assert body["cart_size"] == "family"

    def test_reselect_clears(self, client, cart_id, tomato_id):
        select(client, cart_id, "small")
        add(client, cart_id, tomato_id)
        body = select(client, cart_id, "small")
        assert body["items"] == []
        assert Decimal(body["total_weight_kg"]) == 0

    def test_capacity_check(self, client, cart_id, tomato_id):
        select(client, cart_id, "small")
        add(client, cart_id, tomato_id)
        client.patch(f"/carts/{cart_id}/items/{tomato_id}", json={"quantity": 8})

        ok = client.get(f"/carts/{cart_id}/capacity", params={"weight_kg": "0.5"}).json()
        assert ok["can_add"] is True
        assert ok["would_exceed"] is False

        too_much = client.get(f"/carts/{cart_id}/capacity", params={"weight_kg": "0.75"}).json()
        assert too_much["can_add"] is False
        assert too_much["would_exceed"] is True


class TestCheckout:
    def test_checkout_message_and_link(self, client, cart_id, tomato_id, beetroot_id):
        select(client, cart_id, "small")
        add(client, cart_id, tomato_id)
        add(client, cart_id, beetroot_id)

        resp = client.post(f"/carts/{cart_id}/checkout")
        assert resp.status_code == 200
        body = resp.json()

        assert "*Cart Type:* Small Cart (4.5kg)" in body["message"]
        assert "Tomato – 500g x1 = 0.50kg" in body["message"]
        assert "*Total Weight:* 0.75kg" in body["message"]

        url = urlparse(body["order_url"])
        assert url.netloc == "wa.me"
        assert url.path == "/919100018181"
        assert parse_qs(url.query)["text"] == [body["message"]]

        # cart is still there after the handoff
        assert len(client.get(f"/carts/{cart_id}").json()["items"]) == 2

    def test_checkout_empty_cart(self, client, cart_id):
        select(client, cart_id, "small")
        assert client.post(f"/carts/{cart_id}/checkout").status_code == 400

    def test_checkout_unset_cart(self, client, cart_id):
        assert client.post(f"/carts/{cart_id}/checkout").status_code == 409


class TestRemoteCatalog:
    @pytest.fixture
    def remote(self, client):
        client.app.dependency_overrides[get_catalog] = lambda: CatalogClient(base_url="http://catalog.local")
        with patch("time.sleep"):
            yield
        client.app.dependency_overrides.clear()

    def remote_answers(self, payload):
        resp = MagicMock()
        resp.status_code = 200
        resp.json.return_value = payload
        return patch("apnacart.services.catalog_client.requests.get", return_value=resp)

    def test_add_from_remote_catalog(self, client, cart_id, remote):
        select(client, cart_id, "small")
        with self.remote_answers({"id": 5, "name": "Carrot", "fixed_weight": "500g", "image_url": "Carrot.webp"}):
            resp = add(client, cart_id, 5)

        assert resp.status_code == 200
        assert resp.json()["items"][0]["image_url"] == "/images/Carrot.webp"

    def test_malformed_row_is_bad_gateway(self, client, cart_id, remote):
        select(client, cart_id, "small")
        with self.remote_answers({"id": 5, "name": "Carrot"}):
            resp = add(client, cart_id, 5)

        assert resp.status_code == 502
        assert client.get(f"/carts/{cart_id}").json()["items"] == []
