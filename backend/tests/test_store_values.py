"""
Store value tests: one row per shop, shop selector, no delete.
"""

from shoptracker.extensions import db
from shoptracker.models import StoreValue
from shoptracker.services import entity_service
from shoptracker.services.entity_service import STORE_VALUES
from shoptracker.validation import ConflictError

import pytest

from conftest import add_store_value


class TestAvailableShops:

    def test_excludes_shops_with_values(self, app, shop_a, shop_b):
        add_store_value(shop_a.id, 100, 10)
        shops = entity_service.available_shops()
        assert [shop["id"] for shop in shops] == [shop_b.id]

    def test_editing_keeps_own_shop(self, app, shop_a, shop_b):
        value = add_store_value(shop_a.id, 100, 10)
        add_store_value(shop_b.id, 200, 20)

        shops = entity_service.available_shops(editing_id=value.id)
        assert [shop["id"] for shop in shops] == [shop_a.id]

    def test_endpoint(self, client, headers, shop_a, shop_b):
        value = add_store_value(shop_a.id, 100, 10)

        resp = client.get("/api/store-values/available-shops", headers=headers)
        assert resp.status_code == 200
        assert [shop["id"] for shop in resp.json["shops"]] == [shop_b.id]

        resp = client.get(f"/api/store-values/available-shops?editing={value.id}", headers=headers)
        assert {shop["id"] for shop in resp.json["shops"]} == {shop_a.id, shop_b.id}


class TestStoreValueApi:

    def test_create_and_list_with_shop_name(self, client, headers, shop_a):
        resp = client.post(
            "/api/store-values",
            json={"shop_id": shop_a.id, "goods_value": "1500.50", "cash_value": 250},
            headers=headers,
        )
        assert resp.status_code == 201
        assert resp.json["goods_value"] == 1500.5

        rows = client.get("/api/store-values", headers=headers).json["rows"]
        assert rows[0]["shop_name"] == "Baixa Store"
        assert rows[0]["cash_value"] == 250

    def test_list_total_and_row_totals(self, client, headers, shop_a, shop_b):
        add_store_value(shop_a.id, 1000, 250.5)
        add_store_value(shop_b.id, 500, 0)

        body = client.get("/api/store-values", headers=headers).json
        assert body["total"] == 1750.5
        assert "".join(ch for ch in body["formatted_total"] if ch.isdigit()) == "1751"

        rows = {row["shop_name"]: row for row in body["rows"]}
        assert rows["Baixa Store"]["total_value"] == 1250.5
        assert set(rows["Baixa Store"]["formatted"]) == {"goods_value", "cash_value", "total_value"}

    def test_second_value_for_shop_conflicts(self, client, headers, shop_a):
        add_store_value(shop_a.id, 100, 10)
        resp = client.post(
            "/api/store-values",
            json={"shop_id": shop_a.id, "goods_value": 1, "cash_value": 1},
            headers=headers,
        )
        assert resp.status_code == 409
        assert resp.json["error"] == "This shop already has a store value"
        assert db.session.query(StoreValue).count() == 1

    def test_update_own_row_allowed(self, client, headers, shop_a):
        value = add_store_value(shop_a.id, 100, 10)
        resp = client.put(
            f"/api/store-values/{value.id}",
            json={"shop_id": shop_a.id, "goods_value": 300, "cash_value": 30},
            headers=headers,
        )
        assert resp.status_code == 200
        assert resp.json["goods_value"] == 300

    def test_move_to_taken_shop_conflicts(self, client, headers, shop_a, shop_b):
        value = add_store_value(shop_a.id, 100, 10)
        add_store_value(shop_b.id, 200, 20)
        resp = client.put(
            f"/api/store-values/{value.id}",
            json={"shop_id": shop_b.id},
            headers=headers,
        )
        assert resp.status_code == 409

    def test_delete_not_allowed(self, client, headers, shop_a):
        value = add_store_value(shop_a.id, 100, 10)
        resp = client.delete(f"/api/store-values/{value.id}?confirm=true", headers=headers)
        assert resp.status_code == 405
        assert db.session.query(StoreValue).count() == 1

    def test_service_delete_refused(self, app, shop_a):
        value = add_store_value(shop_a.id, 100, 10)
        with pytest.raises(entity_service.EntityError):
            entity_service.delete_row(STORE_VALUES, value.id, confirmed=True)

    def test_service_create_conflict(self, app, shop_a):
        add_store_value(shop_a.id, 100, 10)
        with pytest.raises(ConflictError):
            entity_service.create_row(
                STORE_VALUES, {"shop_id": shop_a.id, "goods_value": 1, "cash_value": 2}
            )
