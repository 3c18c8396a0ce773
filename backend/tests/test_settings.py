"""
Settings screen and reset-all-data tests.
"""

import pytest

from shoptracker.extensions import db
from shoptracker.models import Expense, Sale, Shop, StoreValue, User
from shoptracker.services import settings_service
from shoptracker.services.entity_service import ConfirmationRequired

from conftest import add_expense, add_sale, add_store_value


def _seed(shop_a, shop_b):
    add_sale(shop_a.id, 100)
    add_sale(shop_b.id, 50)
    add_expense("Rent", 30)
    add_store_value(shop_a.id, 10, 5)


class TestSettingsOverview:

    def test_overview(self, client, headers):
        resp = client.get("/api/settings", headers=headers)
        assert resp.status_code == 200
        body = resp.json
        assert body["owner"] == {"name": "Owner Test", "email": "owner@shoptracker.test"}
        assert body["currency"]["code"] == "MZN"
        assert [c["code"] for c in body["currencies"]] == ["MZN", "USD", "EUR", "GBP"]
        assert body["about"] == {"version": "1.0.0", "application": "Shop Tracker Pro", "type": "MVP Demo"}


class TestResetAllData:

    def test_requires_confirmation(self, client, headers, shop_a, shop_b):
        _seed(shop_a, shop_b)
        for body in (None, {}, {"confirm": False}, {"confirm": "true"}):
            resp = client.post("/api/settings/reset", json=body, headers=headers)
            assert resp.status_code == 400
            assert resp.json["confirm_required"] is True
        assert db.session.query(Sale).count() == 2

    def test_non_object_body_rejected(self, client, headers, shop_a):
        resp = client.post("/api/settings/reset", json=[1], headers=headers)
        assert resp.status_code == 400
        assert resp.json["error"] == "Invalid JSON payload"
        assert db.session.query(Shop).count() == 1

    def test_reset_deletes_everything_but_users(self, client, headers, shop_a, shop_b):
        _seed(shop_a, shop_b)

        resp = client.post("/api/settings/reset", json={"confirm": True}, headers=headers)
        assert resp.status_code == 200
        assert resp.json["deleted"] == {"sales": 2, "expenses": 1, "store_values": 1, "shops": 2}

        for model in (Shop, Sale, Expense, StoreValue):
            assert db.session.query(model).count() == 0
        assert db.session.query(User).count() == 1

        # Still signed in afterwards
        assert client.get("/api/shops", headers=headers).status_code == 200

    def test_reset_empty_store(self, app):
        deleted = settings_service.reset_all_data(confirmed=True)
        assert deleted == {"sales": 0, "expenses": 0, "store_values": 0, "shops": 0}

    def test_service_requires_confirmation(self, app):
        with pytest.raises(ConfirmationRequired):
            settings_service.reset_all_data(confirmed=False)
