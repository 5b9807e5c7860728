from __future__ import annotations

import pytest

from directory_api.domain.errors import ValidationError
from directory_api.repositories.json_storage import JSONPurchaseLog
from directory_api.services.purchase_service import PurchaseService


@pytest.fixture()
def purchases(tmp_path):
    return PurchaseService(JSONPurchaseLog(tmp_path / "buy.json"))


def test_single_purchase_is_stamped(purchases):
    saved = purchases.record({"product": "tea", "qty": 2})
    assert len(saved) == 1
    assert saved[0]["product"] == "tea"
    assert saved[0]["date"].endswith("Z")
    assert purchases.list_purchases() == saved


def test_batch_purchases_accumulate(purchases):
    purchases.record({"product": "tea"})
    purchases.record([{"product": "milk"}, {"product": "bread"}])
    assert [p["product"] for p in purchases.list_purchases()] == ["tea", "milk", "bread"]


def test_client_date_is_overwritten(purchases):
    saved = purchases.record({"product": "tea", "date": "yesterday"})
    assert saved[0]["date"] != "yesterday"


def test_non_object_items_are_rejected(purchases):
    with pytest.raises(ValidationError):
        purchases.record([{"product": "tea"}, "oops"])
    assert purchases.list_purchases() == []
