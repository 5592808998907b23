"""Ledger store: product CRUD and the stock-mutation rule."""
import random

import pytest

from conftest import product_payload
from models.log import Log
from utils.errors import InsufficientStock, NotFound, ValidationFailed
from utils.storage import CollectionStorage


def _tx(product_id, type_, quantity, **extra):
    data = {"productId": product_id, "type": type_, "quantity": quantity, "reason": "test"}
    data.update(extra)
    return data


# -------------------------
# Products
# -------------------------
def test_create_product_assigns_id_and_timestamps(ledger):
    product = ledger.create_product(product_payload())

    assert product.id
    assert product.created_at == product.updated_at
    assert product.unit == "pieces"
    assert ledger.get_product(product.id) == product


def test_create_product_does_not_enforce_unique_sku(ledger):
    first = ledger.create_product(product_payload())
    second = ledger.create_product(product_payload())

    assert first.id != second.id
    assert [p.sku for p in ledger.get_products()] == ["DRILL-18V", "DRILL-18V"]


def test_update_product_merges_partial_fields(ledger):
    product = ledger.create_product(product_payload())

    updated = ledger.update_product(product.id, {"name": "Hammer Drill", "reorderPoint": 8})

    assert updated.name == "Hammer Drill"
    assert updated.reorder_point == 8
    untouched = {"name", "reorder_point", "updated_at"}
    assert updated.model_dump(exclude=untouched) == product.model_dump(exclude=untouched)
    assert updated.created_at == product.created_at
    assert updated.updated_at >= product.updated_at
    assert ledger.get_product(product.id) == updated


def test_update_product_cannot_overwrite_id(ledger):
    product = ledger.create_product(product_payload())

    updated = ledger.update_product(product.id, {"id": "hijacked", "location": "Aisle 4"})

    assert updated.id == product.id
    assert updated.location == "Aisle 4"


def test_update_product_rejects_negative_stock(ledger):
    product = ledger.create_product(product_payload())

    with pytest.raises(ValidationFailed) as exc:
        ledger.update_product(product.id, {"currentStock": -1})
    assert exc.value.field == "currentStock"
    assert ledger.get_product(product.id).current_stock == 10


def test_update_missing_product(ledger):
    with pytest.raises(NotFound):
        ledger.update_product("nope", {"name": "x"})


def test_delete_product(ledger):
    product = ledger.create_product(product_payload())

    ledger.delete_product(product.id)

    assert ledger.get_products() == []
    with pytest.raises(NotFound):
        ledger.delete_product(product.id)


# -------------------------
# Stock mutation rule
# -------------------------
def test_in_transaction_adds_quantity(ledger):
    product = ledger.create_product(product_payload(currentStock=10))

    ledger.create_transaction(_tx(product.id, "in", 7))

    assert ledger.get_product(product.id).current_stock == 17


def test_out_transaction_subtracts_quantity(ledger):
    product = ledger.create_product(product_payload(currentStock=10))

    ledger.create_transaction(_tx(product.id, "out", 4))

    assert ledger.get_product(product.id).current_stock == 6


def test_adjustment_applies_signed_quantity(ledger):
    product = ledger.create_product(product_payload(currentStock=10))

    ledger.create_transaction(_tx(product.id, "adjustment", -3))
    assert ledger.get_product(product.id).current_stock == 7

    ledger.create_transaction(_tx(product.id, "adjustment", 5))
    assert ledger.get_product(product.id).current_stock == 12


def test_adjustment_below_zero_clamps(ledger):
    product = ledger.create_product(product_payload(currentStock=3))

    ledger.create_transaction(_tx(product.id, "adjustment", -10))

    assert ledger.get_product(product.id).current_stock == 0


@pytest.mark.parametrize("type_", ["in", "out"])
def test_negative_in_out_quantity_is_rejected(ledger, type_):
    product = ledger.create_product(product_payload(currentStock=10))

    with pytest.raises(ValidationFailed) as exc:
        ledger.create_transaction(_tx(product.id, type_, -5))

    assert exc.value.field == "quantity"
    assert ledger.get_transactions() == []
    assert ledger.get_product(product.id).current_stock == 10


def test_unchecked_stock_out_clamps_to_zero_in_lenient_mode(lenient_ledger):
    product = lenient_ledger.create_product(product_payload(currentStock=3))

    tx = lenient_ledger.create_transaction(_tx(product.id, "out", 5))

    assert tx.quantity == 5
    assert lenient_ledger.get_product(product.id).current_stock == 0
    assert len(lenient_ledger.get_transactions()) == 1


def test_stock_out_past_available_is_rejected_in_strict_mode(ledger):
    product = ledger.create_product(product_payload(currentStock=3))

    with pytest.raises(InsufficientStock) as exc:
        ledger.create_transaction(_tx(product.id, "out", 5))

    assert exc.value.available == 3
    assert exc.value.requested == 5
    # Nothing was written
    assert ledger.get_transactions() == []
    assert ledger.get_product(product.id).current_stock == 3


def test_transaction_restamps_product(ledger):
    product = ledger.create_product(product_payload())

    tx = ledger.create_transaction(_tx(product.id, "in", 1))

    assert ledger.get_product(product.id).updated_at == tx.performed_at


def test_transaction_for_unknown_product(ledger):
    with pytest.raises(NotFound):
        ledger.create_transaction(_tx("missing", "in", 1))
    assert ledger.get_transactions() == []


@pytest.mark.parametrize("data, field", [
    ({"type": "transfer", "quantity": 1}, "type"),
    ({"type": "in", "quantity": 0}, "quantity"),
    ({"type": "in", "quantity": "many"}, "quantity"),
    ({"type": "in", "quantity": 1, "reason": ""}, "reason"),
])
def test_transaction_validation(ledger, data, field):
    product = ledger.create_product(product_payload())
    payload = {"productId": product.id, "reason": "test", **data}

    with pytest.raises(ValidationFailed) as exc:
        ledger.create_transaction(payload)
    assert exc.value.field == field


def test_transaction_snapshots_product_name_and_value(ledger):
    product = ledger.create_product(product_payload())

    tx = ledger.create_transaction(_tx(product.id, "adjustment", -2, unitPrice=7.5))
    ledger.update_product(product.id, {"name": "Renamed Drill"})

    stored = ledger.get_transactions()[0]
    assert tx.total_value == 15.0
    assert stored.product_name == "Cordless Drill"
    assert stored.performed_by == "admin"


def test_transaction_without_unit_price_has_no_value(ledger):
    product = ledger.create_product(product_payload())

    tx = ledger.create_transaction(_tx(product.id, "in", 3))

    assert tx.unit_price is None
    assert tx.total_value is None


def test_stock_never_negative_over_random_sequence(lenient_ledger):
    rng = random.Random(7)
    product = lenient_ledger.create_product(product_payload(currentStock=5))
    expected = 5

    for _ in range(40):
        type_ = rng.choice(["in", "out", "adjustment"])
        quantity = rng.randint(1, 12)
        if type_ == "adjustment":
            quantity *= rng.choice([-1, 1])
        lenient_ledger.create_transaction(_tx(product.id, type_, quantity))

        delta = {"in": quantity, "out": -quantity, "adjustment": quantity}[type_]
        expected = max(0, expected + delta)
        current = lenient_ledger.get_product(product.id).current_stock
        assert current >= 0
        assert current == expected


def test_append_and_stock_mutation_roll_back_together(ledger, monkeypatch):
    product = ledger.create_product(product_payload(currentStock=10))
    original_save = CollectionStorage.save

    def failing_save(self, entity, records):
        if entity == "products":
            raise RuntimeError("disk full")
        return original_save(self, entity, records)

    monkeypatch.setattr(CollectionStorage, "save", failing_save)
    with pytest.raises(RuntimeError):
        ledger.create_transaction(_tx(product.id, "in", 5))
    monkeypatch.undo()

    assert ledger.get_transactions() == []
    assert ledger.get_product(product.id).current_stock == 10


def test_mutations_are_audited(ledger, session_factory):
    product = ledger.create_product(product_payload())
    ledger.create_transaction(_tx(product.id, "in", 2, performedBy="staff1"))

    with session_factory() as db:
        actions = [(log.action, log.actor) for log in db.query(Log).order_by(Log.id)]

    assert actions == [("PRODUCT_CREATE", None), ("STOCK_TRANSACTION", "staff1")]


# -------------------------
# Reference data & seeding
# -------------------------
def test_unsaved_collections_fall_back_to_sample_data(sample_ledger):
    assert len(sample_ledger.get_products()) == 5
    assert [c.name for c in sample_ledger.get_categories()][0] == "Electronics"
    assert sample_ledger.get_users()[0].username == "admin"


def test_initialize_data_seeds_only_missing_collections(sample_ledger):
    assert sample_ledger.initialize_data() == ["products", "transactions", "suppliers", "categories", "users"]
    assert sample_ledger.initialize_data() == []


def test_supplier_crud(ledger):
    supplier = ledger.create_supplier({"name": "Acme Tools", "email": "sales@acmetools.com"})

    updated = ledger.update_supplier(supplier.id, {"paymentTerms": "Net 60"})

    assert updated.payment_terms == "Net 60"
    assert updated.name == "Acme Tools"
    assert ledger.get_supplier(supplier.id) == updated
    with pytest.raises(NotFound):
        ledger.get_supplier("missing")


def test_blank_supplier_email_is_stored_as_missing(ledger):
    supplier = ledger.create_supplier({"name": "Corner Hardware", "email": "  "})
    assert supplier.email is None

    updated = ledger.update_supplier(supplier.id, {"email": "", "city": "Leeds"})
    assert updated.email is None
    assert updated.city == "Leeds"


def test_products_by_category_and_supplier(ledger):
    ledger.create_product(product_payload(sku="A", category="Tools", supplier="Acme"))
    ledger.create_product(product_payload(sku="B", category="Paint", supplier="Acme"))

    assert [p.sku for p in ledger.products_by_category("Paint")] == ["B"]
    assert [p.sku for p in ledger.products_by_supplier("Acme")] == ["A", "B"]
