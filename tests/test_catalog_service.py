import pytest

from storefront.errors import ValidationError
from storefront.extensions import db
from storefront.model import Order, OrderItem, Product
from storefront.schemas import CheckoutItem
from storefront.services import catalog_service, order_service


def test_add_product_round_trip(app):
    created = catalog_service.add_product("Mug", 1290, image_url="/uploads/mug.png")

    listed = catalog_service.list_products()
    assert len(listed) == 1
    p = listed[0]
    assert p.id == created.id
    assert (p.name, p.price, p.image_url) == ("Mug", 1290, "/uploads/mug.png")


def test_list_products_newest_first(app):
    first = catalog_service.add_product("First", 100)
    second = catalog_service.add_product("Second", 200)

    assert [p.id for p in catalog_service.list_products()] == [second.id, first.id]


def test_add_product_without_image(app):
    p = catalog_service.add_product("Plain", 0)
    assert p.image_url is None
    assert p.price == 0


@pytest.mark.parametrize("name, price", [
    ("", 100),
    ("   ", 100),
    (None, 100),
    ("Mug", -1),
    ("Mug", 9.99),
    ("Mug", "100"),
    ("Mug", True),
    ("Mug", None),
])
def test_add_product_rejects_invalid_input(app, name, price):
    with pytest.raises(ValidationError):
        catalog_service.add_product(name, price)
    assert Product.query.count() == 0


def test_update_product_partial(app):
    p = catalog_service.add_product("Mug", 1290, image_url="/uploads/a.png")

    assert catalog_service.update_product(p.id, {"price": 1500}) is True

    db.session.expire_all()
    p = db.session.get(Product, p.id)
    assert p.price == 1500
    assert p.name == "Mug"
    assert p.image_url == "/uploads/a.png"


def test_update_product_no_recognized_fields(app):
    p = catalog_service.add_product("Mug", 1290)
    assert catalog_service.update_product(p.id, {}) is False
    assert catalog_service.update_product(p.id, {"colour": "red"}) is False


def test_update_product_unknown_id(app):
    assert catalog_service.update_product(999, {"name": "Ghost"}) is False


def test_update_product_rejects_bad_price(app):
    p = catalog_service.add_product("Mug", 1290)
    with pytest.raises(ValidationError):
        catalog_service.update_product(p.id, {"price": -5})


def test_delete_product(app):
    p = catalog_service.add_product("Mug", 1290)
    assert catalog_service.delete_product(p.id) is True
    assert catalog_service.delete_product(p.id) is False
    assert catalog_service.list_products() == []


def test_delete_product_keeps_order_item_snapshot(app):
    p = catalog_service.add_product("Mug", 1290)
    order = order_service.create_order(
        [CheckoutItem(name="Mug", price=1290, quantity=2, product_id=p.id)], "cash"
    )

    catalog_service.update_product(p.id, {"name": "Renamed", "price": 1})
    catalog_service.delete_product(p.id)

    db.session.expire_all()
    item = OrderItem.query.filter_by(order_id=order.id).one()
    assert (item.product_id, item.name, item.price, item.quantity) == (p.id, "Mug", 1290, 2)
    assert db.session.get(Order, order.id).total == 2580


def test_seed_sample_products_only_when_empty(app):
    assert catalog_service.seed_sample_products() == len(catalog_service.SAMPLE_PRODUCTS)
    assert catalog_service.seed_sample_products() == 0
    assert Product.query.count() == len(catalog_service.SAMPLE_PRODUCTS)
