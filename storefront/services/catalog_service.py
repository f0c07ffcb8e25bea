# storefront/services/catalog_service.py
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError
from ..extensions import db
from ..model import Product
from ..schemas import require_money, require_name, optional_image_url

# Seed catalog for an empty store (prices in minor units)
SAMPLE_PRODUCTS = [
    {"name": "Example Product 1", "image_url": "https://via.placeholder.com/300x200?text=Product+1", "price": 3990},
    {"name": "Example Product 2", "image_url": "https://via.placeholder.com/300x200?text=Product+2", "price": 2590},
    {"name": "Example Product 3", "image_url": "https://via.placeholder.com/300x200?text=Product+3", "price": 1490},
    {"name": "Example Product 4", "image_url": "https://via.placeholder.com/300x200?text=Product+4", "price": 990},
    {"name": "Example Product 5", "image_url": "https://via.placeholder.com/300x200?text=Product+5", "price": 1990},
    {"name": "Example Product 6", "image_url": "https://via.placeholder.com/300x200?text=Product+6", "price": 2990},
]


def _commit(action: str):
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("catalog: %s failed", action)
        raise StorageError(f"Failed to {action}")


def list_products():
    # newest first (id desc)
    return Product.query.order_by(Product.id.desc()).all()


def get_product(product_id):
    return db.session.get(Product, product_id)


def add_product(name, price, image_url=None) -> Product:
    product = Product(
        name=require_name(name),
        price=require_money(price),
        image_url=optional_image_url(image_url),
    )
    db.session.add(product)
    _commit("add product")
    current_app.logger.info("catalog: product %s created (%r, price=%s)", product.id, product.name, product.price)
    return product


def update_product(product_id, changes: dict) -> bool:
    """
    Apply a partial update among name / image_url / price.
    Returns False when nothing recognized was supplied or the id is unknown.
    """
    values = {}
    if "name" in changes:
        values["name"] = require_name(changes["name"])
    if "image_url" in changes:
        values["image_url"] = optional_image_url(changes["image_url"])
    if "price" in changes:
        values["price"] = require_money(changes["price"])
    if not values:
        return False

    product = db.session.get(Product, product_id)
    if not product:
        return False
    for field, value in values.items():
        setattr(product, field, value)
    _commit("update product")
    current_app.logger.info("catalog: product %s updated (%s)", product_id, ", ".join(sorted(values)))
    return True


def delete_product(product_id) -> bool:
    # order items keep their own snapshot; nothing else to touch
    product = db.session.get(Product, product_id)
    if not product:
        return False
    db.session.delete(product)
    _commit("delete product")
    current_app.logger.info("catalog: product %s deleted", product_id)
    return True


def seed_sample_products() -> int:
    if db.session.query(Product.id).first() is not None:
        return 0
    for data in SAMPLE_PRODUCTS:
        db.session.add(Product(**data))
    _commit("seed products")
    return len(SAMPLE_PRODUCTS)
