# storefront/product/routes.py
from flask import request, jsonify, url_for

from . import bp
from ..errors import NotFound
from ..schemas import ProductChanges, ProductInput
from ..services import catalog_service
from ..utils.api import api_error
from ..utils.decorators import admin_required


# GET /api/products
@bp.get("")
def list_products():
    return jsonify([p.as_api() for p in catalog_service.list_products()])


# GET /api/products/<id>
@bp.get("/<int:pid>")
def get_product(pid):
    product = catalog_service.get_product(pid)
    if not product:
        raise NotFound(f"Product {pid} not found")
    return jsonify(product.as_api())


# POST /api/products
@bp.post("")
@admin_required
def create_product():
    body = ProductInput.from_json(request.get_json(silent=True))
    product = catalog_service.add_product(body.name, body.price, image_url=body.image_url)
    resp = jsonify(product.as_api())
    resp.status_code = 201
    resp.headers["Location"] = url_for("product.get_product", pid=product.id)
    return resp


# PUT /api/products/<id>
@bp.put("/<int:pid>")
@admin_required
def update_product(pid):
    changes = ProductChanges.from_json(request.get_json(silent=True))
    if changes.is_empty or not catalog_service.update_product(pid, changes.values):
        return api_error("validation_error", "No changes or not found", 400)
    return jsonify(success=True)


# DELETE /api/products/<id>
@bp.delete("/<int:pid>")
@admin_required
def delete_product(pid):
    return jsonify(success=catalog_service.delete_product(pid))
