# storefront/order/routes.py
from flask import request, jsonify

from . import bp
from ..errors import NotFound
from ..schemas import CheckoutRequest
from ..services import order_service
from ..utils.api import parse_bool
from ..utils.decorators import admin_required


# POST /api/orders  (public checkout)
@bp.post("")
def checkout():
    body = CheckoutRequest.from_json(request.get_json(silent=True))
    order = order_service.create_order(body.items, body.payment_method)
    resp = jsonify(order.as_api())
    resp.status_code = 201
    resp.headers["X-Order-Uid"] = order.order_uid
    return resp


@bp.get("")
@admin_required
def list_orders():
    """
    Query params:
      - includeArchived=true|false (default false)
    """
    include_archived = parse_bool(request.args.get("includeArchived"))
    orders = order_service.list_orders(include_archived=include_archived)
    return jsonify([o.as_api() for o in orders])


@bp.get("/<order_uid>")
@admin_required
def get_order(order_uid):
    order = order_service.get_order_by_uid(order_uid)
    if not order:
        raise NotFound("order not found")
    return jsonify(order.as_api())


@bp.post("/<order_uid>/complete")
@admin_required
def complete_order(order_uid):
    return jsonify(success=order_service.mark_order_completed(order_uid))


@bp.post("/<order_uid>/archive")
@admin_required
def archive_order(order_uid):
    return jsonify(success=order_service.archive_order(order_uid))
