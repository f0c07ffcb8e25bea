# storefront/services/order_service.py
"""
Order persistence: checkout writes, admin listing and status transitions.

An order and its items are written in one session transaction. Status
changes are single conditional UPDATE statements so two admins racing on
the same order can never move it backwards.
"""
import secrets
import string

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import ConflictError, StorageError, ValidationError
from ..extensions import db
from ..model import Order, OrderItem, PAYMENT_METHODS
from ..schemas import MAX_MONEY

ORDER_UID_ALPHABET = string.ascii_uppercase + string.digits


def generate_order_uid(length=10) -> str:
    return "".join(secrets.choice(ORDER_UID_ALPHABET) for _ in range(length))


def normalize_order_uid(order_uid) -> str:
    return (order_uid or "").strip().upper()


def _is_uid_collision(exc: IntegrityError) -> bool:
    return "order_uid" in str(exc.orig).lower()


def compute_total(items) -> int:
    return sum(it.price * it.quantity for it in items)


def _build_order(order_uid, items, payment_method) -> Order:
    order = Order(
        order_uid=order_uid,
        status="pending",
        payment_method=payment_method,
        total=compute_total(items),
    )
    for it in items:
        order.items.append(OrderItem(
            product_id=it.product_id,
            name=it.name,
            price=it.price,
            quantity=it.quantity,
        ))
    return order


def create_order(items, payment_method) -> Order:
    """
    Persist a pending order with snapshot items and a server computed total.

    `items` is a sequence of CheckoutItem. A collision on the order UID is
    retried with a fresh UID up to ORDER_UID_MAX_ATTEMPTS times, then
    surfaces as ConflictError. Any other failure rolls the whole order back.
    """
    if not items:
        raise ValidationError("items required")
    if payment_method not in PAYMENT_METHODS:
        raise ValidationError("invalid paymentMethod")
    total = compute_total(items)
    if total > MAX_MONEY:
        raise ValidationError(f"order total must not exceed {MAX_MONEY}")

    length = current_app.config.get("ORDER_UID_LENGTH", 10)
    attempts = current_app.config.get("ORDER_UID_MAX_ATTEMPTS", 3)

    for attempt in range(1, attempts + 1):
        uid = generate_order_uid(length)
        order = _build_order(uid, items, payment_method)
        try:
            db.session.add(order)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            if not _is_uid_collision(e):
                current_app.logger.exception("orders: integrity failure while creating order")
                raise StorageError("Failed to create order")
            current_app.logger.warning(
                "orders: uid collision on %s (attempt %d/%d)", uid, attempt, attempts
            )
            continue
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("orders: failed to create order")
            raise StorageError("Failed to create order")

        current_app.logger.info(
            "orders: created %s total=%s items=%d method=%s",
            order.order_uid, order.total, len(order.items), order.payment_method,
        )
        return order

    raise ConflictError("Could not allocate a unique order UID")


def list_orders(include_archived=False):
    q = Order.query
    if not include_archived:
        q = q.filter(Order.status != "archived")
    return q.order_by(Order.created_at.desc(), Order.id.desc()).all()


def get_order_by_uid(order_uid):
    return Order.query.filter_by(order_uid=normalize_order_uid(order_uid)).first()


def _transition(order_uid, from_statuses, to_status) -> bool:
    try:
        changed = (
            Order.query
            .filter(Order.order_uid == normalize_order_uid(order_uid),
                    Order.status.in_(from_statuses))
            .update({Order.status: to_status}, synchronize_session=False)
        )
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("orders: status change to %s failed", to_status)
        raise StorageError("Failed to update order")
    if changed:
        current_app.logger.info("orders: %s -> %s", normalize_order_uid(order_uid), to_status)
    return changed > 0


def mark_order_completed(order_uid) -> bool:
    return _transition(order_uid, ("pending",), "completed")


def archive_order(order_uid) -> bool:
    return _transition(order_uid, ("pending", "completed"), "archived")
