# storefront/model/order.py
from ..extensions import db
from .product import _utcnow

# pending -> completed | archived, completed -> archived
ORDER_STATUSES = ("pending", "completed", "archived")
PAYMENT_METHODS = ("cash", "paypal")


class Order(db.Model):
    __tablename__ = "orders"
    __table_args__ = (
        db.CheckConstraint(
            "status IN ('pending', 'completed', 'archived')", name="ck_orders_status"
        ),
        db.CheckConstraint(
            "payment_method IN ('cash', 'paypal')", name="ck_orders_payment_method"
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    order_uid = db.Column(db.String(32), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=_utcnow, nullable=False, index=True)
    status = db.Column(db.String(16), nullable=False, default="pending", index=True)
    payment_method = db.Column(db.String(16), nullable=False)
    total = db.Column(db.Integer, nullable=False)    # minor units, server computed

    items = db.relationship(
        "OrderItem",
        backref="order",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="OrderItem.id.asc()",
    )

    def as_api(self):
        return {
            "id": self.id,
            "orderUid": self.order_uid,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "status": self.status,
            "paymentMethod": self.payment_method,
            "total": self.total,
            "items": [i.as_api() for i in self.items],
        }


class OrderItem(db.Model):
    __tablename__ = "order_items"
    __table_args__ = (
        db.CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
    )

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False, index=True)

    # Snapshot of the product at purchase time (not a FK constraint)
    product_id = db.Column(db.Integer, nullable=True, index=True)
    name = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Integer, nullable=False)
    quantity = db.Column(db.Integer, nullable=False)

    def as_api(self):
        return {
            "productId": self.product_id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
        }
