# storefront/model/product.py
from datetime import datetime, timezone
from ..extensions import db


def _utcnow():
    return datetime.now(timezone.utc)


class Product(db.Model):
    __tablename__ = "product"
    __table_args__ = (
        db.CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False, index=True)
    image_url = db.Column(db.String(1024))
    price = db.Column(db.Integer, nullable=False, default=0)   # minor units (cents/agorot)
    created_at = db.Column(db.DateTime, default=_utcnow, nullable=False)

    def as_api(self):
        return {
            "id": self.id,
            "name": self.name,
            "imageUrl": self.image_url,
            "price": self.price,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
