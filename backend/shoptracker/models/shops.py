from __future__ import annotations

from ..extensions import db
from ..time_utils import to_utc_z, utcnow
from .common import new_uuid


class Shop(db.Model):
    """
    A tracked physical retail location.

    Sales and store values reference shops by id, but no foreign key is
    declared: deleting a shop leaves its sales and store value rows in place.
    """
    __tablename__ = "shops"
    __table_args__ = (
        db.Index("ix_shops_created_at", "created_at"),
    )

    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    name = db.Column(db.String(120), nullable=False)
    location = db.Column(db.String(255), nullable=False, default="")
    manager_name = db.Column(db.String(120), nullable=False, default="")

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Shop id={self.id} name={self.name!r}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "location": self.location,
            "manager_name": self.manager_name,
            "created_at": to_utc_z(self.created_at),
            "updated_at": to_utc_z(self.updated_at),
        }


class StoreValue(db.Model):
    """
    Current goods inventory value and cash on hand for one shop.

    One row per shop is enforced by entity_service, not by a unique
    constraint.
    """
    __tablename__ = "store_values"

    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    shop_id = db.Column(db.String(36), nullable=False, index=True)
    goods_value = db.Column(db.Float, nullable=False, default=0.0)
    cash_value = db.Column(db.Float, nullable=False, default=0.0)

    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<StoreValue id={self.id} shop_id={self.shop_id}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "shop_id": self.shop_id,
            "goods_value": self.goods_value,
            "cash_value": self.cash_value,
            "updated_at": to_utc_z(self.updated_at),
        }
