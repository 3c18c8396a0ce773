from __future__ import annotations

from ..extensions import db
from ..time_utils import to_utc_z, utcnow
from .common import new_uuid


class Sale(db.Model):
    """
    A recorded revenue event for one shop on one calendar date.

    amount is expected to be non-negative and shop_id to reference an
    existing shop; neither is enforced here.
    """
    __tablename__ = "sales"
    __table_args__ = (
        db.Index("ix_sales_shop_date", "shop_id", "date"),
    )

    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    date = db.Column(db.Date, nullable=False, index=True)
    shop_id = db.Column(db.String(36), nullable=False)
    amount = db.Column(db.Float, nullable=False, default=0.0)
    notes = db.Column(db.Text, nullable=False, default="")

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Sale id={self.id} shop_id={self.shop_id} date={self.date}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat() if self.date else None,
            "shop_id": self.shop_id,
            "amount": self.amount,
            "notes": self.notes,
            "created_at": to_utc_z(self.created_at),
            "updated_at": to_utc_z(self.updated_at),
        }
