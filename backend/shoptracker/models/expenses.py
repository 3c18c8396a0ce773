from __future__ import annotations

from ..extensions import db
from ..time_utils import to_utc_z, utcnow
from .common import new_uuid

EXPENSE_CATEGORIES = (
    "Rent",
    "Fuel",
    "Salaries",
    "Utilities",
    "Supplies",
    "Marketing",
    "Maintenance",
    "Other",
)


class Expense(db.Model):
    """A recorded cost event, categorized but not linked to any shop."""
    __tablename__ = "expenses"

    id = db.Column(db.String(36), primary_key=True, default=new_uuid)
    date = db.Column(db.Date, nullable=False, index=True)
    category = db.Column(db.String(32), nullable=False, index=True)
    amount = db.Column(db.Float, nullable=False, default=0.0)
    notes = db.Column(db.Text, nullable=False, default="")

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Expense id={self.id} category={self.category!r} date={self.date}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat() if self.date else None,
            "category": self.category,
            "amount": self.amount,
            "notes": self.notes,
            "created_at": to_utc_z(self.created_at),
            "updated_at": to_utc_z(self.updated_at),
        }
