"""
Orders placed against a menu item.

An order has no quantity or customer: each row is one unit of popularity,
and the number of rows for a menu item is its order count.
"""
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import relationship

from dish_search.db.base import Base


class Order(Base):
    __tablename__ = "orders"
    __table_args__ = (
        Index("idx_menu_item_id", "menu_item_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    menu_item_id = Column(Integer, ForeignKey("menu_items.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    menu_item = relationship("MenuItem", back_populates="orders")
