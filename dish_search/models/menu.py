"""
Menu items offered by a restaurant.
"""
from sqlalchemy import CheckConstraint, Column, Integer, String, Numeric, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import relationship

from dish_search.db.base import Base


class MenuItem(Base):
    """
    A dish at a given price.

    A restaurant may list the same dish name more than once at different
    prices, so (restaurant_id, dish_name) is not unique.
    """
    __tablename__ = "menu_items"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_menu_items_price_non_negative"),
        Index("idx_restaurant_id", "restaurant_id"),
        Index("idx_dish_name", "dish_name"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False)
    dish_name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    restaurant = relationship("Restaurant", back_populates="menu_items")
    orders = relationship(
        "Order",
        back_populates="menu_item",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<MenuItem id={self.id} dish_name={self.dish_name!r} price={self.price}>"
