from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship

from dish_search.db.base import Base


class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    menu_items = relationship(
        "MenuItem",
        back_populates="restaurant",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Restaurant id={self.id} name={self.name!r}>"
