"""
Seed loader: wipes the dish search tables and refills them with the sample
catalog, generating order history so search results have a realistic
popularity ranking.

Generated identifiers are not known before insertion, so orders are built in
two phases: insert the catalog, then re-read the menu items into a lookup
keyed by (restaurant position, dish name) and resolve each order volume
against it.
"""
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import insert, select, text
from sqlalchemy.engine import Connection, Engine, Row

from dish_search.db.base import Base
from dish_search.models import MenuItem, Order, Restaurant
from dish_search.services.schema import create_schema
from dish_search.services.seed_catalog import (
    MENU_ITEMS,
    ORDER_VOLUMES,
    RESTAURANTS,
    MenuItemSeed,
    OrderVolume,
    RestaurantSeed,
)

logger = logging.getLogger(__name__)

MenuLookup = Dict[Tuple[int, str], List[Row]]


@dataclass
class SeedSummary:
    """Row counts inserted by one seed run."""
    restaurants: int
    menu_items: int
    orders: int


def seed_database(
    engine: Engine,
    restaurants: Sequence[RestaurantSeed] = RESTAURANTS,
    menu_items: Sequence[MenuItemSeed] = MENU_ITEMS,
    order_volumes: Sequence[OrderVolume] = ORDER_VOLUMES,
) -> SeedSummary:
    """
    Reset all three tables and load the catalog.

    Runs on a single connection which is released whether or not the seed
    succeeds. Any error aborts the run and is re-raised to the caller.
    """
    with engine.connect() as conn:
        create_schema(conn)
        conn.commit()

        clear_tables(conn)
        logger.info("Old data cleared")

        restaurant_ids = insert_restaurants(conn, restaurants)
        conn.commit()
        logger.info(f"Added {len(restaurant_ids)} restaurants")

        insert_menu_items(conn, menu_items, restaurant_ids)
        conn.commit()
        logger.info(f"Added {len(menu_items)} dishes")

        lookup = build_menu_lookup(conn, restaurant_ids)
        order_rows = expand_orders(order_volumes, lookup)
        if order_rows:
            conn.execute(insert(Order), order_rows)
            conn.commit()
            logger.info(f"Added {len(order_rows)} orders")

    logger.info("Seeding done")
    return SeedSummary(
        restaurants=len(restaurant_ids),
        menu_items=len(menu_items),
        orders=len(order_rows),
    )


def clear_tables(conn: Connection) -> None:
    """Remove every row from orders, menu_items and restaurants."""
    tables = list(reversed(Base.metadata.sorted_tables))

    if conn.dialect.name == "postgresql":
        names = ", ".join(table.name for table in tables)
        conn.execute(text(f"TRUNCATE TABLE {names} RESTART IDENTITY CASCADE"))
        conn.commit()
        return

    if conn.dialect.name != "sqlite":
        for table in tables:
            conn.execute(table.delete())
        conn.commit()
        return

    # The pragma is ignored inside a transaction, so toggle it between commits
    conn.execute(text("PRAGMA foreign_keys=OFF"))
    try:
        for table in tables:
            conn.execute(table.delete())
        conn.commit()
    finally:
        conn.rollback()
        conn.execute(text("PRAGMA foreign_keys=ON"))
        conn.commit()


def insert_restaurants(conn: Connection, restaurants: Sequence[RestaurantSeed]) -> Dict[int, int]:
    """Insert restaurants and map each 1-based catalog position to its new id."""
    if not restaurants:
        return {}

    conn.execute(
        insert(Restaurant),
        [{"name": r.name, "city": r.city} for r in restaurants],
    )
    # The table was just emptied, so id order is insertion order
    ids = conn.execute(select(Restaurant.id).order_by(Restaurant.id)).scalars().all()
    return {position: restaurant_id for position, restaurant_id in enumerate(ids, start=1)}


def insert_menu_items(
    conn: Connection,
    menu_items: Sequence[MenuItemSeed],
    restaurant_ids: Dict[int, int],
) -> None:
    if not menu_items:
        return

    rows = []
    for item in menu_items:
        if item.restaurant not in restaurant_ids:
            raise ValueError(
                f"Menu item {item.dish_name!r} references unknown restaurant position {item.restaurant}"
            )
        rows.append({
            "restaurant_id": restaurant_ids[item.restaurant],
            "dish_name": item.dish_name,
            "price": item.price,
        })
    conn.execute(insert(MenuItem), rows)


def build_menu_lookup(conn: Connection, restaurant_ids: Dict[int, int]) -> MenuLookup:
    """Index the stored menu items by (restaurant position, dish name)."""
    position_by_id = {restaurant_id: position for position, restaurant_id in restaurant_ids.items()}
    rows = conn.execute(
        select(MenuItem.id, MenuItem.restaurant_id, MenuItem.dish_name, MenuItem.price)
        .order_by(MenuItem.id)
    ).all()

    lookup: MenuLookup = defaultdict(list)
    for row in rows:
        position = position_by_id.get(row.restaurant_id)
        if position is not None:
            lookup[(position, row.dish_name)].append(row)
    return lookup


def find_menu_item(lookup: MenuLookup, volume: OrderVolume) -> Optional[int]:
    """
    Resolve an order volume to a menu item id.

    With a price, only the item at exactly that price matches; without one,
    the first stored item with that name is used.
    """
    candidates = lookup.get((volume.restaurant, volume.dish_name), [])
    if volume.price is None:
        return candidates[0].id if candidates else None
    for row in candidates:
        if row.price == volume.price:
            return row.id
    return None


def expand_orders(order_volumes: Sequence[OrderVolume], lookup: MenuLookup) -> List[dict]:
    """One order row per unit of count; unresolved volumes contribute nothing."""
    order_rows: List[dict] = []
    for volume in order_volumes:
        menu_item_id = find_menu_item(lookup, volume)
        if menu_item_id is None:
            logger.debug(
                f"No menu item for {volume.dish_name!r} at restaurant {volume.restaurant}, skipping"
            )
            continue
        order_rows.extend({"menu_item_id": menu_item_id} for _ in range(volume.count))
    return order_rows
