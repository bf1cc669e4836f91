"""Tests for the startup routine and demo seeding."""

from sqlalchemy import func, select

from pricelist.core.config import Settings
from pricelist.db.init_db import SEED_PRODUCTS, init_db, seed_products, sync_schema
from pricelist.db.models.product import Product
from pricelist.db.session import engine


def _count(db) -> int:
    return db.scalar(select(func.count(Product.id)))


def _settings(environment: str) -> Settings:
    return Settings(
        _env_file=None,
        database_url=str(engine.url),
        environment=environment,
    )


def test_seed_inserts_demo_rows_into_empty_table(db_session):
    sync_schema(engine, reset=True)

    inserted = seed_products(db_session)

    assert inserted == len(SEED_PRODUCTS)
    articles = db_session.scalars(select(Product.article_no).order_by(Product.id)).all()
    assert articles == ["ART-1001", "ART-1002"]


def test_seed_is_noop_when_table_has_rows(db_session):
    sync_schema(engine, reset=True)
    db_session.add(
        Product(article_no="OWN-1", product_name="Existing", in_price=1, price=2)
    )
    db_session.commit()

    assert seed_products(db_session) == 0
    assert seed_products(db_session) == 0
    assert _count(db_session) == 1


def test_development_startup_recreates_schema_and_seeds_once(db_session):
    sync_schema(engine, reset=True)
    db_session.add_all(
        [
            Product(article_no=f"OLD-{i}", product_name="Old", in_price=1, price=1)
            for i in range(4)
        ]
    )
    db_session.commit()

    init_db(engine, _settings("development"))
    init_db(engine, _settings("development"))

    db_session.expire_all()
    assert _count(db_session) == len(SEED_PRODUCTS)


def test_production_startup_keeps_data_and_never_seeds(db_session):
    sync_schema(engine, reset=True)

    init_db(engine, _settings("production"))
    assert _count(db_session) == 0

    db_session.add(
        Product(article_no="PROD-1", product_name="Live", in_price=3, price=4)
    )
    db_session.commit()

    init_db(engine, _settings("production"))

    db_session.expire_all()
    assert db_session.scalars(select(Product.article_no)).all() == ["PROD-1"]


def test_application_startup_seeds_outside_production(seeded_client):
    rows = seeded_client.get("/api/products").json()

    assert [row["article_no"] for row in rows] == ["ART-1001", "ART-1002"]
    assert rows[0]["price"] == "29.99"
