#!/usr/bin/env python3
"""Create missing tables and insert the demo products if the table is empty.

Unlike application startup this never drops tables, so it is safe to run
against an existing database in any environment.
"""

import sys

from pricelist.db.init_db import check_connection, seed_products, sync_schema
from pricelist.db.session import SessionLocal, engine

print("=" * 60)
print("Pricelist database seed")
print("=" * 60)

try:
    check_connection(engine)
    sync_schema(engine, reset=False)
except Exception as e:
    print(f"   Database unavailable: {e}")
    sys.exit(1)

db = SessionLocal()
try:
    inserted = seed_products(db)
finally:
    db.close()
    engine.dispose()

if inserted:
    print(f"   Inserted {inserted} demo products")
else:
    print("   Products table already populated, nothing inserted")
