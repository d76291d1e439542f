# scripts/setup/init_db.py
"""
Initialize database — creates the authorities and fee_transfers tables,
and optionally registers verified authorities.
Usage: python scripts/setup/init_db.py [--authority ST1... --authority ST2...]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from datetime import datetime
from app.database import SessionLocal, create_tables, engine
from app.config import settings
from app.models.authority import Authority
from sqlalchemy import inspect, text


def seed_authorities(identities):
    db = SessionLocal()
    try:
        for identity in identities:
            existing = db.query(Authority).filter(Authority.identity == identity).first()
            if existing:
                existing.is_verified = 1
                print(f"   ↺ {identity} (already registered, re-verified)")
                continue
            db.add(Authority(identity=identity, is_verified=1, registered_at=datetime.utcnow()))
            print(f"   ✓ {identity}")
        db.commit()
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Create registry tables and seed authorities")
    parser.add_argument("--authority", action="append", default=[],
                        help="Identity to register as a verified authority (repeatable)")
    args = parser.parse_args()

    print("🗄️  Alert Registry DB Initialization")
    print("=" * 40)
    print(f"📡 Database: {settings.DATABASE_URL}")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("✅ Database connection OK")
    except Exception as e:
        print(f"❌ Cannot connect to database: {e}")
        sys.exit(1)

    print("\n📋 Creating tables...")
    create_tables()
    tables = sorted(inspect(engine).get_table_names())
    print(f"✅ Tables in database ({len(tables)} total): {', '.join(tables)}")

    if args.authority:
        print("\n🛡️  Registering authorities:")
        seed_authorities(args.authority)

    print("\n🎉 Database ready! Start the backend with AUTHORITY_BACKEND=database to use it:")
    print("   uvicorn app.main:app --host 0.0.0.0 --port 8080 --reload")


if __name__ == "__main__":
    main()
