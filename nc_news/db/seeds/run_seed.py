"""Seed the configured database: ``python -m nc_news.db.seeds.run_seed``"""

from nc_news.db.data.test_data import data
from nc_news.db.seeds.seed import seed
from nc_news.db.session import SessionLocal


def main():
    db = SessionLocal()
    try:
        seed(db, data)
    finally:
        db.close()


if __name__ == "__main__":
    main()
