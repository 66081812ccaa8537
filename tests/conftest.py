import os

if "DATABASE_URL" not in os.environ:
	os.environ["DATABASE_URL"] = "sqlite+pysqlite:///./test_flower_shop.db"
