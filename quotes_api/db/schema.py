# quotes_api/db/schema.py

from sqlalchemy import MetaData, Table, Column, Integer, Text

metadata = MetaData()

# Timestamps are kept as the same ISO-8601 strings the JSON file uses
quotes = Table(
    "quotes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("text", Text, nullable=True),
    Column("author", Text, nullable=True),
    Column("created_at", Text, nullable=True),
    Column("updated_at", Text, nullable=True),
)
