"""Data source registry - council instances tracked for event delivery."""

DATA_SOURCE_DDL = """
CREATE TABLE IF NOT EXISTS data_source (
    address VARCHAR PRIMARY KEY,
    template VARCHAR NOT NULL,
    created_at_block BIGINT,
    created_at_timestamp BIGINT
)
"""
