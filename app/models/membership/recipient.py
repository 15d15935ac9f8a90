"""Recipient model."""

RECIPIENT_DDL = """
CREATE TABLE IF NOT EXISTS recipient (
    id VARCHAR PRIMARY KEY,
    account VARCHAR,
    metadata VARCHAR,
    flow_council VARCHAR,
    created_at_block BIGINT,
    created_at_timestamp BIGINT
)
"""
