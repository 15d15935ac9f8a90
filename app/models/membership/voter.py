"""Voter model."""

VOTER_DDL = """
CREATE TABLE IF NOT EXISTS voter (
    id VARCHAR PRIMARY KEY,
    account VARCHAR,
    voting_power VARCHAR,
    flow_council VARCHAR,
    created_at_block BIGINT,
    created_at_timestamp BIGINT,
    ballot VARCHAR
)
"""
