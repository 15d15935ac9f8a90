"""Ballot (one Voted log) model."""

BALLOT_DDL = """
CREATE TABLE IF NOT EXISTS ballot (
    id VARCHAR PRIMARY KEY,
    flow_council VARCHAR,
    voter VARCHAR,
    votes VARCHAR[],
    created_at_block BIGINT,
    created_at_timestamp BIGINT
)
"""
