"""Vote (history) and latest vote (current allocation) models."""

VOTE_DDL = """
CREATE TABLE IF NOT EXISTS vote (
    id VARCHAR PRIMARY KEY,
    recipient VARCHAR,
    voted_by VARCHAR,
    amount VARCHAR,
    created_at_block BIGINT,
    created_at_timestamp BIGINT
)
"""

LATEST_VOTE_DDL = """
CREATE TABLE IF NOT EXISTS latest_vote (
    id VARCHAR PRIMARY KEY,
    recipient VARCHAR,
    voted_by VARCHAR,
    amount VARCHAR,
    created_at_block BIGINT,
    created_at_timestamp BIGINT
)
"""
