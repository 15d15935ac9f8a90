"""FlowCouncil (root aggregate) model."""

COUNCIL_DDL = """
CREATE TABLE IF NOT EXISTS flow_council (
    id VARCHAR PRIMARY KEY,
    metadata VARCHAR,
    distribution_pool VARCHAR,
    voter_manager_role VARCHAR,
    recipient_manager_role VARCHAR,
    super_token VARCHAR,
    max_voting_spread VARCHAR,
    voters_count INTEGER NOT NULL DEFAULT 0,
    created_at_block BIGINT,
    created_at_timestamp BIGINT
)
"""
