"""FlowCouncilManager (role grant) model."""

MANAGER_DDL = """
CREATE TABLE IF NOT EXISTS flow_council_manager (
    id VARCHAR PRIMARY KEY,
    account VARCHAR,
    role VARCHAR,
    flow_council VARCHAR,
    created_at_block BIGINT,
    created_at_timestamp BIGINT
)
"""
