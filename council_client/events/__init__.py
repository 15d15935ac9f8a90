"""Decoded event payloads delivered by the log indexing layer."""

from council_client.events.schemas import (
    EVENT_SCHEMAS,
    AccountParams,
    EventName,
    EventSchema,
    FlowCouncilCreatedEvent,
    FlowCouncilCreatedParams,
    MaxVotingSpreadSetEvent,
    MaxVotingSpreadSetParams,
    RecipientAddedEvent,
    RecipientAddedParams,
    RecipientRemovedEvent,
    RoleGrantedEvent,
    RoleParams,
    RoleRevokedEvent,
    VotedEvent,
    VotedParams,
    VoteItem,
    VoterAddedEvent,
    VoterEditedEvent,
    VoterParams,
    VoterRemovedEvent,
)

__all__ = [
    "EVENT_SCHEMAS",
    "EventName",
    "EventSchema",
    # Params
    "AccountParams",
    "FlowCouncilCreatedParams",
    "MaxVotingSpreadSetParams",
    "RecipientAddedParams",
    "RoleParams",
    "VoteItem",
    "VotedParams",
    "VoterParams",
    # Events
    "FlowCouncilCreatedEvent",
    "RoleGrantedEvent",
    "RoleRevokedEvent",
    "VoterAddedEvent",
    "VoterRemovedEvent",
    "VoterEditedEvent",
    "RecipientAddedEvent",
    "RecipientRemovedEvent",
    "VotedEvent",
    "MaxVotingSpreadSetEvent",
]
