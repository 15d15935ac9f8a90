"""Decoded event schemas - FlowCouncilFactory and FlowCouncil logs."""

from enum import StrEnum

from pydantic import BaseModel, Field


class EventName(StrEnum):
    """Handled event names."""

    FLOW_COUNCIL_CREATED = "FlowCouncilCreated"
    ROLE_GRANTED = "RoleGranted"
    ROLE_REVOKED = "RoleRevoked"
    VOTER_ADDED = "VoterAdded"
    VOTER_REMOVED = "VoterRemoved"
    VOTER_EDITED = "VoterEdited"
    RECIPIENT_ADDED = "RecipientAdded"
    RECIPIENT_REMOVED = "RecipientRemoved"
    VOTED = "Voted"
    MAX_VOTING_SPREAD_SET = "MaxVotingSpreadSet"


class EventSchema(BaseModel):
    """Log envelope: emitting contract, block and position."""

    event: str
    address: str
    block_number: int = Field(alias="blockNumber")
    block_timestamp: int = Field(alias="blockTimestamp")
    transaction_hash: str = Field(alias="transactionHash", default="0x")
    log_index: int = Field(alias="logIndex", default=0)
    params: dict = {}

    class Config:
        populate_by_name = True


# Params


class FlowCouncilCreatedParams(BaseModel):
    flow_council: str = Field(alias="flowCouncil")
    metadata: str = "0x"
    distribution_pool: str = Field(alias="distributionPool")

    class Config:
        populate_by_name = True


class RoleParams(BaseModel):
    role: str
    account: str
    sender: str | None = None


class AccountParams(BaseModel):
    account: str


class VoterParams(BaseModel):
    account: str
    voting_power: int = Field(alias="votingPower")

    class Config:
        populate_by_name = True


class RecipientAddedParams(BaseModel):
    account: str
    metadata: str = "0x"


class VoteItem(BaseModel):
    """One (recipient, amount) entry of a Voted batch."""

    recipient: str
    amount: int


class VotedParams(BaseModel):
    account: str
    votes: list[VoteItem] = []


class MaxVotingSpreadSetParams(BaseModel):
    max_voting_spread: int = Field(alias="maxVotingSpread")

    class Config:
        populate_by_name = True


# Typed events


class FlowCouncilCreatedEvent(EventSchema):
    params: FlowCouncilCreatedParams


class RoleGrantedEvent(EventSchema):
    params: RoleParams


class RoleRevokedEvent(EventSchema):
    params: RoleParams


class VoterAddedEvent(EventSchema):
    params: VoterParams


class VoterRemovedEvent(EventSchema):
    params: AccountParams


class VoterEditedEvent(EventSchema):
    params: VoterParams


class RecipientAddedEvent(EventSchema):
    params: RecipientAddedParams


class RecipientRemovedEvent(EventSchema):
    params: AccountParams


class VotedEvent(EventSchema):
    """The ballot id is built from transactionHash and logIndex, so both are required."""

    transaction_hash: str = Field(alias="transactionHash")
    log_index: int = Field(alias="logIndex")
    params: VotedParams


class MaxVotingSpreadSetEvent(EventSchema):
    params: MaxVotingSpreadSetParams


EVENT_SCHEMAS: dict[EventName, type[EventSchema]] = {
    EventName.FLOW_COUNCIL_CREATED: FlowCouncilCreatedEvent,
    EventName.ROLE_GRANTED: RoleGrantedEvent,
    EventName.ROLE_REVOKED: RoleRevokedEvent,
    EventName.VOTER_ADDED: VoterAddedEvent,
    EventName.VOTER_REMOVED: VoterRemovedEvent,
    EventName.VOTER_EDITED: VoterEditedEvent,
    EventName.RECIPIENT_ADDED: RecipientAddedEvent,
    EventName.RECIPIENT_REMOVED: RecipientRemovedEvent,
    EventName.VOTED: VotedEvent,
    EventName.MAX_VOTING_SPREAD_SET: MaxVotingSpreadSetEvent,
}
