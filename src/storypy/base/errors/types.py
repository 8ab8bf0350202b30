"""Error types for contract calls and logs."""


class UnknownBlockError(Exception):
    """UnknownBlockError throws when contract transaction receipts come back with status == 0."""


class EventDecodeError(ValueError):
    """EventDecodeError throws when a log can not be decoded as the requested event."""
