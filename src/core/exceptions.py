class DonateActionError(Exception):
    """Base class for errors raised while serving the donate action."""


class AmountParseError(DonateActionError):
    """The requested amount is not a valid non-negative ETH value."""

    def __init__(self, amount: str, reason: str):
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid ETH amount {amount!r}: {reason}")


class RpcQueryError(DonateActionError):
    """A read-only query against the Ethereum node failed."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        self.cause = cause
        super().__init__(f"RPC query '{operation}' failed: {cause}")
