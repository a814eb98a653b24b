"""Service-level exceptions mapped to HTTP errors by the routers."""


class NotFoundError(LookupError):
    """A referenced record does not exist."""

    def __init__(self, entity: str, record_id: int) -> None:
        super().__init__(f"{entity} {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class PaymentDeclinedError(ValueError):
    pass
