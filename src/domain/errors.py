"""Domain errors raised at the data-ingestion boundary."""


class InvalidRecordError(ValueError):
    """A fixture record could not be turned into a domain record.

    Attributes:
        record_kind: Kind of record (account, balance, transaction).
        record_id: Identifier of the offending record when known.
        field: Name of the field that failed validation.
    """

    def __init__(
        self,
        record_kind: str,
        record_id: str | None,
        field: str,
        reason: str,
    ) -> None:
        self.record_kind = record_kind
        self.record_id = record_id
        self.field = field
        self.reason = reason
        super().__init__(
            f"Invalid {record_kind} record {record_id or '<unknown>'}: "
            f"field {field!r} {reason}"
        )


class FixtureNotFoundError(FileNotFoundError):
    """A required fixture file is missing."""


__all__ = ["FixtureNotFoundError", "InvalidRecordError"]
