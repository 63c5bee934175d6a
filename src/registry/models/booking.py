from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Checked in this order; the first absent field is reported.
REQUIRED_FIELDS: tuple[str, ...] = (
    "beneficiaryName",
    "beneficiaryEmail",
    "beneficiaryPhone",
    "serviceType",
    "date",
    "time",
    "room",
    "clinician",
)

# date and time are stored verbatim
UNTRIMMED_FIELDS: frozenset[str] = frozenset({"date", "time"})


class Booking(BaseModel):
    """A single appointment record, serialized with camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    beneficiary_name: str
    beneficiary_email: str
    beneficiary_phone: str
    service_type: str
    date: str
    time: str
    room: str
    clinician: str
    notes: str = ""
    created_at: str

    @property
    def schedule_key(self) -> str:
        """Sort key for listing; only chronological for sortable formats like YYYY-MM-DD / HH:MM."""
        return f"{self.date} {self.time}"

    def to_wire(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
