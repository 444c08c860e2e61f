"""Pydantic views over Up API resource attributes.

Resources are passed through from the API untouched; these models only give the
CLI typed, optional access to the attributes it displays. Every field is
optional and unknown attributes are ignored, so a resource the API shapes
differently than expected still renders with fallback values.
"""

import logging
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
ZERO_AMOUNT = "0.00"
DEFAULT_CURRENCY = "AUD"

AttributesT = TypeVar("AttributesT", bound="ResourceAttributes")


class ResourceAttributes(BaseModel):
    """Base schema for the ``attributes`` object of a JSON:API resource."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def from_resource(
        cls: type[AttributesT], resource: dict[str, Any] | None
    ) -> AttributesT:
        """Parse the attributes of ``resource``.

        Attributes that fail validation are dropped individually so the rest of
        the record still renders; the dropped fields show their defaults.
        """
        attributes = (resource or {}).get("attributes")
        if not isinstance(attributes, dict):
            return cls()

        remaining = dict(attributes)
        while True:
            try:
                return cls.model_validate(remaining)
            except ValidationError as e:
                invalid = {err["loc"][0] for err in e.errors() if err["loc"]}
                invalid &= remaining.keys()
                if not invalid:
                    logger.debug(f"Unexpected {cls.__name__} shape: {e}")
                    return cls()
                logger.debug(
                    f"Ignoring invalid {cls.__name__} attributes "
                    f"{sorted(invalid)}: {e}"
                )
                for key in invalid:
                    del remaining[key]


class MoneyObject(ResourceAttributes):
    """An amount of money: ``{currencyCode, value, valueInBaseUnits}``."""

    currency_code: str | None = None
    value: str | None = None
    value_in_base_units: int | None = None


class AccountAttributes(ResourceAttributes):
    display_name: str | None = None
    account_type: str | None = None
    ownership_type: str | None = None
    balance: MoneyObject | None = None
    created_at: str | None = None

    @property
    def balance_value(self) -> str:
        return (self.balance and self.balance.value) or ZERO_AMOUNT

    @property
    def currency_code(self) -> str:
        return (self.balance and self.balance.currency_code) or DEFAULT_CURRENCY


class TransactionAttributes(ResourceAttributes):
    status: str | None = None
    raw_text: str | None = None
    description: str | None = None
    message: str | None = None
    amount: MoneyObject | None = None
    settled_at: str | None = None
    created_at: str | None = None

    @property
    def amount_value(self) -> str:
        return (self.amount and self.amount.value) or ZERO_AMOUNT


class CategoryAttributes(ResourceAttributes):
    name: str | None = None


class WebhookAttributes(ResourceAttributes):
    url: str | None = None
    description: str | None = None
    secret_key: str | None = None
    created_at: str | None = None


class WebhookResponse(ResourceAttributes):
    status_code: int | None = None
    body: str | None = None


class WebhookDeliveryLogAttributes(ResourceAttributes):
    delivery_status: str | None = None
    response: WebhookResponse | None = None
    created_at: str | None = None

    @property
    def response_status(self) -> str:
        if self.response is None or self.response.status_code is None:
            return NOT_AVAILABLE
        return str(self.response.status_code)


def or_na(value: Any) -> str:
    """Display ``value`` or ``N/A`` when it is missing or empty."""
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def format_date(timestamp: str | None) -> str:
    """Reduce an RFC 3339 timestamp to its calendar date.

    Unparseable values are shown as-is rather than hidden.
    """
    if not timestamp:
        return NOT_AVAILABLE
    try:
        return datetime.fromisoformat(timestamp).date().isoformat()
    except ValueError:
        return timestamp


def short_id(resource_id: str | None, length: int = 8) -> str:
    if not resource_id:
        return NOT_AVAILABLE
    return f"{resource_id[:length]}..."
