"""Tests for the typed views over Up API resource attributes."""

from conftest import account_resource, transaction_resource

from upbank.api.schemas import (
    AccountAttributes,
    CategoryAttributes,
    TransactionAttributes,
    WebhookAttributes,
    WebhookDeliveryLogAttributes,
    format_date,
    or_na,
    short_id,
)


class TestAttributeParsing:
    def test_account_attributes_from_camel_case(self):
        attributes = AccountAttributes.from_resource(account_resource())

        assert attributes.display_name == "Spending"
        assert attributes.account_type == "TRANSACTIONAL"
        assert attributes.balance_value == "12.34"
        assert attributes.currency_code == "AUD"

    def test_account_fallbacks_when_balance_missing(self):
        attributes = AccountAttributes.from_resource(
            {"id": "x", "attributes": {"displayName": "Saver"}}
        )

        assert attributes.balance_value == "0.00"
        assert attributes.currency_code == "AUD"
        assert attributes.account_type is None

    def test_transaction_attributes(self):
        attributes = TransactionAttributes.from_resource(transaction_resource())

        assert attributes.description == "Coffee Shop"
        assert attributes.amount_value == "-4.50"
        assert attributes.status == "SETTLED"
        assert attributes.settled_at == "2024-03-02T10:00:00+11:00"

    def test_missing_attributes_gives_empty_record(self):
        assert CategoryAttributes.from_resource({"id": "c"}).name is None
        assert CategoryAttributes.from_resource(None).name is None

    def test_malformed_attribute_only_drops_that_field(self):
        """A balance that isn't an object must not blank the other fields."""
        attributes = AccountAttributes.from_resource(
            {
                "id": "x",
                "attributes": {
                    "displayName": "Odd",
                    "accountType": "SAVER",
                    "balance": "12.00",
                },
            }
        )

        assert attributes.display_name == "Odd"
        assert attributes.account_type == "SAVER"
        assert attributes.balance_value == "0.00"
        assert attributes.currency_code == "AUD"

    def test_several_malformed_attributes(self):
        attributes = TransactionAttributes.from_resource(
            {
                "attributes": {
                    "description": "Coffee Shop",
                    "status": ["SETTLED"],
                    "amount": 4.5,
                    "createdAt": {"at": "now"},
                }
            }
        )

        assert attributes.description == "Coffee Shop"
        assert attributes.status is None
        assert attributes.amount_value == "0.00"
        assert attributes.created_at is None

    def test_numeric_amount_is_read_as_text(self):
        attributes = AccountAttributes.from_resource(
            {
                "attributes": {
                    "displayName": "Spending",
                    "balance": {"currencyCode": "AUD", "value": 12.34},
                }
            }
        )

        assert attributes.display_name == "Spending"
        assert attributes.balance_value == "12.34"

    def test_unknown_attributes_are_ignored(self):
        attributes = WebhookAttributes.from_resource(
            {"attributes": {"url": "https://x", "secretKey": "k", "newField": 1}}
        )

        assert attributes.url == "https://x"
        assert attributes.secret_key == "k"

    def test_delivery_log_response_status(self):
        log = WebhookDeliveryLogAttributes.from_resource(
            {
                "attributes": {
                    "deliveryStatus": "DELIVERED",
                    "response": {"statusCode": 200, "body": "ok"},
                    "createdAt": "2024-03-01T08:15:00+11:00",
                }
            }
        )

        assert log.delivery_status == "DELIVERED"
        assert log.response_status == "200"

    def test_delivery_log_without_response(self):
        log = WebhookDeliveryLogAttributes.from_resource(
            {"attributes": {"deliveryStatus": "FAILED", "response": None}}
        )

        assert log.response_status == "N/A"


class TestDisplayHelpers:
    def test_or_na(self):
        assert or_na("Spending") == "Spending"
        assert or_na(None) == "N/A"
        assert or_na("") == "N/A"

    def test_format_date(self):
        assert format_date("2024-03-01T08:15:00+11:00") == "2024-03-01"
        assert format_date(None) == "N/A"
        assert format_date("yesterday") == "yesterday"

    def test_short_id(self):
        assert short_id("4b9a3f52-1d6e-4c4a") == "4b9a3f52..."
        assert short_id(None) == "N/A"
