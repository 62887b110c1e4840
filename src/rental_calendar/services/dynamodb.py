"""DynamoDB-backed reservation storage.

Table layout (one table, ``{prefix}-reservations``):
    listing_id (HASH) | reservation_id (RANGE) | start_date | end_date | status | renter_name?

Dates are stored as YYYY-MM-DD strings so items stay readable in the
console and sort lexically in date order.
"""

import os
from typing import Any

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from rental_calendar.models import (
    BookingError,
    ErrorCode,
    ReservationPeriod,
    ReservationStatus,
)
from rental_calendar.utils.logging import get_logger

logger = get_logger(__name__)

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"

# Shared across requests in a Lambda container
_service: "DynamoDBService | None" = None


def get_dynamodb_service(environment: str | None = None) -> "DynamoDBService":
    """Return the process-wide DynamoDBService, creating it on first use.

    Args:
        environment: Environment name; ignored once the service exists
    """
    global _service
    if _service is None:
        _service = DynamoDBService(environment)
    return _service


def reset_dynamodb_service() -> None:
    """Drop the process-wide service so the next call builds a new one.

    Tests call this to get a client bound to the current mock_aws context.
    """
    global _service
    _service = None


class DynamoDBService:
    """boto3 table access with environment-prefixed table names."""

    def __init__(self, environment: str | None = None) -> None:
        """Initialize DynamoDB service.

        Args:
            environment: dev/prod; falls back to ENVIRONMENT, then "dev".
                DYNAMODB_TABLE_PREFIX overrides the derived prefix.
        """
        self.environment = environment or os.getenv("ENVIRONMENT", "dev")
        self.name_prefix = os.getenv("DYNAMODB_TABLE_PREFIX") or f"booking-{self.environment}"
        self._resource = boto3.resource("dynamodb")

    def _table_name(self, table: str) -> str:
        return f"{self.name_prefix}-{table}"

    def table(self, table: str) -> Any:
        """boto3 Table resource for an unprefixed table name."""
        return self._resource.Table(self._table_name(table))

    def put_item(
        self,
        table: str,
        item: dict[str, Any],
        condition_expression: str | None = None,
    ) -> bool:
        """Write an item, optionally guarded by a condition.

        Returns:
            False if the condition rejected the write, True otherwise
        """
        request: dict[str, Any] = {"Item": item}
        if condition_expression:
            request["ConditionExpression"] = condition_expression
        try:
            self.table(table).put_item(**request)
        except ClientError as e:
            if e.response["Error"]["Code"] != CONDITIONAL_CHECK_FAILED:
                raise
            logger.info(
                "Conditional put rejected",
                extra={"table": self._table_name(table), "condition": condition_expression},
            )
            return False
        return True

    def query_partition(
        self,
        table: str,
        partition_key_name: str,
        partition_key_value: str,
    ) -> list[dict[str, Any]]:
        """Read every item under one partition key, across result pages."""
        request: dict[str, Any] = {
            "KeyConditionExpression": Key(partition_key_name).eq(partition_key_value),
        }
        items: list[dict[str, Any]] = []
        while True:
            page = self.table(table).query(**request)
            items.extend(page.get("Items", []))
            if "LastEvaluatedKey" not in page:
                return items
            request["ExclusiveStartKey"] = page["LastEvaluatedKey"]


class DynamoDBReservationRepository:
    """ReservationRepository over the reservations table."""

    TABLE = "reservations"

    def __init__(self, db: DynamoDBService) -> None:
        self.db = db

    def get_reservations(self, resource_id: str) -> list[ReservationPeriod]:
        items = self.db.query_partition(self.TABLE, "listing_id", resource_id)
        return sorted(
            (self._to_period(item) for item in items),
            key=lambda p: (p.start_date, p.id),
        )

    def append_reservation(self, resource_id: str, period: ReservationPeriod) -> None:
        self.db.put_item(self.TABLE, self._to_item(resource_id, period))

    def replace_reservation(self, resource_id: str, period: ReservationPeriod) -> None:
        replaced = self.db.put_item(
            self.TABLE,
            self._to_item(resource_id, period),
            condition_expression="attribute_exists(reservation_id)",
        )
        if not replaced:
            raise BookingError(
                ErrorCode.RESERVATION_NOT_FOUND,
                {"resource_id": resource_id, "reservation_id": period.id},
            )

    @staticmethod
    def _to_item(resource_id: str, period: ReservationPeriod) -> dict[str, Any]:
        item: dict[str, Any] = {
            "listing_id": resource_id,
            "reservation_id": period.id,
            "start_date": period.start_date.isoformat(),
            "end_date": period.end_date.isoformat(),
            "status": period.status.value,
        }
        if period.renter_name:
            item["renter_name"] = period.renter_name
        return item

    @staticmethod
    def _to_period(item: dict[str, Any]) -> ReservationPeriod:
        return ReservationPeriod(
            id=item["reservation_id"],
            start_date=item["start_date"],
            end_date=item["end_date"],
            status=ReservationStatus(item["status"]),
            renter_name=item.get("renter_name"),
        )
