"""
Bounded polling for table status changes.

CreateTable, UpdateTable and DeleteTable return before the table has changed
state. These helpers poll DescribeTable until the table reaches the target
status (or disappears), giving up after a fixed number of attempts and
stopping early when a cancellation event is set.
"""

import logging
import threading
import time
from typing import Optional

from pydantic import BaseModel, Field

from ..config import DynamoDBConfig
from ..exceptions import NotFoundError, OperationCancelledError, WaitTimeoutError
from .table_gateway import TableGateway

logger = logging.getLogger(__name__)

ACTIVE = "ACTIVE"
DELETED = "DELETED"


class WaitPolicy(BaseModel):
    """Poll budget for a status wait."""

    max_attempts: int = Field(default=25, ge=1)
    delay_seconds: float = Field(default=2.0, ge=0)
    backoff_factor: float = Field(default=1.5, ge=1)
    max_delay_seconds: float = Field(default=20.0, ge=0)

    @classmethod
    def from_config(cls, config: DynamoDBConfig) -> 'WaitPolicy':
        return cls(
            max_attempts=config.wait_max_attempts,
            delay_seconds=config.wait_delay_seconds,
            backoff_factor=config.wait_backoff_factor,
            max_delay_seconds=config.wait_max_delay_seconds,
        )

    def delay_for(self, attempt: int) -> float:
        """Delay after the given (1-based) attempt."""
        delay = self.delay_seconds * (self.backoff_factor ** (attempt - 1))
        return min(delay, self.max_delay_seconds)


def wait_for_table_status(
    gateway: TableGateway,
    target: Optional[str],
    policy: WaitPolicy,
    cancel_event: Optional[threading.Event] = None
) -> Optional[str]:
    """
    Poll DescribeTable until the table reaches ``target``.

    Args:
        gateway: Gateway of the table to watch
        target: Expected TableStatus, or None to wait until the table is gone
        policy: Attempt budget and delays
        cancel_event: Set it to abandon the wait

    Returns:
        The reached status (None once the table is gone)

    Raises:
        WaitTimeoutError: If the status is not reached within the budget
        OperationCancelledError: If ``cancel_event`` is set while waiting
        NotFoundError: If the table vanishes while waiting for a status
    """
    expected = target or DELETED
    last_status = None

    for attempt in range(1, policy.max_attempts + 1):
        if cancel_event is not None and cancel_event.is_set():
            raise OperationCancelledError(gateway.table_name, expected)

        try:
            last_status = gateway.describe_table()['TableStatus']
        except NotFoundError:
            if target is None:
                logger.info(f"Table {gateway.table_name} no longer exists")
                return None
            raise

        logger.debug(
            f"Table {gateway.table_name} status {last_status} "
            f"(attempt {attempt}/{policy.max_attempts}, waiting for {expected})"
        )
        if target is not None and last_status == target:
            return last_status

        if attempt < policy.max_attempts:
            delay = policy.delay_for(attempt)
            if cancel_event is not None:
                # Returns early when the event is set
                if cancel_event.wait(delay):
                    raise OperationCancelledError(gateway.table_name, expected)
            else:
                time.sleep(delay)

    logger.error(f"Gave up waiting for {gateway.table_name} to reach {expected}, last status {last_status}")
    raise WaitTimeoutError(gateway.table_name, expected, policy.max_attempts, last_status)


def wait_until_active(
    gateway: TableGateway,
    policy: WaitPolicy,
    cancel_event: Optional[threading.Event] = None
) -> str:
    return wait_for_table_status(gateway, ACTIVE, policy, cancel_event)


def wait_until_deleted(
    gateway: TableGateway,
    policy: WaitPolicy,
    cancel_event: Optional[threading.Event] = None
) -> None:
    wait_for_table_status(gateway, None, policy, cancel_event)
