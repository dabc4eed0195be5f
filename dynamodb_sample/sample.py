"""
Getting Started with Amazon DynamoDB

Runs the tutorial sequence against the configured account:
1. Create the Person table (5/5 provisioned throughput) and wait for ACTIVE
2. Print the table metadata
3. Save, load, update, re-load (strongly consistent) and delete a person
4. List all tables
5. Raise the throughput to 6/7 and print the metadata again
6. Delete the table and wait until it is gone

Credentials are read by boto3 from ~/.aws/credentials or the environment:

    [default]
    aws_access_key_id = YOUR_ACCESS_KEY_ID
    aws_secret_access_key = YOUR_SECRET_ACCESS_KEY

Every step produces a StepResult. If table creation fails for any reason
other than the table already existing, nothing else runs. A later failure
skips the remaining steps, but the table is still deleted.
"""

import logging
import sys
import threading
from typing import Callable, List, Optional, TextIO

from botocore.exceptions import BotoCoreError

from .config import DynamoDBConfig
from .core import create_dynamodb_resource
from .exceptions import ConflictError, DynamoDBSampleError, ItemNotFoundError, Outcome
from .handlers import PersonReadApi, PersonWriteApi, TableAdminApi, TableReadApi, format_table_info
from .models import PERSON_MAPPING, Person, ProvisionedThroughput, StepResult, TableInfo

logger = logging.getLogger(__name__)

SEPARATOR = "==========================================="

INITIAL_THROUGHPUT = ProvisionedThroughput(read_capacity_units=5, write_capacity_units=5)
UPDATED_THROUGHPUT = ProvisionedThroughput(read_capacity_units=6, write_capacity_units=7)


class GettingStartedSample:
    """The tutorial driver.

    All remote APIs share one boto3 resource, either the one passed in or
    one built from ``config``.
    """

    def __init__(
        self,
        config: DynamoDBConfig,
        dynamodb=None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
        cancel_event: Optional[threading.Event] = None
    ):
        self.config = config
        self.dynamodb = dynamodb if dynamodb is not None else create_dynamodb_resource(config)
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.table_name = PERSON_MAPPING.table_name

        self.table_read_api = TableReadApi(config, self.dynamodb)
        self.table_admin_api = TableAdminApi(config, self.dynamodb, cancel_event=cancel_event)
        self.person_read_api = PersonReadApi(config, self.dynamodb)
        self.person_write_api = PersonWriteApi(config, self.dynamodb)

    def _print(self, line: str = "") -> None:
        print(line, file=self.out)

    def _step(self, name: str, action: Callable[[], object]) -> StepResult:
        """Run one step and turn its error, if any, into a typed result."""
        try:
            return StepResult.success(name, action())
        except (DynamoDBSampleError, BotoCoreError) as e:
            result = StepResult.failure(name, e)
            logger.error(f"Step {name} failed ({result.outcome.value}): {e}")
            print(f"{name} request failed for {self.table_name}", file=self.err)
            print(str(e), file=self.err)
            return result

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def create_table(self) -> TableInfo:
        full_name = self.config.get_table_name(self.table_name)
        self._print(f"Waiting for table {full_name} to be created...this may take a while...")
        info = self.table_admin_api.create_table_for(PERSON_MAPPING, INITIAL_THROUGHPUT)
        self._print(f"Table :{full_name} created successfully.")
        return info

    def wait_for_existing_table(self) -> str:
        full_name = self.config.get_table_name(self.table_name)
        self._print(f"Table {full_name} already exists, waiting for it to become ACTIVE...")
        return self.table_admin_api.wait_for_active(self.table_name)

    def print_table_info(self) -> TableInfo:
        info = self.table_read_api.describe_table(self.table_name)
        self._print(SEPARATOR)
        self._print(f"Table info for : {info.table_name}")
        for line in format_table_info(info):
            self._print(line)
        return info

    def crud_operations(self) -> Person:
        self._print(SEPARATOR)
        self._print("Testing CRUD operations")

        person = Person(id=1, name="Derek Smith", age=42)
        self.person_write_api.save(person)
        self._print("Item saved successfully")

        retrieved = self._require(person.id, consistent_read=False)
        self._print(f"Item retrieved. Name: {retrieved.name} ID :{retrieved.id} Age :{retrieved.age}")

        retrieved.name = "Kyle Smith"
        self.person_write_api.save(retrieved)
        self._print(f"Item updated. Name: {retrieved.name} ID :{retrieved.id} Age :{retrieved.age}")

        updated = self._require(person.id, consistent_read=True)
        self._print("Retrieved the previously updated item:")
        self._print(f"Updated item retrieved. Name: {updated.name} ID :{updated.id} Age :{updated.age}")

        self.person_write_api.delete(updated)

        deleted = self.person_read_api.load(updated.id, consistent_read=True)
        if deleted is not None:
            raise ConflictError(f"Person {updated.id} still present after delete", str(updated.id))
        self._print("Done - Person item is deleted.")
        return updated

    def _require(self, person_id: int, consistent_read: bool) -> Person:
        person = self.person_read_api.load(person_id, consistent_read=consistent_read)
        if person is None:
            raise ItemNotFoundError(self.person_read_api.gateway.table_name, {'id': person_id})
        return person

    def list_tables(self) -> List[str]:
        self._print(SEPARATOR)
        self._print("Listing table names")
        names = []
        for name in self.table_read_api.list_tables():
            self._print(f"Table : {name}")
            names.append(name)
        return names

    def update_table(self) -> TableInfo:
        full_name = self.config.get_table_name(self.table_name)
        self._print(SEPARATOR)
        self._print(f"Modifying provisioned throughput for:{full_name}")
        self.table_admin_api.update_throughput(self.table_name, UPDATED_THROUGHPUT)
        return self.print_table_info()

    def delete_table(self) -> None:
        full_name = self.config.get_table_name(self.table_name)
        self._print(SEPARATOR)
        self._print(f"Issuing DeleteTable request for:{full_name}")
        self._print(f"Waiting for {full_name} to be deleted...this may take a while...")
        self.table_admin_api.delete_table(self.table_name)
        self._print(f"Table {full_name} deleted successfully.")

    # -------------------------------------------------------------------------
    # Sequence
    # -------------------------------------------------------------------------

    def run(self) -> List[StepResult]:
        """Run every step in order and return their results."""
        self._print(SEPARATOR)
        self._print("Getting Started with Amazon DynamoDB")
        self._print(SEPARATOR)
        self._print()

        results = []
        created = self._step("CreateTable", self.create_table)
        results.append(created)
        if created.outcome == Outcome.CONFLICT:
            created = self._step("WaitForTable", self.wait_for_existing_table)
            results.append(created)

        if not created.ok:
            for name in ("DescribeTable", "CrudOperations", "ListTables", "UpdateTable", "DeleteTable"):
                results.append(StepResult.skipped(name))
            return results

        failed = False
        try:
            for name, action in (
                ("DescribeTable", self.print_table_info),
                ("CrudOperations", self.crud_operations),
                ("ListTables", self.list_tables),
                ("UpdateTable", self.update_table),
            ):
                if failed:
                    results.append(StepResult.skipped(name))
                    continue
                result = self._step(name, action)
                results.append(result)
                failed = not result.ok
        finally:
            # Unexpected errors still propagate, after the table is removed
            results.append(self._step("DeleteTable", self.delete_table))
            self._print("============= END ==========================")
        return results


def succeeded(results: List[StepResult]) -> bool:
    """True when every step succeeded.

    A CreateTable conflict counts as success once the existing table was
    waited on.
    """
    return all(
        result.ok or (result.step == "CreateTable" and result.outcome == Outcome.CONFLICT)
        for result in results
    )


def main() -> int:
    """Console entry point. Returns 0 when every step succeeded, 1 otherwise."""
    try:
        config = DynamoDBConfig.from_env()
    except ValueError as e:
        # Includes pydantic.ValidationError
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if config.enable_debug_logging else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        results = GettingStartedSample(config).run()
    except DynamoDBSampleError as e:
        print(f"Error Message: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception(f"Getting started sample aborted: {e}")
        print(f"Error Message: {e}", file=sys.stderr)
        return 1

    return 0 if succeeded(results) else 1


if __name__ == "__main__":
    sys.exit(main())
