"""
Tests for the Person read/write APIs (handlers/person) against moto.
"""

import pytest

from dynamodb_sample import PersonReadApi
from dynamodb_sample.exceptions import NotFoundError
from dynamodb_sample.models import Person


class TestPersonCrud:

    def test_save_then_load(self, person_write_api, person_read_api):
        person_write_api.save(Person(id=1, name="Derek Smith", age=42))

        loaded = person_read_api.load(1)

        assert loaded == Person(id=1, name="Derek Smith", age=42)

    def test_load_missing_returns_none(self, person_read_api):
        assert person_read_api.load(999) is None

    def test_save_overwrites_existing_record(self, person_write_api, person_read_api):
        person_write_api.save(Person(id=1, name="Derek Smith", age=42))
        person_write_api.save(Person(id=1, name="Kyle Smith", age=42))

        loaded = person_read_api.load(1, consistent_read=True)

        assert loaded.name == "Kyle Smith"
        assert loaded.age == 42

    def test_saving_same_values_twice_is_same_as_once(self, person_write_api, person_read_api, person_table):
        person = Person(id=5, name="Ann", age=30)
        person_write_api.save(person)
        once = person_read_api.load(5)
        person_write_api.save(person)

        assert person_read_api.load(5) == once
        assert person_table.scan()['Count'] == 1

    def test_update_by_reassigning_fields(self, person_write_api, person_read_api):
        person_write_api.save(Person(id=2, name="Derek Smith", age=42))
        person = person_read_api.load(2)

        person.name = "Kyle Smith"
        person_write_api.save(person)

        assert person_read_api.load(2, consistent_read=True).name == "Kyle Smith"

    def test_delete_then_load(self, person_write_api, person_read_api):
        person = person_write_api.save(Person(id=1, name="Derek Smith", age=42))

        person_write_api.delete(person)

        assert person_read_api.load(1, consistent_read=True) is None

    def test_delete_by_id_is_idempotent(self, person_write_api, person_read_api):
        person_write_api.delete(12345)
        person_write_api.delete(12345)

        assert person_read_api.load(12345) is None

    def test_stored_attribute_names(self, person_write_api, person_table):
        person_write_api.save(Person(id=3, name="Ann", age=30))

        item = person_table.get_item(Key={'id': 3})['Item']

        assert set(item) == {'id', 'name', 'age'}

    def test_negative_age_round_trips(self, person_write_api, person_read_api):
        person_write_api.save(Person(id=7, name="X", age=-1))

        assert person_read_api.load(7).age == -1


class TestMissingTable:

    def test_load_without_table(self, mock_dynamodb_config, mock_dynamodb_resource):
        api = PersonReadApi(mock_dynamodb_config, mock_dynamodb_resource)

        with pytest.raises(NotFoundError):
            api.load(1)
