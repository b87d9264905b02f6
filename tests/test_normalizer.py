"""
Roster — Normalizer Unit Tests
===============================

What:  Tests for the raw-record → EmployeeRecord mapping.
How:   Plain dicts in, EmployeeRecord out; no I/O.

What we test:
    ✅ Missing optional fields become "" / None, id passes through
    ✅ Alternate-language and alternate-English keys map to canonical fields
    ✅ Primary keys win over alternates
    ✅ Age coercion (numeric text, floats, junk)
    ✅ Idempotence and no input mutation
    ✅ Non-mapping input never raises
"""

import copy

import pytest

from roster.schemas.employee import EmployeeRecord
from roster.services.employee_client import EmployeeDirectoryClient
from roster.services.normalizer import coerce_age, normalize


class TestNormalizeDefaults:
    """Records missing optional fields."""

    def test_only_id(self):
        record = normalize({"id": 7})
        assert record == EmployeeRecord(id=7, name="", age=None, job="", phone="")

    def test_string_id_passes_through(self):
        assert normalize({"id": "a1b2"}).id == "a1b2"

    def test_empty_mapping_has_no_id(self):
        record = normalize({})
        assert record.id is None
        assert record.name == ""
        assert record.age is None

    def test_null_values_are_absent(self):
        record = normalize({"id": 1, "Name": None, "Age": None, "Job": None, "Phone": None})
        assert record == EmployeeRecord(id=1)


class TestNormalizeSourceKeys:
    """Alternate spellings and their priority."""

    def test_spanish_keys(self):
        record = normalize(
            {"id": 2, "nombre": "Luis", "edad": "41", "puesto": "Contador", "telefono": "7000-1111"}
        )
        assert record.name == "Luis"
        assert record.age == 41
        assert isinstance(record.age, int)
        assert record.job == "Contador"
        assert record.phone == "7000-1111"

    def test_alternate_english_keys(self):
        record = normalize({"id": 3, "Workstation": "Reception", "PhoneNumber": "7555-0000"})
        assert record.job == "Reception"
        assert record.phone == "7555-0000"

    def test_primary_key_wins(self):
        record = normalize(
            {
                "Name": "Ana",
                "nombre": "Ana María",
                "Age": 28,
                "edad": 30,
                "Job": "Analyst",
                "puesto": "Analista",
                "Workstation": "Desk 4",
                "Phone": "1",
                "telefono": "2",
                "PhoneNumber": "3",
            }
        )
        assert (record.name, record.age, record.job, record.phone) == ("Ana", 28, "Analyst", "1")

    def test_spanish_key_beats_alternate_english(self):
        record = normalize({"puesto": "Analista", "Workstation": "Desk 4"})
        assert record.job == "Analista"

    def test_empty_primary_falls_back(self):
        record = normalize({"Name": "", "nombre": "Luis", "Phone": "", "PhoneNumber": "555"})
        assert record.name == "Luis"
        assert record.phone == "555"

    def test_non_string_text_is_stringified(self):
        assert normalize({"Phone": 71234567}).phone == "71234567"


class TestCoerceAge:
    """Age coercion rules."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (28, 28),
            (0, 0),
            (28.0, 28),
            ("28", 28),
            (" 28.0 ", 28),
            (None, None),
            (True, None),
            ("abc", None),
            (28.5, None),
            (-3, None),
            (float("nan"), None),
            ([28], None),
        ],
    )
    def test_coerce_age(self, value, expected):
        assert coerce_age(value) == expected

    def test_unusable_primary_age_does_not_fall_back(self):
        assert normalize({"Age": "unknown", "edad": 30}).age is None

    def test_zero_age_is_kept(self):
        assert normalize({"Age": 0, "edad": 30}).age == 0


class TestNormalizeProperties:
    """Totality, purity and idempotence."""

    @pytest.mark.parametrize("value", [None, 42, "Ana", ["Ana"], 3.5, object()])
    def test_non_mapping_input_gives_empty_record(self, value):
        assert normalize(value) == EmployeeRecord()

    def test_input_is_not_mutated(self):
        raw = {"id": 2, "nombre": "Luis", "edad": "41", "extra": {"nested": [1]}}
        snapshot = copy.deepcopy(raw)
        normalize(raw)
        assert raw == snapshot

    def test_idempotent_on_record(self):
        once = normalize({"id": 2, "nombre": "Luis", "edad": "41", "puesto": "Contador"})
        assert normalize(once) == once

    def test_idempotent_on_wire_form(self):
        once = normalize({"id": 1, "Name": "Ana", "Age": 28, "Job": "Analyst", "Phone": "7"})
        assert normalize(once.to_wire()) == once

    def test_client_normalize_delegates(self):
        raw = {"id": 1, "nombre": "Ana"}
        assert EmployeeDirectoryClient.normalize(raw) == normalize(raw)


class TestEmployeeRecordSerialization:
    """Wire forms of the canonical record."""

    def test_to_wire(self):
        record = EmployeeRecord(id=1, name="Ana Martinez", age=28, job="Analyst", phone="7123-4567")
        assert record.to_wire() == {
            "id": 1,
            "Name": "Ana Martinez",
            "Age": 28,
            "Job": "Analyst",
            "Phone": "7123-4567",
        }

    def test_payload_omits_id_and_absent_age(self):
        record = EmployeeRecord(id=9, name="Ana", job="", phone="")
        assert record.to_payload() == {"Name": "Ana", "Job": "", "Phone": ""}

    def test_accepts_wire_aliases(self):
        assert EmployeeRecord(Name="Ana", Age=28) == EmployeeRecord(name="Ana", age=28)
