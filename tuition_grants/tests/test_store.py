"""Unit tests for the in-memory application store."""

import logging

import pytest
from pydantic import ValidationError

from tuition_grants.errors import CapacityExceeded
from tuition_grants.models import ApplicationRecord, ApplicationStatus
from tuition_grants.store import ApplicationStore, MAX_APPLICATIONS


def test_add_assigns_dense_sequence_indexes():
    store = ApplicationStore()

    indexes = [
        store.add("Alice", 3.6, 15000),
        store.add("Bob", 2.0, 5000),
        store.add("Cara", 3.8, 10000),
    ]

    assert indexes == [0, 1, 2]
    assert [r.sequence_index for r in store.records()] == [0, 1, 2]
    assert store.count() == 3
    assert len(store) == 3


def test_records_keep_insertion_order_and_are_restartable():
    store = ApplicationStore()
    for name in ["Zed", "Amy", "Mo"]:
        store.add(name, 3.0, 20000)

    first = store.records()
    second = store.records()

    assert [r.student_name for r in first] == ["Zed", "Amy", "Mo"]
    assert first == second
    assert [r.student_name for r in store] == ["Zed", "Amy", "Mo"]


def test_new_record_has_unset_derived_fields():
    store = ApplicationStore()
    store.add("Alice", 3.6, 15000)

    record = store.records()[0]

    assert record.status == ApplicationStatus.UNSET
    assert record.gpa_points == 0
    assert record.shortfall_points == 0
    assert record.total_points == 0


def test_capacity_refuses_extra_record_without_mutation(caplog):
    store = ApplicationStore(capacity=3)
    for i in range(3):
        store.add(f"Student {i}", 3.0, 20000)

    assert store.is_full()
    assert store.remaining() == 0

    with caplog.at_level(logging.WARNING):
        with pytest.raises(CapacityExceeded) as exc_info:
            store.add("One too many", 3.0, 20000)

    assert exc_info.value.capacity == 3
    assert store.count() == 3
    assert [r.student_name for r in store.records()][-1] == "Student 2"
    assert "application_refused reason=capacity" in caplog.text


def test_default_capacity_is_5000():
    store = ApplicationStore()
    assert store.capacity == MAX_APPLICATIONS == 5000

    for i in range(MAX_APPLICATIONS):
        store.add(f"Student {i}", 3.0, 20000)

    with pytest.raises(CapacityExceeded):
        store.add("Student 5000", 3.0, 20000)
    assert store.count() == MAX_APPLICATIONS
    assert store.records()[-1].sequence_index == MAX_APPLICATIONS - 1


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        ApplicationStore(capacity=0)


def test_empty_name_rejected_by_record_model():
    store = ApplicationStore()
    with pytest.raises(ValidationError):
        store.add("", 3.0, 20000)
    assert store.count() == 0


def test_whitespace_name_is_kept_as_entered():
    store = ApplicationStore()
    store.add("  Bob  ", 3.0, 20000)
    assert store.records()[0].student_name == "  Bob  "


def test_entered_fields_are_frozen():
    store = ApplicationStore()
    store.add("Alice", 3.6, 15000)
    record = store.records()[0]

    with pytest.raises(ValidationError):
        record.gpa = 1.0
    with pytest.raises(ValidationError):
        record.student_name = "Mallory"

    record.status = ApplicationStatus.SHORTLISTED
    record.gpa_points = 80
    assert record.status == ApplicationStatus.SHORTLISTED
    assert record.gpa_points == 80


def test_application_number():
    store = ApplicationStore()
    store.add("Alice", 3.6, 15000)
    store.add("Bob", 2.0, 5000)
    first, second = store.records()

    assert first.application_number() == "UL1000"
    assert second.application_number() == "UL1001"
    assert second.application_number(prefix="GA", offset=500) == "GA501"


def test_record_schema_carries_example():
    schema = ApplicationRecord.model_json_schema()

    assert schema["example"]["student_name"] == "Alice"
    assert schema["example"]["total_points"] == 160
