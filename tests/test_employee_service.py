import threading
from types import SimpleNamespace

import pytest

from employee_registry_api.app.schemas.employee import Employee, EmployeeCreate, Gender
from employee_registry_api.app.services.employee_service import (
    EmployeeRegistry,
    UnknownGenderError,
    parse_gender,
)


SEED_TABLE = [
    (1, "John Smith", 32, Gender.MALE, 5000.0),
    (2, "Jane Johnson", 28, Gender.FEMALE, 6000.0),
    (3, "David Williams", 35, Gender.MALE, 5500.0),
    (4, "Emily Brown", 23, Gender.FEMALE, 4500.0),
    (5, "Michael Jones", 40, Gender.MALE, 7000.0),
]


def make_payload(**overrides):
    data = {"name": "Anna Lee", "age": 30, "gender": "FEMALE", "salary": 5200.0}
    data.update(overrides)
    return EmployeeCreate(**data)


def test_seed_data():
    registry = EmployeeRegistry()
    assert len(registry) == 5
    for employee_id, name, age, gender, salary in SEED_TABLE:
        employee = registry.get_by_id(employee_id)
        assert employee == Employee(id=employee_id, name=name, age=age, gender=gender, salary=salary)
    assert 6 not in registry


def test_create_assigns_next_id():
    registry = EmployeeRegistry()
    created = registry.create(make_payload())
    assert created.id == 6
    assert len(registry) == 6
    second = registry.create(make_payload(name="Tom Fox", gender="MALE"))
    assert second.id == 7
    assert len(registry) == 7


def test_create_on_empty_registry_starts_at_one():
    registry = EmployeeRegistry(employees=())
    assert registry.create(make_payload()).id == 1


def test_create_ignores_client_id():
    registry = EmployeeRegistry()
    payload = EmployeeCreate(id=42, name="Anna Lee", age=30, gender="FEMALE", salary=5200.0)
    created = registry.create(payload)
    assert created.id == 6
    assert 42 not in registry


def test_get_by_id_round_trip():
    registry = EmployeeRegistry()
    created = registry.create(make_payload())
    assert registry.get_by_id(created.id) == created


def test_get_by_id_absent_returns_none():
    registry = EmployeeRegistry()
    assert registry.get_by_id(999) is None


def test_get_by_gender_partitions_registry():
    registry = EmployeeRegistry()
    registry.create(make_payload())
    males = registry.get_by_gender("male")
    females = registry.get_by_gender("FEMALE")
    assert all(e.gender is Gender.MALE for e in males)
    assert all(e.gender is Gender.FEMALE for e in females)
    assert [e.id for e in males] == [1, 3, 5]
    assert [e.id for e in females] == [2, 4, 6]
    assert len(males) + len(females) == len(registry)


def test_get_by_gender_mixed_case():
    registry = EmployeeRegistry()
    assert registry.get_by_gender("FeMaLe") == registry.get_by_gender("female")


def test_get_by_gender_unknown_value():
    registry = EmployeeRegistry()
    with pytest.raises(UnknownGenderError) as excinfo:
        registry.get_by_gender("robot")
    assert excinfo.value.value == "robot"
    assert "robot" in str(excinfo.value)


def test_parse_gender():
    assert parse_gender("male") is Gender.MALE
    assert parse_gender("Female") is Gender.FEMALE
    with pytest.raises(ValueError):
        parse_gender("")


def test_concurrent_creates_get_distinct_ids():
    registry = EmployeeRegistry()
    created = []

    def worker():
        for _ in range(50):
            created.append(registry.create(make_payload()).id)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(created) == list(range(6, 206))
    assert len(registry) == 205


def test_employee_schema_is_plain_model():
    assert not Employee.model_config.get("from_attributes")
    with pytest.raises(ValueError):
        Employee.model_validate(SimpleNamespace(id=1, name="A", age=1, gender="MALE", salary=1.0))
