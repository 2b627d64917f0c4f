"""
Service layer for the employee registry.

``EmployeeRegistry`` keeps employee records in memory, keyed by their
integer identifier.  A registry starts out with the five seed records
in ``SEED_EMPLOYEES`` and only ever grows: employees can be created,
fetched by ID and listed by gender, but never updated or removed.
Nothing is persisted; a new registry (and therefore a restart of the
application) begins again from the seed data.

New identifiers come from a counter that starts right after the seed
records and advances together with the insert under a single lock.
Because entries are never removed, the counter always equals the
current number of entries plus one.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, List, Optional

from employee_registry_api.app.schemas.employee import Employee, EmployeeCreate, Gender


logger = logging.getLogger(__name__)


SEED_EMPLOYEES = (
    Employee(id=1, name="John Smith", age=32, gender=Gender.MALE, salary=5000.0),
    Employee(id=2, name="Jane Johnson", age=28, gender=Gender.FEMALE, salary=6000.0),
    Employee(id=3, name="David Williams", age=35, gender=Gender.MALE, salary=5500.0),
    Employee(id=4, name="Emily Brown", age=23, gender=Gender.FEMALE, salary=4500.0),
    Employee(id=5, name="Michael Jones", age=40, gender=Gender.MALE, salary=7000.0),
)


class UnknownGenderError(ValueError):
    """Raised when text does not name a ``Gender`` member."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unrecognized gender value: {value}")
        self.value = value


def parse_gender(value: str) -> Gender:
    """Return the ``Gender`` named by ``value``, ignoring case."""
    try:
        return Gender[value.upper()]
    except KeyError:
        raise UnknownGenderError(value) from None


class EmployeeRegistry:
    """In-memory store of employee records."""

    def __init__(self, employees: Iterable[Employee] = SEED_EMPLOYEES) -> None:
        self._employees: Dict[int, Employee] = {e.id: e for e in employees}
        self._next_id = len(self._employees) + 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        with self._lock:
            return employee_id in self._employees

    def create(self, data: EmployeeCreate) -> Employee:
        """Store a new employee and return it with its assigned ID."""
        with self._lock:
            employee_id = self._next_id
            employee = Employee(id=employee_id, **data.model_dump())
            self._employees[employee_id] = employee
            self._next_id += 1
        logger.info("Created employee %s (%s)", employee_id, employee.name)
        return employee

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with ``employee_id`` or ``None`` if absent."""
        with self._lock:
            return self._employees.get(employee_id)

    def get_by_gender(self, gender: str) -> List[Employee]:
        """Return all employees whose gender matches ``gender``.

        ``gender`` is matched case-insensitively.  Raises
        ``UnknownGenderError`` if it is neither ``male`` nor ``female``.
        """
        try:
            wanted = parse_gender(gender)
        except UnknownGenderError:
            logger.warning("Rejected gender filter %r", gender)
            raise
        with self._lock:
            return [e for e in self._employees.values() if e.gender == wanted]
