"""Domain models and rule sets shared by the validation tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from cqrs_ddd_validation import ValidationBuilder

EMPLOYEE_AGE_REQUIREMENT = "should be 18 or older"
EMPLOYEE_NAME_REQUIREMENT = "name must be at least 1 character"
COMPANY_HAS_EMPLOYEE_REQUIREMENT = "should have at least one employee"
COMPANY_NAME_REQUIREMENT = "name must be at least 1 character"


@dataclass(frozen=True)
class Employee:
    name: str
    age: int

    def __str__(self) -> str:
        return self.name


@dataclass
class Company:
    name: str
    employees: list[Employee] = field(default_factory=list)

    def __str__(self) -> str:
        return self.name


def employee_rules(v: ValidationBuilder[Employee]) -> None:
    v.check(EMPLOYEE_AGE_REQUIREMENT, lambda e: e.age >= 18)
    v.check(EMPLOYEE_NAME_REQUIREMENT, lambda e: len(e.name) > 0)


def company_rules(v: ValidationBuilder[Company]) -> None:
    v.check(COMPANY_HAS_EMPLOYEE_REQUIREMENT, lambda c: len(c.employees) > 0)
    v.check(COMPANY_NAME_REQUIREMENT, lambda c: len(c.name) > 0)
    v.validate_collection("employees", employee_rules)
