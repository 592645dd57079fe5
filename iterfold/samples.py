from dataclasses import dataclass

from .types import *


@dataclass(frozen=True)
class Department:
    id: int
    head_count: int
    name: str


@dataclass(frozen=True)
class Person:
    id: int
    years_at_company: int
    name: str
    department_id: int


SAMPLE_DEPARTMENTS: Tuple[Department, ...] = (
    Department(0, 40, "Engineering"),
    Department(1, 35, "Sales"),
    Department(2, 10, "Marketing"),
)

SAMPLE_PEOPLE: Tuple[Person, ...] = (
    Person(0, 29, "Joe Engineer", 0),
    Person(1, 29, "Bob Engineer", 0),
    Person(2, 52, "Mohammed", 1),
    Person(3, 10, "McLovin", 1),
    Person(4, 2, "Intern Jane", 2),
)


# --- predicates ---

def is_department_named(name: str) -> Predicate[Department]:
    return lambda d: d.name == name


def is_in_department(department_id: int) -> Predicate[Person]:
    return lambda p: p.department_id == department_id


def has_tenure_of_at_least(years: int) -> Predicate[Person]:
    return lambda p: p.years_at_company >= years
