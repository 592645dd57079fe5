#!/usr/bin/env python3
"""
imperative vs functional filtering over the sample departments and people.

both styles count the people in one department with a minimum tenure; the
functional one composes small predicates instead of nesting conditions.
"""
import argparse
import logging
from dataclasses import dataclass, asdict
from typing import Iterable, List, Optional, Tuple

from .functions import all_of, find, where
from .lazy import from_iterable
from .samples import (
    Department, Person, SAMPLE_DEPARTMENTS, SAMPLE_PEOPLE,
    is_department_named, is_in_department, has_tenure_of_at_least
)

logger = logging.getLogger(__name__)


@dataclass
class DemoConfig:
    """configuration for the select example"""
    department_name: str = "Engineering"
    min_years: int = 15


def count_old_timers_imperative(departments: Iterable[Department], people: Iterable[Person],
                                config: DemoConfig) -> int:
    department_id = None
    for d in departments:
        if d.name == config.department_name:
            department_id = d.id

    count = 0
    for person in people:
        if person.department_id == department_id and person.years_at_company >= config.min_years:
            count += 1
    return count


def old_timers(departments: Iterable[Department], people: Iterable[Person],
               config: DemoConfig) -> List[Person]:
    department = find(is_department_named(config.department_name), departments)
    if department is None:
        return []
    # looked up once and captured; the predicate is referentially transparent
    is_member = is_in_department(department.id)
    return where(all_of(has_tenure_of_at_least(config.min_years), is_member), people).to.list()


def count_old_timers_functional(departments: Iterable[Department], people: Iterable[Person],
                                config: DemoConfig) -> int:
    return len(old_timers(departments, people, config))


def run_select_example(config: Optional[DemoConfig] = None) -> Tuple[int, int]:
    """runs both styles over the sample data, logs and returns their counts"""
    config = config or DemoConfig()
    logger.debug(f"config: {asdict(config)}")

    imperative = count_old_timers_imperative(SAMPLE_DEPARTMENTS, SAMPLE_PEOPLE, config)
    logger.info(f"old timers in {config.department_name} (imperative): {imperative}")

    functional = count_old_timers_functional(SAMPLE_DEPARTMENTS, SAMPLE_PEOPLE, config)
    logger.info(f"old timers in {config.department_name} (functional): {functional}")

    longest = from_iterable(SAMPLE_PEOPLE).to.max(lambda a, b: a.years_at_company - b.years_at_company)
    logger.debug(f"longest tenure overall: {longest.name} ({longest.years_at_company} years)")

    return imperative, functional


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='imperative vs functional filtering demo')
    parser.add_argument('--department', default=DemoConfig.department_name,
                        help='department name to filter on')
    parser.add_argument('--min-years', type=int, default=DemoConfig.min_years,
                        help='minimum years at the company')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)

    # configure minimal logging
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = DemoConfig(department_name=args.department, min_years=args.min_years)
    imperative, functional = run_select_example(config)
    if imperative != functional:
        logger.error(f"counts disagree: {imperative} != {functional}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
