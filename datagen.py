'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded random departments and people for the test suites.
'''

import numpy as np
from faker import Faker
from iterfold import from_iterable, LazyIterable
from iterfold.samples import Department, Person
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_gen_provider"]
        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "maybe":
            # the wrapped schema, or None with the given probability
            if self._rng.random() < config.get("none_rate", 0.2):
                return None
            return self.create(config["value"])

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_gen_provider 'literal' requires a 'value' key.")
            return config["value"]

        else:
            raise ValueError(f"unknown _gen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_gen_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> LazyIterable:
        # generated once, so every traversal sees the same records
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


# --- domain records ---

def departments(count: int, seed: Optional[int] = None) -> List[Department]:
    """departments with ids 0..count-1"""
    schema = {
        'head_count': ('pyint', {'min_value': 1, 'max_value': 200}),
        'name': 'company',
    }
    rows = from_schema(schema, seed=seed).take(count).to.list()
    return [Department(i, row['head_count'], row['name']) for i, row in enumerate(rows)]


def people(count: int, department_ids: List[int], seed: Optional[int] = None) -> List[Person]:
    """people with ids 0..count-1 spread over the given departments"""
    schema = {
        'years_at_company': ('pyint', {'min_value': 0, 'max_value': 45}),
        'name': 'name',
        'department_id': {'_gen_provider': 'choice', 'from': department_ids},
    }
    rows = from_schema(schema, seed=seed).take(count).to.list()
    return [Person(i, row['years_at_company'], row['name'], row['department_id'])
            for i, row in enumerate(rows)]


def tenures(count: int, none_rate: float = 0.0, seed: Optional[int] = None) -> List[Optional[int]]:
    """bare integers, some of them None when none_rate > 0"""
    schema = {'_gen_provider': 'maybe', 'none_rate': none_rate,
              'value': ('pyint', {'min_value': 0, 'max_value': 45})}
    return from_schema(schema, seed=seed).take(count).to.list()
