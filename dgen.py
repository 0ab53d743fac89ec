'''
seeded record generator for linqarray test fixtures.

a schema is a dict of field -> spec. a spec is one of:
    'word'                               faker provider name
    ('pyint', {'min_value': 1})          faker provider with kwargs
    {'_qen_provider': 'choice', 'from': [...]}
    {'_qen_provider': 'counter', 'start': 1}
    {'_qen_provider': 'ref', 'key': 'id', 'format': 'item-{}'}
    {'_qen_provider': 'literal', 'value': None}
    [{'_qen_items': <spec>, '_qen_count': n or (lo, hi)}]
anything else is returned as-is.
'''

import numpy as np
from faker import Faker
from linqarray import wrap, QueryableSequence
from typing import Any, Dict, Optional


class Generator:
    """walks a schema and produces one record per create() call."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            # instance-level seeding keeps separate generators independent
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)
        self._counters: Dict[int, int] = {}

    def _faker(self, name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{name}'")
        return method(**(kwargs or {}))

    def _provider(self, config: Dict, context: Dict) -> Any:
        kind = config["_qen_provider"]

        if kind == "choice":
            options = config["from"]
            # index into the options so native python values come back, not numpy scalars
            return options[int(self._rng.integers(len(options)))]

        if kind == "counter":
            slot = id(config)
            value = self._counters.get(slot, config.get("start", 1))
            self._counters[slot] = value + 1
            return value

        if kind == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            value = context[key]
            return config["format"].format(value) if "format" in config else value

        if kind == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{kind}'")

    def _count(self, item_schema: Any) -> int:
        spec = item_schema.get("_qen_count", 3) if isinstance(item_schema, dict) else 3
        if isinstance(spec, (list, tuple)):
            low, high = spec
            return int(self._rng.integers(low, high, endpoint=True))
        return spec

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._provider(schema, context)
            record = {}
            for field, spec in schema.items():
                # fields may reference earlier siblings as well as parent fields
                record[field] = self.create(spec, {**context, **record})
            return record

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            inner = item_schema.get("_qen_items", item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(inner, context) for _ in range(self._count(item_schema))]

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._faker(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> QueryableSequence:
        return wrap(self._generator.create(self._schema) for _ in range(count))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
