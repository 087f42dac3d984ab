# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Admin-Only PII for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is tailored for serializer-level PII redaction.

from numbers import Number
from typing import Any, Callable, Dict, Mapping

DEFAULT_PLACEHOLDER = "unknown"


def sanitize_value(value, placeholder: str = DEFAULT_PLACEHOLDER):
    # bool is a Number subclass, so it is checked first
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return placeholder
    if isinstance(value, Number):
        return 0
    return None


class MappingFieldSource:
    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values = dict(values or {})

    def supplies(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str):
        return self._values.get(name)


EMPTY_SOURCE = MappingFieldSource()


class Redactor:
    def __init__(self, table, checker):
        self.table = table
        self.checker = checker

    def sanitize(self, value):
        return sanitize_value(value, self.table.placeholder)

    def process(self, structure: Mapping[str, Any], caller, field_source) -> Mapping[str, Any]:
        if self.checker.is_privileged(caller):
            return structure
        return self._process_obj(structure, field_source)

    def _process_obj(self, o: Mapping[str, Any], field_source) -> Dict[str, Any]:
        result = {}
        for k, v in o.items():
            name = str(k)
            if name in self.table.sensitive_fields:
                # no authoritative value: drop the key rather than guess
                if not field_source.supplies(name):
                    continue
                result[k] = self.sanitize(field_source.get(name))
            else:
                result[k] = self._process_nested(v, field_source)
        return result

    def _process_nested(self, v, field_source):
        if isinstance(v, Mapping):
            return self._process_obj(v, field_source)
        if isinstance(v, list):
            return [self._process_nested(x, field_source) for x in v]
        return v

    def get_field(self, name: str, caller, accessor: Callable[[], Any]):
        value = accessor()
        if name not in self.table.sensitive_fields or self.checker.is_privileged(caller):
            return value
        return self.sanitize(value)
