"""Type-specific case folding for purl names and namespaces."""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple, Optional, Tuple

Transform = Callable[[str], str]


def _lowercase(value: str) -> str:
    return value.lower()


def _underscore_to_hyphen(value: str) -> str:
    return value.replace("_", "-")


class TypeRule(NamedTuple):
    """Transforms applied, in order, to the name and namespace of a type."""

    name: Tuple[Transform, ...] = ()
    namespace: Tuple[Transform, ...] = ()


_VCS_HOST_RULE = TypeRule(name=(_lowercase,), namespace=(_lowercase,))

TYPE_RULES: Mapping[str, TypeRule] = MappingProxyType({
    "bitbucket": _VCS_HOST_RULE,
    "github": _VCS_HOST_RULE,
    "gitlab": _VCS_HOST_RULE,
    "pypi": TypeRule(name=(_underscore_to_hyphen, _lowercase), namespace=(_lowercase,)),
})

DEFAULT_RULE = TypeRule()


def rule_for(purl_type: str) -> TypeRule:
    """Returns the normalization rule for a lowercased package type."""
    return TYPE_RULES.get(purl_type, DEFAULT_RULE)


def _apply(transforms: Tuple[Transform, ...], value: str) -> str:
    for transform in transforms:
        value = transform(value)
    return value


def normalize_name(purl_type: str, name: str) -> str:
    return _apply(rule_for(purl_type).name, name)


def normalize_namespace(purl_type: str, namespace: Optional[str]) -> Optional[str]:
    if namespace is None:
        return None
    return _apply(rule_for(purl_type).namespace, namespace)
