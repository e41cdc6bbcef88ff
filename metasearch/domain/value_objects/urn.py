"""URN value objects.

An URN identifies one catalog entity: ``urn:li:<entityName>:<key>``. The key
is either a plain string or a parenthesised tuple whose parts may themselves
be URNs, e.g.
``urn:li:mlModelGroup:(urn:li:dataPlatform:sagemaker,churn-models,PROD)``.
"""

from dataclasses import dataclass
from typing import ClassVar

from metasearch.domain.enums import FabricType

_URN_PREFIX = "urn:li:"


def _split_tuple(key: str) -> tuple[str, ...]:
    """Split '(a,(b,c),d)' into ('a', '(b,c)', 'd'). Raises ValueError if unbalanced."""
    inner = key[1:-1]
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in inner:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise ValueError(f"Unbalanced parentheses in URN key: {key!r}")
        if ch == "," and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    if depth != 0:
        raise ValueError(f"Unbalanced parentheses in URN key: {key!r}")
    parts.append("".join(current))
    if any(not p for p in parts):
        raise ValueError(f"Empty part in URN key: {key!r}")
    return tuple(parts)


@dataclass(frozen=True)
class Urn:
    """Generic URN: entity name plus key parts."""

    entity_type: str
    parts: tuple[str, ...]

    @classmethod
    def from_string(cls, value: str) -> "Urn":
        """Parse an URN string.

        Raises:
            ValueError: If the string is not a well-formed URN.
        """
        if not value or not value.startswith(_URN_PREFIX):
            raise ValueError(f"URN must start with '{_URN_PREFIX}': {value!r}")
        rest = value[len(_URN_PREFIX):]
        entity_type, sep, key = rest.partition(":")
        if not sep or not entity_type or not key:
            raise ValueError(f"URN must have an entity type and a key: {value!r}")
        if key.startswith("("):
            if not key.endswith(")"):
                raise ValueError(f"Unterminated tuple key in URN: {value!r}")
            parts = _split_tuple(key)
        else:
            parts = (key,)
        return cls(entity_type=entity_type, parts=parts)

    @property
    def entity_key(self) -> str:
        """Key portion as it appears in the URN string."""
        if len(self.parts) == 1:
            return self.parts[0]
        return "(" + ",".join(self.parts) + ")"

    def __str__(self) -> str:
        return f"{_URN_PREFIX}{self.entity_type}:{self.entity_key}"


@dataclass(frozen=True)
class DataPlatformUrn:
    """URN of a data platform, e.g. ``urn:li:dataPlatform:sagemaker``."""

    platform_name: str

    ENTITY_TYPE: ClassVar[str] = "dataPlatform"

    @classmethod
    def from_urn(cls, urn: Urn) -> "DataPlatformUrn":
        if urn.entity_type != cls.ENTITY_TYPE or len(urn.parts) != 1:
            raise ValueError(f"Not a data platform URN: {urn}")
        return cls(platform_name=urn.parts[0])

    def __str__(self) -> str:
        return f"{_URN_PREFIX}{self.ENTITY_TYPE}:{self.platform_name}"


@dataclass(frozen=True)
class MLModelGroupUrn:
    """URN of an ML model group: platform, group name, and origin fabric."""

    platform: DataPlatformUrn
    name: str
    origin: FabricType

    ENTITY_TYPE: ClassVar[str] = "mlModelGroup"

    @classmethod
    def from_string(cls, value: str) -> "MLModelGroupUrn":
        """Parse an ML model group URN string.

        Raises:
            ValueError: If the string is not a valid ML model group URN.
        """
        urn = Urn.from_string(value)
        if urn.entity_type != cls.ENTITY_TYPE:
            raise ValueError(f"Not an {cls.ENTITY_TYPE} URN: {value!r}")
        if len(urn.parts) != 3:
            raise ValueError(
                f"{cls.ENTITY_TYPE} URN key must have 3 parts (platform, name, origin): {value!r}"
            )
        platform_str, name, origin = urn.parts
        platform = DataPlatformUrn.from_urn(Urn.from_string(platform_str))
        try:
            fabric = FabricType(origin)
        except ValueError:
            raise ValueError(f"Unknown fabric type {origin!r} in URN: {value!r}") from None
        return cls(platform=platform, name=name, origin=fabric)

    def __str__(self) -> str:
        return f"{_URN_PREFIX}{self.ENTITY_TYPE}:({self.platform},{self.name},{self.origin.value})"
