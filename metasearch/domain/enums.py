"""Domain enumerations for the metadata catalog.

EntityType is the public name of an entity kind; entity_name is the name
the downstream entity service uses for the same kind.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class EntityType(_ValuesMixin, str, Enum):
    """Entity kinds known to the catalog."""

    DATASET = "DATASET"
    DASHBOARD = "DASHBOARD"
    CHART = "CHART"
    MLMODEL = "MLMODEL"
    MLMODEL_GROUP = "MLMODEL_GROUP"
    MLFEATURE_TABLE = "MLFEATURE_TABLE"
    MLFEATURE = "MLFEATURE"
    MLPRIMARY_KEY = "MLPRIMARY_KEY"
    DATA_FLOW = "DATA_FLOW"
    DATA_JOB = "DATA_JOB"
    DATA_PLATFORM = "DATA_PLATFORM"
    GLOSSARY_TERM = "GLOSSARY_TERM"
    TAG = "TAG"
    CORP_USER = "CORP_USER"
    CORP_GROUP = "CORP_GROUP"

    @property
    def entity_name(self) -> str:
        """Downstream entity name (e.g. 'mlModelGroup')."""
        return _ENTITY_NAMES[self]

    @classmethod
    def from_entity_name(cls, name: str) -> "EntityType":
        """Resolve an EntityType from a downstream entity name.

        Raises:
            ValueError: If the name is not a known entity name.
        """
        try:
            return _ENTITY_TYPES_BY_NAME[name]
        except KeyError:
            raise ValueError(f"Unknown entity name: {name!r}") from None


_ENTITY_NAMES: dict[EntityType, str] = {
    EntityType.DATASET: "dataset",
    EntityType.DASHBOARD: "dashboard",
    EntityType.CHART: "chart",
    EntityType.MLMODEL: "mlModel",
    EntityType.MLMODEL_GROUP: "mlModelGroup",
    EntityType.MLFEATURE_TABLE: "mlFeatureTable",
    EntityType.MLFEATURE: "mlFeature",
    EntityType.MLPRIMARY_KEY: "mlPrimaryKey",
    EntityType.DATA_FLOW: "dataFlow",
    EntityType.DATA_JOB: "dataJob",
    EntityType.DATA_PLATFORM: "dataPlatform",
    EntityType.GLOSSARY_TERM: "glossaryTerm",
    EntityType.TAG: "tag",
    EntityType.CORP_USER: "corpuser",
    EntityType.CORP_GROUP: "corpGroup",
}

_ENTITY_TYPES_BY_NAME: dict[str, EntityType] = {v: k for k, v in _ENTITY_NAMES.items()}


class FabricType(_ValuesMixin, str, Enum):
    """Environment (fabric) an entity belongs to; last component of an ML model group URN."""

    DEV = "DEV"
    TEST = "TEST"
    QA = "QA"
    UAT = "UAT"
    EI = "EI"
    PRE = "PRE"
    STG = "STG"
    NON_PROD = "NON_PROD"
    PROD = "PROD"
    CORP = "CORP"


class OwnershipType(_ValuesMixin, str, Enum):
    """Owner role as reported by the Ownership aspect."""

    DEVELOPER = "DEVELOPER"
    DATAOWNER = "DATAOWNER"
    DELEGATE = "DELEGATE"
    PRODUCER = "PRODUCER"
    CONSUMER = "CONSUMER"
    STAKEHOLDER = "STAKEHOLDER"
    TECHNICAL_OWNER = "TECHNICAL_OWNER"
    BUSINESS_OWNER = "BUSINESS_OWNER"
    DATA_STEWARD = "DATA_STEWARD"
    NONE = "NONE"
