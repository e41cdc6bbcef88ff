"""Core constants: search defaults and shared literal values.

These are the built-in defaults; Settings exposes each of them so a
deployment (or a test) can override them.
"""

from metasearch.domain.enums import EntityType

DEFAULT_START = 0
DEFAULT_COUNT = 10

# Entity kinds searched when a cross-entity search names no types.
SEARCHABLE_ENTITY_TYPES: tuple[EntityType, ...] = (
    EntityType.DATASET,
    EntityType.DASHBOARD,
    EntityType.CHART,
    EntityType.MLMODEL,
    EntityType.MLMODEL_GROUP,
    EntityType.MLFEATURE_TABLE,
    EntityType.DATA_FLOW,
    EntityType.DATA_JOB,
    EntityType.GLOSSARY_TERM,
    EntityType.TAG,
    EntityType.CORP_USER,
    EntityType.CORP_GROUP,
)

BROWSE_PATH_DELIMITER = "/"

# Actor URN prefix for bearer tokens whose subject is a bare user name.
CORP_USER_URN_PREFIX = "urn:li:corpuser:"
