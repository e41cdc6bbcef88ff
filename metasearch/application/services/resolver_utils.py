"""Helpers shared by resolvers: filter construction and browse path translation."""

from collections.abc import Collection

from metasearch.application.dtos.entity_service import Criterion, Filter
from metasearch.application.dtos.search import FacetFilterInput
from metasearch.domain.exceptions import ValidationException


def build_filter(filters: list[FacetFilterInput] | None) -> Filter | None:
    """Build the downstream filter expression (AND of equality criteria).

    Returns None when no filters were supplied so the search is unfiltered.
    """
    if not filters:
        return None
    return Filter(criteria=[Criterion(field=f.field, value=f.value) for f in filters])


def build_facet_filters(
    filters: list[FacetFilterInput] | None,
    valid_facet_fields: Collection[str],
) -> dict[str, str]:
    """Translate filters into a facet map restricted to valid_facet_fields.

    A later filter on the same field replaces an earlier one.

    Raises:
        ValidationException: If a filter names a field outside valid_facet_fields.
    """
    facet_filters: dict[str, str] = {}
    for f in filters or []:
        if f.field not in valid_facet_fields:
            raise ValidationException(
                f"Unrecognized facet with name {f.field} provided", field="filters"
            )
        facet_filters[f.field] = f.value
    return facet_filters


def build_browse_path(path: list[str], delimiter: str) -> str:
    """Join path segments with a leading delimiter: [] -> '', ['a', 'b'] -> '/a/b'."""
    if not path:
        return ""
    return delimiter + delimiter.join(path)


def split_browse_path(path: str, delimiter: str) -> list[str]:
    """Split a browse path string into its non-empty segments."""
    return [segment for segment in path.split(delimiter) if segment]
