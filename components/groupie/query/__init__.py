from groupie.query.core import (
    RelationSource,
    build_detail,
    filter_by_name_substring,
    find_by_name,
)

__all__ = [
    "RelationSource",
    "build_detail",
    "filter_by_name_substring",
    "find_by_name",
]
