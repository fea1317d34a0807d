"""Domain value objects."""

from crud_backbone.domain.value_objects.pagination import PaginationParams, SortOrder

__all__ = ["PaginationParams", "SortOrder"]
