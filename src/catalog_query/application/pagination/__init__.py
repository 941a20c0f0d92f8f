"""Application pagination – offset page primitives."""
from catalog_query.application.pagination.page import Page
from catalog_query.application.pagination.page_request import PageRequest, SortDirection

__all__ = ["Page", "PageRequest", "SortDirection"]
