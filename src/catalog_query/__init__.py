"""
catalog_query – storefront catalog query toolkit.

Import path convention::

    from catalog_query.query import parse_search_params, build_url
    from catalog_query.application.filtering import resolve_filter_params
    from catalog_query.application.predicates import build_predicate_descriptor
    from catalog_query.adapters.sqlalchemy import SqlAlchemyProductRepository
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
