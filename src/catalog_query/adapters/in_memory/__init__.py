"""In-memory adapter – product catalog over Python records."""
from catalog_query.adapters.in_memory.catalog import InMemoryProductCatalog
from catalog_query.adapters.in_memory.matching import like_to_regex, sort_records, to_specification
from catalog_query.adapters.in_memory.records import ProductRecord, VariantRecord

__all__ = [
    "InMemoryProductCatalog",
    "ProductRecord",
    "VariantRecord",
    "like_to_regex",
    "sort_records",
    "to_specification",
]
