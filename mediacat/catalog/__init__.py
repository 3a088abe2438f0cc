"""Movie collection catalog: tree construction, queries and mutations."""

from mediacat.catalog.builder import CatalogBuilder, build_catalog_tree
from mediacat.catalog.mutator import Mutator
from mediacat.catalog.collection import Catalog

__all__ = [
    "CatalogBuilder",
    "build_catalog_tree",
    "Mutator",
    "Catalog",
]
