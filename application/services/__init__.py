from .catalog_service import CatalogService
from .conversion_service import ConversionService
from .insight_service import InsightService

__all__ = ['CatalogService', 'ConversionService', 'InsightService']
