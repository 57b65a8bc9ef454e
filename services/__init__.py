"""
业务服务模块
"""

from .country_repository import CountryRepository
from .memory_repository import CountryMemoryRepository
from .growth_service import (
    GrowthInformationService,
    UpdateGrowthInformationService,
    RemoveGrowthInformationService,
)
from .load_service import LoadStatus, LoadGrowthInformationService, StatusProcessService

__all__ = [
    "CountryRepository",
    "CountryMemoryRepository",
    "GrowthInformationService",
    "UpdateGrowthInformationService",
    "RemoveGrowthInformationService",
    "LoadStatus",
    "LoadGrowthInformationService",
    "StatusProcessService",
]
