from casebrief.extraction.analysis_client import AnalysisClient
from casebrief.extraction.base import BaseAnalysisClient
from casebrief.extraction.factory import AnalysisClientFactory
from casebrief.extraction.schema import ExtractionSchema

__all__ = [
    "AnalysisClient",
    "AnalysisClientFactory",
    "BaseAnalysisClient",
    "ExtractionSchema",
]
