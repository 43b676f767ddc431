"""Language-model processing steps: relevance gatekeeping and bias investigation."""

from .gatekeeper import Gatekeeper
from .investigator import AnalysisError, Investigator

__all__ = ["Gatekeeper", "Investigator", "AnalysisError"]
