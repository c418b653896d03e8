"""TrustAI - review authenticity scoring powered by AI."""

__version__ = "0.1.0"

from trust_ai.models import AnalysisOutcome, AnalysisResult
from trust_ai.pipeline import analyze, handle_analyze_request

__all__ = ["AnalysisOutcome", "AnalysisResult", "analyze", "handle_analyze_request"]
