"""Related-papers similarity engine."""

from .config import ImportantTermsConfig, KeywordConfig, RankingConfig, SimilarityConfig
from .keywords.extractor import extract_keywords, extract_terms, is_biomedical_term
from .retrieval.ranker import RelatedPaperRanker, find_similar_papers
from .retrieval.scorer import SimilarityScorer, calculate_similarity, cosine_similarity
from .retrieval.terms import extract_important_terms
from .types import Document, SimilarityResult

__all__ = [
    "Document",
    "ImportantTermsConfig",
    "KeywordConfig",
    "RankingConfig",
    "RelatedPaperRanker",
    "SimilarityConfig",
    "SimilarityResult",
    "SimilarityScorer",
    "calculate_similarity",
    "cosine_similarity",
    "extract_important_terms",
    "extract_keywords",
    "extract_terms",
    "find_similar_papers",
    "is_biomedical_term",
]
