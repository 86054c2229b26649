"""Static vocabulary tables used by keyword extraction."""

from __future__ import annotations

from types import MappingProxyType

# English function words plus research-paper boilerplate.
STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "from", "this", "that", "these", "those", "is", "are", "was",
        "were", "be", "been", "being", "have", "has", "had", "do", "does", "did",
        "will", "would", "could", "should", "may", "might", "can", "must", "shall",
        "we", "our", "us", "i", "me", "my", "you", "your", "he", "him", "his",
        "she", "her", "it", "its", "they", "them", "their",
        "study", "studies", "research", "analysis", "results", "conclusion",
        "background", "methods", "objective", "purpose", "introduction",
        "discussion", "patients", "patient", "subjects", "participants", "data",
        "using", "used", "significantly", "increase", "increased", "decrease",
        "decreased", "effect", "effects", "treatment", "control", "group",
        "groups", "compared", "comparison", "vs", "versus",
    }
)

# Two-letter keys (ct, er, bp) never match: the length filter drops them first.
ABBREVIATIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "dna": "deoxyribonucleic acid",
        "rna": "ribonucleic acid",
        "pcr": "polymerase chain reaction",
        "mri": "magnetic resonance imaging",
        "ct": "computed tomography",
        "hiv": "human immunodeficiency virus",
        "aids": "acquired immunodeficiency syndrome",
        "covid": "coronavirus disease",
        "sars": "severe acute respiratory syndrome",
        "who": "world health organization",
        "fda": "food and drug administration",
        "nih": "national institutes of health",
        "cdc": "centers for disease control",
        "icu": "intensive care unit",
        "er": "emergency room",
        "bp": "blood pressure",
        "bmi": "body mass index",
        "ecg": "electrocardiogram",
        "eeg": "electroencephalogram",
    }
)

# Substrings that mark a term as biomedical; matched case-insensitively.
BIOMEDICAL_MARKERS: tuple[str, ...] = (
    "protein", "gene", "cell", "tissue", "cancer", "tumor", "disease",
    "therapy", "treatment", "drug", "medicine", "clinical", "patient",
    "syndrome", "disorder", "infection", "virus", "bacteria", "immune",
    "blood", "brain", "heart", "kidney", "liver", "lung", "bone",
    "muscle", "nerve", "hormone", "enzyme", "antibody", "vaccine",
    "diagnosis", "screening", "biomarker", "pathway", "mechanism",
    "receptor", "inhibitor", "activation", "expression", "mutation",
)
