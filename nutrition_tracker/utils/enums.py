from enum import Enum


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SourceType(str, Enum):
    OFFICIAL = "official"
    DATABASE = "database"
    SEARCH = "search"
    ESTIMATE = "estimate"


class EstimateStatus(str, Enum):
    EXACT = "Exact"
    ESTIMATE = "Estimate"
