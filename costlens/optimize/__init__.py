"""
Optimize Module - Cost Recommendations

Point at the resource groups, services and days that drive spend.
"""

from costlens.optimize.recommender import (
    Recommendation,
    RecommendationType,
    generate_recommendations,
)

__all__ = [
    "Recommendation",
    "RecommendationType",
    "generate_recommendations",
]
