from .locations import resource_to_artifact
from .reader import FeaturesDescriptorReader
from .resolver import FeatureResolver, ResolvedFeatures

__all__ = [
    "FeatureResolver",
    "FeaturesDescriptorReader",
    "ResolvedFeatures",
    "resource_to_artifact",
]
