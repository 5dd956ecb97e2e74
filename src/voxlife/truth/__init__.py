from .golden import GoldenLife3D, count_mismatches, from_array, to_array
from .validator import ReferenceVerifier

__all__ = ["GoldenLife3D", "ReferenceVerifier", "count_mismatches", "from_array", "to_array"]
