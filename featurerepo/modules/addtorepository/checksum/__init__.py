from .calculator import ChecksumCalculator

__all__ = ["ChecksumCalculator"]
