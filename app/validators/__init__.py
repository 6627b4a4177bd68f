"""
app/validators package marker.
"""

from app.validators.farm_validator import FarmRecordValidator, VersionsRequirement, validate_record

__all__ = [
    "FarmRecordValidator",
    "VersionsRequirement",
    "validate_record",
]
