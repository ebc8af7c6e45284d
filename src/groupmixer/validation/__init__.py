from groupmixer.validation.mix_validator import (
    BucketDeviation,
    CriterionResult,
    CriterionStatus,
    MixReport,
    age_bucket,
    build_mix_report,
    validate,
)

__all__ = [
    "BucketDeviation",
    "CriterionResult",
    "CriterionStatus",
    "MixReport",
    "age_bucket",
    "build_mix_report",
    "validate",
]
