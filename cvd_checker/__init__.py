"""cvd_checker: contrast checking under normal vision and colour blindness."""

from cvd_checker.core.audit import evaluate, run_audit
from cvd_checker.core.contrast import contrast_ratio, relative_luminance
from cvd_checker.core.findings import FindingRegistry
from cvd_checker.core.policy import ThresholdPolicy, is_sufficient, required_ratio
from cvd_checker.core.simulate import simulate
from cvd_checker.core.types import (
    COLOUR_BLINDNESS,
    Candidate,
    Colour,
    ContrastSample,
    Deficiency,
    Finding,
    InvalidColourError,
    TextStyle,
    UnsupportedDeficiencyError,
)

__all__ = [
    'COLOUR_BLINDNESS',
    'Candidate',
    'Colour',
    'ContrastSample',
    'Deficiency',
    'Finding',
    'FindingRegistry',
    'InvalidColourError',
    'TextStyle',
    'ThresholdPolicy',
    'UnsupportedDeficiencyError',
    'contrast_ratio',
    'evaluate',
    'is_sufficient',
    'relative_luminance',
    'required_ratio',
    'run_audit',
    'simulate',
]
