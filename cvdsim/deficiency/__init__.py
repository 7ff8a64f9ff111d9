"""Color vision deficiency models."""

from cvdsim.deficiency.anomaly import ANOMALY_WEIGHT, SeverityBlender
from cvdsim.deficiency.constants import DEFICIENCY_PARAMS, WHITE_POINT, DeficiencyParams
from cvdsim.deficiency.dichromacy import DeficiencySimulator
from cvdsim.deficiency.monochrome import MonochromeConverter

__all__ = [
    "ANOMALY_WEIGHT",
    "DEFICIENCY_PARAMS",
    "WHITE_POINT",
    "DeficiencyParams",
    "DeficiencySimulator",
    "MonochromeConverter",
    "SeverityBlender",
]
