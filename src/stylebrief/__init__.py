from .adjusters import DignityLevel, apply_freshness_boost, assess_dignity
from .aggregator import TokenPools, aggregate
from .analysis import DailySignature, TokenAnalysis
from .assembler import OutputContent, assemble
from .confidence import ConfidenceLevel, assess_confidence
from .energy import ENERGY_TOTAL, EnergyBreakdown, allocate
from .engine import generate
from .seed import daily_seed
from .selector import select
from .tokens import Token, TokenCategory, TokenOrigin, TransitAspect, WeatherFacts
from .weighting import PRESETS, WeightingModel, default_model
