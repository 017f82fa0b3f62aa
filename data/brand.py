"""Brand reputation ladder and airline concepts."""

from core.catalogs import BrandReputation, AirlineConceptData, per_cabin
from core.models import BrandReputationType as R, AirlineConcept

REPUTATIONS = [
    BrandReputation(R.STARTUP, "Startup", per_cabin(1.05, 1.05, 1.05)),
    BrandReputation(R.TRANSITIONING, "Rebranding", per_cabin(1.0, 1.0, 1.0)),
    BrandReputation(R.CRASHED, "Damaged by accident", per_cabin(0.1, 0.2, 0.4)),
    BrandReputation(R.FSC_CLASSIC, "Classic full-service", per_cabin(1.15, 1.2, 1.0),
                    otp_penalty=90, satisfaction_penalty=70),
    BrandReputation(R.FSC_PREMIUM, "Premium full-service", per_cabin(1.2, 1.15, 0.9),
                    otp_penalty=90, satisfaction_penalty=75),
    BrandReputation(R.FSC_NORMAL, "Full-service", per_cabin(1.0, 1.0, 1.0),
                    required_otp=95, required_satisfaction=85),
    BrandReputation(R.LCC_GOOD, "Quality low-cost", per_cabin(0, 0.9, 1.15),
                    otp_penalty=88, satisfaction_penalty=60),
    BrandReputation(R.LCC_STANDARD, "Low-cost", per_cabin(0, 0.8, 1.1),
                    required_otp=90, required_satisfaction=70),
    BrandReputation(R.ULCC, "Ultra low-cost", per_cabin(0, 0.5, 1.3)),
]

CONCEPTS = [
    AirlineConceptData(AirlineConcept.FSC, "Full-Service Carrier (FSC)", R.FSC_NORMAL),
    AirlineConceptData(AirlineConcept.LCC, "Low-Cost Carrier (LCC)", R.LCC_STANDARD),
]
