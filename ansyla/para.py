from typing import Dict

# Option code -> display label. Codes are what gets submitted.

genders: Dict[str, str] = {
    "male": "Male",
    "female": "Female",
    "non_binary": "Non-binary",
    "prefer_not_to_say": "Prefer not to say",
}

countries: Dict[str, str] = {
    "ghana": "🇬🇭 Ghana",
    "nigeria": "🇳🇬 Nigeria",
    "kenya": "🇰🇪 Kenya",
}

qualifications: Dict[str, str] = {
    "high_school": "High School Diploma/GED",
    "bachelor": "Bachelor's Degree",
    "master": "Master's Degree",
    "phd": "Ph.D. or Doctorate",
    "other": "Other",
}
