"""System-owned screening guidelines every user can see."""

from screenwise.domain.models import SYSTEM_OWNER, Guideline

_SEED_RECORDS: list[dict] = [
    {
        "id": "colorectal_screening",
        "name": "Colorectal Cancer Screening",
        "description": "Screening for colorectal cancer using stool-based tests or colonoscopy.",
        "category": "Cancer Screening",
        "genders": ["all"],
        "frequency": "Varies by age",
        "tags": ["colorectal", "cancer", "colonoscopy", "FIT"],
        "ageRanges": [
            {
                "min": 45,
                "max": 49,
                "label": "45-49",
                "frequency": "Every 1-3 years with FIT or other stool-based test",
                "frequencyMonths": 12,
                "frequencyMonthsMax": 36,
                "notes": "Starting at age 45 for average risk individuals",
            },
            {
                "min": 50,
                "max": 75,
                "label": "50-75",
                "frequency": "Every 10 years with colonoscopy, or other methods more often",
                "frequencyMonths": 12,
                "frequencyMonthsMax": 120,
                "notes": "High risk individuals may need more frequent screening",
            },
            {
                "min": 76,
                "max": 85,
                "label": "76-85",
                "frequency": "Based on individual health status and screening history",
                "frequencyMonths": 12,
                "frequencyMonthsMax": 120,
                "notes": "Decision should be made with healthcare provider",
            },
        ],
    },
    {
        "id": "breast_screening",
        "name": "Breast Cancer Screening",
        "description": "Mammography and clinical breast exams for early detection.",
        "category": "Cancer Screening",
        "genders": ["female"],
        "frequency": "Varies by age",
        "tags": ["cancer", "women's health", "mammogram"],
        "ageRanges": [
            {
                "min": 25,
                "max": 39,
                "frequency": "Clinical breast exam every 1-3 years",
                "frequencyMonths": 12,
                "frequencyMonthsMax": 36,
                "notes": "For women at average risk",
            },
            {
                "min": 40,
                "max": 54,
                "frequency": "Annual mammogram",
                "frequencyMonths": 12,
                "notes": "More frequent for those with family history or genetic risk factors",
            },
            {
                "min": 55,
                "max": 74,
                "frequency": "Every 1-2 years",
                "frequencyMonths": 12,
                "frequencyMonthsMax": 24,
                "notes": "Option to continue annual screening based on preference",
            },
            {
                "min": 75,
                "frequency": "Individualized decision",
                "frequencyMonths": 24,
                "notes": "Based on overall health and expected longevity",
            },
        ],
        "resources": [
            {
                "name": "Breast Cancer Risk Assessment Tool",
                "url": "https://bcrisktool.cancer.gov/",
                "type": "risk",
            }
        ],
    },
    {
        "id": "cervical_screening",
        "name": "Cervical Cancer Screening",
        "description": "Pap smear and HPV testing to detect cervical cancer early.",
        "category": "Cancer Screening",
        "genders": ["female"],
        "tags": ["cancer", "women's health", "pap", "HPV"],
        "ageRanges": [
            {
                "min": 21,
                "max": 29,
                "frequency": "Pap test every 3 years",
                "frequencyMonths": 36,
            },
            {
                "min": 30,
                "max": 65,
                "frequency": "Pap every 3 years or co-testing every 5 years",
                "frequencyMonths": 36,
                "frequencyMonthsMax": 60,
            },
        ],
    },
    {
        "id": "prostate_screening",
        "name": "Prostate Cancer Screening",
        "description": "Recommendations for prostate cancer screening through PSA testing.",
        "category": "Cancer Screening",
        "genders": ["male"],
        "frequency": "Based on risk factors and PSA levels",
        "frequencyMonths": 12,
        "tags": ["cancer", "men's health", "preventive"],
        "ageRanges": [
            {
                "min": 40,
                "max": 49,
                "frequency": "Consider screening for high-risk men",
                "frequencyMonths": 12,
                "notes": "Including African American men and those with family history",
            },
            {
                "min": 50,
                "max": 69,
                "frequency": "Consider screening every 1-2 years",
                "frequencyMonths": 24,
            },
            {
                "min": 70,
                "frequency": "Individualized decision based on health status",
                "frequencyMonths": 24,
            },
        ],
    },
    {
        "id": "blood_pressure",
        "name": "Blood Pressure Check",
        "description": "Screening for high blood pressure.",
        "category": "Cardiovascular",
        "genders": ["all"],
        "frequency": "At least every 2 years",
        "frequencyMonths": 12,
        "frequencyMonthsMax": 24,
        "tags": ["heart", "preventive"],
        "ageRanges": [{"min": 18}],
    },
]


def seed_guidelines() -> list[Guideline]:
    """Fresh copies of the seed catalogue, public and owned by the system."""
    return [
        Guideline.model_validate({**record, "visibility": "public", "createdBy": SYSTEM_OWNER})
        for record in _SEED_RECORDS
    ]
