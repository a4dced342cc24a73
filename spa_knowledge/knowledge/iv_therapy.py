ENTRIES = [
    {
        "id": "iv-therapy.iv-basics",
        "topic": "IV vitamin therapy",
        "category": "iv-therapy",
        "explanation": (
            "IV therapy delivers fluids, electrolytes and vitamins such as B-complex, vitamin C and "
            "magnesium directly into the bloodstream. A drip takes 30 to 60 minutes. People use it "
            "for hydration after travel, illness or a hard workout, and for an energy boost. A short "
            "health screening comes first."
        ),
        "whatItHelpsWith": [
            "Hydration",
            "Recovery after illness or exercise",
            "Energy and wellness support",
        ],
        "whoItsFor": [
            "Healthy adults after a brief medical screening",
        ],
        "whoItsNotFor": [
            "People with heart failure or kidney disease unless cleared by their doctor",
            "Anyone with certain electrolyte disorders",
        ],
        "commonQuestions": [
            "What's in a Myers cocktail?",
            "How often can I get an IV drip?",
        ],
        "safetyNotes": [
            "Some bruising at the IV site is common.",
        ],
        "escalationTriggers": [
            "chest pain",
            "trouble breathing",
            "arm swelling",
            "red streak",
            "fever",
        ],
        "relatedTopics": [
            "iv-therapy.nad-plus",
        ],
        "updatedAt": "2025-01-10T00:00:00Z",
        "version": 1,
    },
    {
        "id": "iv-therapy.nad-plus",
        "topic": "NAD+ infusions",
        "category": "iv-therapy",
        "explanation": (
            "NAD+ is a coenzyme involved in cellular energy production and repair. NAD+ infusions are "
            "given slowly, often over two to four hours, because a fast drip can cause chest pressure, "
            "nausea or flushing. People seek it for energy, focus and recovery support."
        ),
        "whatItHelpsWith": [
            "Energy and focus",
            "Recovery support",
        ],
        "whoItsFor": [
            "Adults who can commit to a longer infusion appointment",
        ],
        "whoItsNotFor": [
            "Anyone pregnant or breastfeeding",
        ],
        "commonQuestions": [
            "Why does an NAD+ infusion take so long?",
        ],
        "safetyNotes": [
            "Tell the nurse right away if you feel chest pressure or nausea; the drip can be slowed.",
        ],
        "escalationTriggers": [
            "chest pain",
            "trouble breathing",
        ],
        "relatedTopics": [
            "iv-therapy.iv-basics",
        ],
        "updatedAt": "2025-01-10T00:00:00Z",
        "version": 1,
    },
]
