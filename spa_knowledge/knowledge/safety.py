ENTRIES = [
    {
        "id": "safety.pregnancy-breastfeeding",
        "topic": "Aesthetic treatments during pregnancy and breastfeeding",
        "category": "safety",
        "explanation": (
            "Most injectables, lasers, peels and prescription medications are postponed during "
            "pregnancy and breastfeeding because they have not been studied for safety in those "
            "groups. Gentle facials and basic skincare without retinoids are usually fine. Your "
            "provider will help you plan treatments for after you are done nursing."
        ),
        "whatItHelpsWith": [
            "Knowing which treatments to pause",
            "Planning treatments for later",
        ],
        "whoItsFor": [
            "Anyone pregnant, trying to conceive or breastfeeding",
        ],
        "whoItsNotFor": [],
        "commonQuestions": [
            "Can I get Botox while breastfeeding?",
            "Is it safe to get a facial while pregnant?",
        ],
        "safetyNotes": [
            "Tell your provider if there is any chance you could be pregnant.",
        ],
        "escalationTriggers": [
            "bleeding while pregnant",
            "contractions",
        ],
        "relatedTopics": [
            "injectables.botox-basics",
            "skincare.chemical-peels",
        ],
        "updatedAt": "2025-01-05T00:00:00Z",
        "version": 1,
    },
    {
        "id": "safety.vascular-occlusion-warning-signs",
        "topic": "Filler warning signs that need urgent attention",
        "category": "safety",
        "explanation": (
            "Rarely, filler can press on or enter a blood vessel and block blood flow to the skin. "
            "Warning signs include pain that is severe or out of proportion, skin turning white or "
            "blanching, then a dusky, mottled or purple color, and in very rare cases vision changes. "
            "This is a time-sensitive complication: contact your injector immediately, and go to the "
            "emergency room for any change in vision."
        ),
        "whatItHelpsWith": [
            "Recognizing a filler emergency",
            "Knowing who to call",
        ],
        "whoItsFor": [
            "Anyone recently treated with filler",
        ],
        "whoItsNotFor": [],
        "commonQuestions": [
            "What does a filler complication look like?",
            "What should I do if my skin looks white after filler?",
        ],
        "safetyNotes": [
            "Hyaluronic acid filler can be dissolved; acting early matters.",
        ],
        "escalationTriggers": [
            "severe pain",
            "skin turning white",
            "blanching",
            "dusky",
            "mottled",
            "purple",
            "vision changes",
            "blurry vision",
            "can't see",
        ],
        "relatedTopics": [
            "aftercare.filler-swelling-bruising",
            "injectables.dermal-filler-basics",
        ],
        "updatedAt": "2025-01-15T00:00:00Z",
        "version": 2,
    },
]
