ENTRIES = [
    {
        "id": "aftercare.botox-aftercare",
        "topic": "Aftercare for Botox and neuromodulators",
        "category": "aftercare",
        "explanation": (
            "After Botox, stay upright for four hours, skip strenuous workouts, saunas and hot yoga for "
            "the rest of the day, and avoid rubbing or massaging the treated area. Gentle facial "
            "expressions are fine. Makeup can usually go on the next day. Small bumps and redness fade "
            "quickly."
        ),
        "whatItHelpsWith": [
            "Keeping product where it was placed",
            "Lowering bruising risk",
        ],
        "whoItsFor": [
            "Anyone just treated with Botox, Dysport, Xeomin or Jeuveau",
        ],
        "whoItsNotFor": [],
        "commonQuestions": [
            "Can I work out after Botox?",
            "When can I lie down after Botox?",
        ],
        "safetyNotes": [
            "A small bruise is common and fades within a week.",
        ],
        "escalationTriggers": [
            "trouble swallowing",
            "trouble breathing",
            "difficulty speaking",
            "double vision",
        ],
        "relatedTopics": [
            "injectables.botox-basics",
            "expectations.neuromodulator-timeline",
        ],
        "updatedAt": "2025-01-15T00:00:00Z",
        "version": 2,
    },
    {
        "id": "aftercare.filler-swelling-bruising",
        "topic": "Swelling and bruising after filler",
        "category": "aftercare",
        "explanation": (
            "Swelling after filler is normal and expected. It usually peaks on day two or three and "
            "settles over one to two weeks; lips swell the most. Bruising can appear at injection "
            "points and fades within about a week. Cold compresses, sleeping with your head elevated, "
            "and skipping alcohol and intense exercise for a day or two help. Arnica may reduce "
            "bruising."
        ),
        "whatItHelpsWith": [
            "Knowing what normal swelling looks like",
            "Reducing bruising",
            "Recognizing when to call the clinic",
        ],
        "whoItsFor": [
            "Anyone recently treated with dermal or lip filler",
        ],
        "whoItsNotFor": [],
        "commonQuestions": [
            "Is swelling after filler normal?",
            "How long does filler swelling last?",
            "How do I reduce bruising after filler?",
        ],
        "safetyNotes": [
            "Swelling that is one-sided, hard, hot or getting worse after day three should be checked.",
            "Pain that increases instead of improving is not typical.",
        ],
        "escalationTriggers": [
            "severe pain",
            "skin turning white",
            "blanching",
            "dusky",
            "mottled",
            "vision changes",
            "blurry vision",
            "fever",
        ],
        "relatedTopics": [
            "expectations.filler-timeline",
            "safety.vascular-occlusion-warning-signs",
            "injectables.dermal-filler-basics",
        ],
        "updatedAt": "2025-01-15T00:00:00Z",
        "version": 3,
    },
    {
        "id": "aftercare.laser-aftercare",
        "topic": "Healing after laser resurfacing",
        "category": "aftercare",
        "explanation": (
            "After resurfacing, keep the skin clean and constantly moisturized with the ointment your "
            "provider recommends. Expect redness, warmth and peeling for about a week; do not pick. "
            "Avoid sun, sweating and makeup until the skin has re-surfaced. Pinkness can linger for "
            "several weeks and is normal."
        ),
        "whatItHelpsWith": [
            "Faster, cleaner healing",
            "Lowering infection and pigment risk",
        ],
        "whoItsFor": [
            "Anyone healing from CO2 or other resurfacing lasers",
        ],
        "whoItsNotFor": [],
        "commonQuestions": [
            "When can I wear makeup after laser?",
            "How long will my skin be red after CO2?",
        ],
        "safetyNotes": [
            "Use only the products your provider approves while skin is open.",
        ],
        "escalationTriggers": [
            "fever",
            "pus",
            "oozing yellow",
            "spreading redness",
            "severe pain",
            "blisters",
        ],
        "relatedTopics": [
            "aesthetics.co2-resurfacing",
            "skincare.daily-sunscreen",
        ],
        "updatedAt": "2025-02-01T00:00:00Z",
        "version": 1,
    },
]
