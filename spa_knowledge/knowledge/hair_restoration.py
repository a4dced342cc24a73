ENTRIES = [
    {
        "id": "hair-restoration.prp-hair",
        "topic": "PRP for hair thinning",
        "category": "hair-restoration",
        "explanation": (
            "Platelet-rich plasma (PRP) is made from a small sample of your own blood, spun to "
            "concentrate platelets and growth factors, then injected into thinning areas of the scalp. "
            "It can strengthen existing follicles and slow shedding. A typical plan is three sessions "
            "about a month apart, then maintenance every few months."
        ),
        "whatItHelpsWith": [
            "Early hair thinning",
            "Increased shedding",
            "Widening part",
        ],
        "whoItsFor": [
            "Men and women with early to moderate thinning and active follicles",
        ],
        "whoItsNotFor": [
            "People with blood or platelet disorders",
            "Anyone on blood thinners unless cleared by their doctor",
            "Areas that are fully bald",
        ],
        "commonQuestions": [
            "How many PRP sessions do I need for hair?",
            "When will I see new hair growth?",
        ],
        "safetyNotes": [
            "Scalp tenderness for a day or two is normal.",
        ],
        "escalationTriggers": [
            "fever",
            "pus",
            "spreading redness",
        ],
        "relatedTopics": [
            "aesthetics.microneedling",
        ],
        "updatedAt": "2025-02-05T00:00:00Z",
        "version": 1,
    },
]
