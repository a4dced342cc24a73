ENTRIES = [
    {
        "id": "aesthetics.co2-resurfacing",
        "topic": "CO2 laser resurfacing",
        "category": "aesthetics",
        "explanation": (
            "Fractional CO2 laser resurfacing creates thousands of microscopic treatment columns in the "
            "skin. As the skin heals it rebuilds collagen, which improves texture, fine lines, acne "
            "scars, sun damage and even stretch marks. It is one of the most powerful non-surgical "
            "skin treatments and comes with real downtime: expect about a week of redness, peeling "
            "and tenderness."
        ),
        "whatItHelpsWith": [
            "Fine lines and wrinkles",
            "Acne scars and surgical scars",
            "Sun damage and uneven tone",
            "Rough texture and large pores",
            "Stretch marks",
        ],
        "whoItsFor": [
            "Adults wanting a significant texture change who can plan around downtime",
        ],
        "whoItsNotFor": [
            "Anyone pregnant or breastfeeding",
            "People who used isotretinoin (Accutane) recently",
            "Anyone with an active tan or a history of poor wound healing",
        ],
        "commonQuestions": [
            "How much downtime is there after CO2?",
            "How many CO2 sessions will I need?",
            "Is CO2 laser painful?",
        ],
        "safetyNotes": [
            "Strict sun avoidance before and after treatment lowers pigment risk.",
            "People prone to cold sores usually take an antiviral around treatment.",
        ],
        "escalationTriggers": [
            "fever",
            "pus",
            "oozing yellow",
            "spreading redness",
            "severe pain",
        ],
        "relatedTopics": [
            "aftercare.laser-aftercare",
            "aesthetics.microneedling",
            "skincare.daily-sunscreen",
        ],
        "updatedAt": "2025-02-01T00:00:00Z",
        "version": 2,
    },
    {
        "id": "aesthetics.microneedling",
        "topic": "Microneedling",
        "category": "aesthetics",
        "explanation": (
            "Microneedling uses fine needles to create controlled micro-channels in the skin, "
            "triggering the body's natural repair response and new collagen. It can be combined with "
            "PRP or radiofrequency. Downtime is short, usually one to three days of pinkness, and most "
            "people do a series of three to six sessions about a month apart."
        ),
        "whatItHelpsWith": [
            "Acne scars",
            "Enlarged pores",
            "Fine lines",
            "Dull or uneven texture",
        ],
        "whoItsFor": [
            "Most skin types wanting gradual texture improvement with little downtime",
        ],
        "whoItsNotFor": [
            "Anyone with active acne breakouts or infection in the area",
            "Anyone pregnant",
        ],
        "commonQuestions": [
            "How many microneedling sessions do I need?",
            "Microneedling vs laser: which is better for scars?",
        ],
        "safetyNotes": [
            "Skip retinoids and exfoliating acids for a few days before and after.",
        ],
        "escalationTriggers": [
            "fever",
            "pus",
            "spreading redness",
        ],
        "relatedTopics": [
            "aesthetics.co2-resurfacing",
            "hair-restoration.prp-hair",
        ],
        "updatedAt": "2025-02-01T00:00:00Z",
        "version": 1,
    },
]
