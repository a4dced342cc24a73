ENTRIES = [
    {
        "id": "skincare.chemical-peels",
        "topic": "Chemical peels",
        "category": "skincare",
        "explanation": (
            "A chemical peel applies an acid solution that loosens and removes the outer layers of "
            "dead skin, revealing smoother, brighter skin underneath. Light peels cause a few days of "
            "flaking; medium peels peel visibly for about a week. Peels are commonly used for acne, "
            "melasma, dark spots and dull texture."
        ),
        "whatItHelpsWith": [
            "Acne and clogged pores",
            "Melasma and dark spots",
            "Dullness and rough texture",
        ],
        "whoItsFor": [
            "Most skin types, with peel strength chosen for the skin and goal",
        ],
        "whoItsNotFor": [
            "Anyone who used isotretinoin in the last six months",
            "Anyone with open wounds or active cold sores on the face",
        ],
        "commonQuestions": [
            "How long will I peel after a chemical peel?",
            "Can I wear makeup after a peel?",
        ],
        "safetyNotes": [
            "Do not pick or pull peeling skin.",
            "Daily sunscreen is essential for weeks after a peel.",
        ],
        "escalationTriggers": [
            "blistering",
            "oozing",
            "fever",
            "spreading redness",
        ],
        "relatedTopics": [
            "skincare.daily-sunscreen",
        ],
        "updatedAt": "2025-01-28T00:00:00Z",
        "version": 1,
    },
    {
        "id": "skincare.daily-sunscreen",
        "topic": "Daily sunscreen and skin protection",
        "category": "skincare",
        "explanation": (
            "Daily broad-spectrum SPF 30 or higher is the single most effective anti-aging habit. UV "
            "exposure breaks down collagen and drives dark spots and melasma, and it can undo the "
            "results of lasers, peels and microneedling. Mineral sunscreens with zinc oxide are "
            "gentle on freshly treated skin. Reapply every two hours outdoors."
        ),
        "whatItHelpsWith": [
            "Preventing dark spots and melasma",
            "Protecting treatment results",
            "Slowing collagen loss",
        ],
        "whoItsFor": [
            "Everyone, every day",
        ],
        "whoItsNotFor": [],
        "commonQuestions": [
            "What SPF should I use after a treatment?",
            "Mineral vs chemical sunscreen: what's the difference?",
        ],
        "safetyNotes": [],
        "escalationTriggers": [],
        "relatedTopics": [
            "aftercare.laser-aftercare",
        ],
        "updatedAt": "2025-01-28T00:00:00Z",
        "version": 1,
    },
]
