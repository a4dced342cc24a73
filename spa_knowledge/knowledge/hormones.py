ENTRIES = [
    {
        "id": "hormones.bhrt-basics",
        "topic": "Bioidentical hormone replacement (BHRT)",
        "category": "hormones",
        "explanation": (
            "Bioidentical hormones are structurally identical to the estrogen, progesterone and "
            "testosterone your body makes. During perimenopause and menopause, replacing what has "
            "declined can ease hot flashes, night sweats, poor sleep, low libido, brain fog and mood "
            "changes. Therapy starts with symptoms and lab work, and can be delivered as creams, "
            "injections or pellets."
        ),
        "whatItHelpsWith": [
            "Hot flashes and night sweats",
            "Sleep and mood changes",
            "Low libido",
            "Brain fog and low energy",
        ],
        "whoItsFor": [
            "Women in perimenopause or menopause with symptoms, after lab work",
        ],
        "whoItsNotFor": [
            "People with a history of hormone-sensitive cancer, unless cleared by their oncologist",
            "People with a history of blood clots or stroke",
            "Anyone pregnant",
        ],
        "commonQuestions": [
            "How do I know if my hormones are off?",
            "Are pellets better than creams?",
            "How soon will I feel better on hormones?",
        ],
        "safetyNotes": [
            "Regular follow-up labs keep levels in a safe range.",
        ],
        "escalationTriggers": [
            "chest pain",
            "calf pain and swelling",
            "sudden shortness of breath",
            "sudden severe headache",
            "new breast lump",
        ],
        "relatedTopics": [
            "hormones.testosterone-men",
        ],
        "updatedAt": "2025-02-20T00:00:00Z",
        "version": 2,
    },
    {
        "id": "hormones.testosterone-men",
        "topic": "Testosterone optimization for men",
        "category": "hormones",
        "explanation": (
            "Low testosterone can cause fatigue, low libido, loss of muscle, weight gain around the "
            "middle and low mood. Diagnosis needs symptoms plus morning blood work on more than one "
            "occasion. Treatment options include injections, creams and pellets, with regular "
            "monitoring of blood counts and other labs."
        ),
        "whatItHelpsWith": [
            "Low energy and libido",
            "Muscle loss",
            "Mood and focus",
        ],
        "whoItsFor": [
            "Men with symptoms and confirmed low testosterone on labs",
        ],
        "whoItsNotFor": [
            "Men actively trying to conceive",
            "Men with untreated prostate cancer",
        ],
        "commonQuestions": [
            "What are the signs of low testosterone?",
            "Will testosterone affect fertility?",
        ],
        "safetyNotes": [
            "Testosterone can suppress sperm production; discuss fertility plans first.",
        ],
        "escalationTriggers": [
            "chest pain",
            "sudden shortness of breath",
            "calf pain and swelling",
        ],
        "relatedTopics": [
            "hormones.bhrt-basics",
        ],
        "updatedAt": "2025-02-20T00:00:00Z",
        "version": 1,
    },
]
