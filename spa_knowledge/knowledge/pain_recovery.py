ENTRIES = [
    {
        "id": "pain-recovery.trigger-point-injections",
        "topic": "Trigger point injections",
        "category": "pain-recovery",
        "explanation": (
            "Trigger points are tight knots in a muscle that can refer pain elsewhere, such as from "
            "the shoulders into the head. A trigger point injection places a small amount of local "
            "anesthetic, sometimes with other ingredients, directly into the knot to help it release. "
            "Many people feel relief within days; gentle movement afterward helps."
        ),
        "whatItHelpsWith": [
            "Neck and shoulder knots",
            "Tension headaches",
            "Upper and lower back muscle pain",
        ],
        "whoItsFor": [
            "Adults with persistent muscle knots that have not settled with stretching or massage",
        ],
        "whoItsNotFor": [
            "Anyone with an infection over the injection site",
            "Anyone on blood thinners unless cleared by their doctor",
        ],
        "commonQuestions": [
            "How fast do trigger point injections work?",
            "Can I work out after trigger point injections?",
        ],
        "safetyNotes": [
            "Soreness at the injection site for a day or two is common.",
        ],
        "escalationTriggers": [
            "numbness spreading",
            "weakness in my arm",
            "weakness in my leg",
            "shortness of breath",
            "loss of bladder control",
        ],
        "relatedTopics": [],
        "updatedAt": "2025-01-20T00:00:00Z",
        "version": 1,
    },
]
