ENTRIES = [
    {
        "id": "weight-loss.glp1-basics",
        "topic": "Medical weight loss with GLP-1 medications",
        "category": "weight-loss",
        "explanation": (
            "GLP-1 medications such as semaglutide and tirzepatide mimic gut hormones that regulate "
            "appetite and blood sugar. They help you feel full sooner and reduce food noise. They are "
            "weekly injections started at a low dose and increased slowly, combined with nutrition, "
            "protein intake and strength training to protect muscle."
        ),
        "whatItHelpsWith": [
            "Appetite control",
            "Steady weight loss",
            "Blood sugar regulation",
        ],
        "whoItsFor": [
            "Adults with a BMI that meets medical criteria, after lab work and a provider evaluation",
        ],
        "whoItsNotFor": [
            "Anyone pregnant, breastfeeding or trying to conceive",
            "People with a personal or family history of medullary thyroid cancer or MEN2",
            "People with a history of pancreatitis",
        ],
        "commonQuestions": [
            "How much weight will I lose on semaglutide?",
            "What's the difference between semaglutide and tirzepatide?",
            "Do I have to stay on it forever?",
        ],
        "safetyNotes": [
            "Dosing is set and adjusted only by your prescribing provider.",
            "Hydration and protein matter more than usual while on these medications.",
        ],
        "escalationTriggers": [
            "severe abdominal pain",
            "pain radiating to my back",
            "can't keep fluids down",
            "vomiting for days",
            "lump in my neck",
        ],
        "relatedTopics": [
            "weight-loss.glp1-side-effects",
            "expectations.weight-loss-timeline",
        ],
        "updatedAt": "2025-03-10T00:00:00Z",
        "version": 4,
    },
    {
        "id": "weight-loss.glp1-side-effects",
        "topic": "GLP-1 side effects and how to manage them",
        "category": "weight-loss",
        "explanation": (
            "The most common GLP-1 side effects are digestive: nausea, constipation, reflux and "
            "fatigue, usually strongest for a day or two after a dose increase. Smaller meals, eating "
            "slowly, stopping at the first sign of fullness, fiber, fluids and avoiding greasy food "
            "all help. Most side effects ease as your body adjusts."
        ),
        "whatItHelpsWith": [
            "Managing nausea",
            "Preventing constipation",
            "Staying hydrated",
        ],
        "whoItsFor": [
            "Patients currently on semaglutide or tirzepatide",
        ],
        "whoItsNotFor": [],
        "commonQuestions": [
            "Is nausea on semaglutide normal?",
            "What should I eat on a GLP-1?",
        ],
        "safetyNotes": [
            "Tell your provider about persistent vomiting or signs of dehydration.",
        ],
        "escalationTriggers": [
            "severe abdominal pain",
            "can't keep fluids down",
            "vomiting for days",
            "yellow skin",
            "fainting",
        ],
        "relatedTopics": [
            "weight-loss.glp1-basics",
        ],
        "updatedAt": "2025-03-10T00:00:00Z",
        "version": 2,
    },
]
