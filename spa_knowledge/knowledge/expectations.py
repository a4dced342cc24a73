ENTRIES = [
    {
        "id": "expectations.neuromodulator-timeline",
        "topic": "Botox results timeline: when results show and how long they last",
        "category": "expectations",
        "explanation": (
            "Botox and other neuromodulators work gradually. Forehead lines, frown lines and crow's feet "
            "start softening around day 3 to 5, results show fully at about 10 to 14 days, and they "
            "last roughly 3 to 4 months before muscle movement slowly returns. A two-week follow-up is "
            "the right time to judge results and adjust."
        ),
        "whatItHelpsWith": [
            "Setting realistic expectations",
            "Timing treatment before an event",
        ],
        "whoItsFor": [
            "Anyone planning or recently treated with Botox or Dysport",
        ],
        "whoItsNotFor": [],
        "commonQuestions": [
            "When do results kick in?",
            "How long until Botox wears off?",
            "How far before an event should I get Botox?",
        ],
        "safetyNotes": [
            "Avoid getting touch-ups before the two-week mark.",
        ],
        "escalationTriggers": [
            "trouble swallowing",
            "trouble breathing",
            "double vision",
        ],
        "relatedTopics": [
            "injectables.botox-basics",
            "aftercare.botox-aftercare",
        ],
        "updatedAt": "2025-01-15T00:00:00Z",
        "version": 2,
    },
    {
        "id": "expectations.filler-timeline",
        "topic": "Filler results timeline",
        "category": "expectations",
        "explanation": (
            "Filler results are visible right away, but swelling hides the true result at first. "
            "Expect swelling to settle over one to two weeks, with the final look at about two to four "
            "weeks as the gel integrates. Depending on area and product, filler lasts six to eighteen "
            "months."
        ),
        "whatItHelpsWith": [
            "Knowing when to judge filler results",
            "Planning maintenance",
        ],
        "whoItsFor": [
            "Anyone planning or recently treated with filler",
        ],
        "whoItsNotFor": [],
        "commonQuestions": [
            "When will my filler settle?",
            "How long does filler last?",
        ],
        "safetyNotes": [],
        "escalationTriggers": [
            "severe pain",
            "skin turning white",
            "vision changes",
        ],
        "relatedTopics": [
            "aftercare.filler-swelling-bruising",
            "injectables.dermal-filler-basics",
        ],
        "updatedAt": "2025-01-15T00:00:00Z",
        "version": 1,
    },
    {
        "id": "expectations.weight-loss-timeline",
        "topic": "What to expect on a medical weight loss program",
        "category": "expectations",
        "explanation": (
            "Weight loss on GLP-1 medications is gradual. The first month is mostly about finding a "
            "tolerable dose. Many people see steady loss of about one to two pounds per week once "
            "at an effective dose, with the biggest changes over six to twelve months."
        ),
        "whatItHelpsWith": [
            "Realistic goals",
            "Staying motivated through dose increases",
        ],
        "whoItsFor": [
            "Anyone starting semaglutide or tirzepatide",
        ],
        "whoItsNotFor": [],
        "commonQuestions": [
            "How fast will I lose weight?",
            "Why haven't I lost weight in the first month?",
        ],
        "safetyNotes": [
            "Rapid loss can cost muscle; keep protein up and lift weights.",
        ],
        "escalationTriggers": [
            "severe abdominal pain",
            "fainting",
        ],
        "relatedTopics": [
            "weight-loss.glp1-basics",
            "weight-loss.glp1-side-effects",
        ],
        "updatedAt": "2025-03-10T00:00:00Z",
        "version": 1,
    },
]
