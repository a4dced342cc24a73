ENTRIES = [
    {
        "id": "injectables.botox-basics",
        "topic": "Botox basics (neuromodulators)",
        "category": "injectables",
        "explanation": (
            "Botox, Dysport, Xeomin and Jeuveau are neuromodulators: purified proteins that relax the "
            "specific muscles that crease the skin when you make expressions. Relaxing those muscles "
            "softens forehead lines, frown lines between the brows (the 11s) and crow's feet around the "
            "eyes. Treatment takes about 15 minutes with a few tiny injections. Results show gradually: "
            "most people notice a change in 3 to 5 days and the full result at about 2 weeks, lasting "
            "roughly 3 to 4 months."
        ),
        "whatItHelpsWith": [
            "Forehead lines",
            "Frown lines (11s)",
            "Crow's feet",
            "Bunny lines and lip flip",
            "Jaw clenching and masseter slimming",
        ],
        "whoItsFor": [
            "Adults with expression lines that show when they move their face",
            "People looking for prevention before lines etch in at rest",
        ],
        "whoItsNotFor": [
            "Anyone pregnant or breastfeeding",
            "People with certain neuromuscular conditions (for example myasthenia gravis)",
            "Anyone with an active skin infection at the treatment site",
        ],
        "commonQuestions": [
            "When do results kick in?",
            "How long does Botox last?",
            "Does Botox hurt?",
            "How many units will I need?",
        ],
        "safetyNotes": [
            "Mild redness or small bumps at injection points usually fade within an hour.",
            "Unit counts and injection points are decided by your provider at the visit.",
        ],
        "escalationTriggers": [
            "trouble swallowing",
            "trouble breathing",
            "difficulty speaking",
            "double vision",
            "eyelid drooping badly",
        ],
        "relatedTopics": [
            "expectations.neuromodulator-timeline",
            "aftercare.botox-aftercare",
            "injectables.dermal-filler-basics",
            "safety.pregnancy-breastfeeding",
        ],
        "updatedAt": "2025-01-15T00:00:00Z",
        "version": 3,
    },
    {
        "id": "injectables.dermal-filler-basics",
        "topic": "Dermal filler basics",
        "category": "injectables",
        "explanation": (
            "Dermal fillers are gels, most often hyaluronic acid, placed under the skin to restore volume "
            "and refine contour. Common areas are cheeks, lips, under-eyes, chin, jawline and the smile "
            "lines around the mouth. Unlike Botox, filler does not relax muscles: it replaces or adds "
            "volume. Hyaluronic acid fillers can be dissolved if needed. The goal is facial harmony, "
            "not an overfilled look."
        ),
        "whatItHelpsWith": [
            "Volume loss in cheeks and temples",
            "Smile lines and marionette lines",
            "Chin and jawline definition",
            "Under-eye hollows",
        ],
        "whoItsFor": [
            "Adults noticing age-related volume loss",
            "People wanting subtle contour changes without surgery",
        ],
        "whoItsNotFor": [
            "Anyone pregnant or breastfeeding",
            "People with an active infection or cold sore near the area",
            "Anyone with a known allergy to filler ingredients",
        ],
        "commonQuestions": [
            "How long does filler last?",
            "Is filler reversible?",
            "What's the difference between Botox and filler?",
        ],
        "safetyNotes": [
            "Swelling and bruising are common for several days.",
            "Choose an experienced injector who knows facial vascular anatomy.",
        ],
        "escalationTriggers": [
            "skin turning white",
            "blanching",
            "dusky",
            "vision changes",
            "blurry vision",
            "severe pain",
        ],
        "relatedTopics": [
            "expectations.filler-timeline",
            "aftercare.filler-swelling-bruising",
            "safety.vascular-occlusion-warning-signs",
            "injectables.lip-filler",
        ],
        "updatedAt": "2025-01-15T00:00:00Z",
        "version": 2,
    },
    {
        "id": "injectables.lip-filler",
        "topic": "Lip filler",
        "category": "injectables",
        "explanation": (
            "Lip filler uses a soft hyaluronic acid gel to add volume, improve shape and symmetry, "
            "define the border, or hydrate thin lips. Lips swell more than most areas, so they often look "
            "bigger for the first few days before settling into the final shape around two weeks. Many "
            "people start with a conservative amount and build over time."
        ),
        "whatItHelpsWith": [
            "Thin or uneven lips",
            "Lip border definition",
            "Vertical lip lines",
        ],
        "whoItsFor": [
            "Adults wanting fuller or more balanced lips",
        ],
        "whoItsNotFor": [
            "Anyone with an active cold sore",
            "Anyone pregnant or breastfeeding",
        ],
        "commonQuestions": [
            "How swollen will my lips be?",
            "How long does lip filler last?",
            "Will it look natural?",
        ],
        "safetyNotes": [
            "If you get cold sores, ask about antiviral medicine before treatment.",
        ],
        "escalationTriggers": [
            "skin turning white",
            "blanching",
            "severe pain",
            "spreading redness",
        ],
        "relatedTopics": [
            "aftercare.filler-swelling-bruising",
            "expectations.filler-timeline",
        ],
        "updatedAt": "2025-01-15T00:00:00Z",
        "version": 1,
    },
]
