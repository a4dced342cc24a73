import re
from typing import Dict, Set, Tuple

_NON_WORD = re.compile(r"[^\w]+")

# category -> lowercase substrings; any hit marks the category as hinted
CATEGORY_HINTS: Dict[str, Tuple[str, ...]] = {
    "injectables": ("botox", "dysport", "xeomin", "jeuveau", "tox", "forehead", "11s", "crow",
                    "frown", "filler", "lip", "cheek", "jawline", "units"),
    "aesthetics": ("laser", "microneedling", "co2", "resurfacing", "rf ", "skin tightening",
                   "stretch mark", "scar", "texture", "pores"),
    "weight-loss": ("weight", "semaglutide", "tirzepatide", "glp", "ozempic", "wegovy", "mounjaro",
                    "appetite", "pounds", "lbs"),
    "hormones": ("hormone", "testosterone", "estrogen", "progesterone", "menopause", "perimenopause",
                 "pellet", "hrt", "hot flash", "libido"),
    "skincare": ("skincare", "skin care", "peel", "facial", "acne", "retinol", "retinoid",
                 "sunscreen", "spf", "melasma", "dark spot", "hydrafacial"),
    "iv-therapy": ("iv ", "drip", "infusion", "hydration", "nad", "vitamin", "myers", "hangover", "b12"),
    "hair-restoration": ("hair", "thinning", "bald", "prp scalp", "hairline", "shedding"),
    "pain-recovery": ("pain", "trigger point", "knot", "muscle", "joint", "recovery", "tension",
                      "back", "neck"),
    "aftercare": ("after", "aftercare", "post", "swelling", "bruis", "healing", "downtime",
                  "workout", "exercise", "makeup", "lie down"),
    "safety": ("safe", "risk", "side effect", "pregnan", "breastfeed", "allerg", "emergency",
               "complication", "blood thinner"),
    "comparisons": (" vs ", "versus", "difference", "compare", "better than", "which is better"),
    "expectations": ("results", "how long", "last", "timeline", "when will", "kick in", "expect",
                     "sessions", "how many"),
}

def category_hints(query: str) -> Set[str]:
    # space-padded so tokens with edge spaces ("iv ", " vs ") hit at either end
    q = " " + _NON_WORD.sub(" ", (query or "").lower()) + " "
    return {cat for cat, tokens in CATEGORY_HINTS.items() if any(t in q for t in tokens)}
