import math, re
from collections import Counter
from typing import List

_WS = re.compile(r"\s+")

def normalize(text: str) -> str:
    return _WS.sub(" ", (text or "").lower()).strip()

# two spaces of padding each side so word edges become trigrams too
def trigrams(text: str) -> List[str]:
    norm = normalize(text)
    if not norm:
        return []
    padded = f"  {norm}  "
    return [padded[i:i + 3] for i in range(len(padded) - 2)]

def vectorize(text: str) -> Counter:
    return Counter(trigrams(text))

def cosine(a: Counter, b: Counter) -> float:
    if not a or not b:
        return 0.0
    if len(a) > len(b):
        a, b = b, a
    dot = sum(v * b.get(k, 0) for k, v in a.items())
    na = math.sqrt(sum(v * v for v in a.values()))
    nb = math.sqrt(sum(v * v for v in b.values()))
    return dot / (na * nb)

def similarity(text_a: str, text_b: str) -> float:
    return cosine(vectorize(text_a), vectorize(text_b))
