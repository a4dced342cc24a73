from typing import Tuple

from spa_knowledge.models import KnowledgeEntry
from spa_knowledge.knowledge import (
    aesthetics, injectables, weight_loss, hormones, skincare, iv_therapy,
    hair_restoration, pain_recovery, aftercare, safety, expectations,
)

LOCAL_LIBRARY_VERSION = 7
LOCAL_LIBRARY_UPDATED_AT = "2025-03-10T00:00:00Z"

_DOMAINS = (aesthetics, injectables, weight_loss, hormones, skincare, iv_therapy,
            hair_restoration, pain_recovery, aftercare, safety, expectations)

LOCAL_ENTRIES: Tuple[KnowledgeEntry, ...] = tuple(
    KnowledgeEntry.model_validate(raw) for domain in _DOMAINS for raw in domain.ENTRIES
)
