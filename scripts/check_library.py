"""Lint the bundled knowledge library; exits 1 when anything needs fixing.

    python scripts/check_library.py
"""
import sys
from loguru import logger
from spa_knowledge.knowledge import LOCAL_ENTRIES
from spa_knowledge.services.lint import check_library

def main() -> int:
    report = check_library(LOCAL_ENTRIES)
    for eid in report.duplicate_ids:
        logger.error(f"duplicate id: {eid}")
    for eid, missing in report.dangling_related:
        logger.error(f"{eid}: relatedTopics references unknown id '{missing}'")
    for cat in report.unknown_categories:
        logger.error(f"category outside the known set: {cat}")
    for cat in report.unhinted_categories:
        logger.error(f"category has no hint row: {cat}")
    for eid in report.blank_triggers:
        logger.error(f"{eid}: blank escalation trigger")
    if report.ok:
        logger.info(f"{len(LOCAL_ENTRIES)} entries OK")
    return 0 if report.ok else 1

if __name__ == "__main__":
    sys.exit(main())
