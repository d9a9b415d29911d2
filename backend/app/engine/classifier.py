from __future__ import annotations

import logging
from functools import partial
from typing import Callable

from ..knowledge import CATEGORY_KNOWLEDGE, DEFAULT_KNOWLEDGE
from ..knowledge.base import CategoryKnowledge
from ..schemas import CaseAssessment, CaseCategory

logger = logging.getLogger(__name__)


def analyze_case(text: str) -> CaseAssessment:
    """Classify ``text`` into a practice area and build its canned assessment."""
    for matches, analyze in CATEGORY_RULES:
        if matches(text):
            return analyze(text)
    return _analyze(DEFAULT_KNOWLEDGE, text)


def classify(text: str) -> CaseCategory:
    return _select_knowledge(text).category


# ------------------------------------------------------------------
# Internal
# ------------------------------------------------------------------


def _select_knowledge(text: str) -> CategoryKnowledge:
    for knowledge in CATEGORY_KNOWLEDGE:
        if knowledge.matches(text):
            return knowledge
    return DEFAULT_KNOWLEDGE


def _analyze(knowledge: CategoryKnowledge, text: str) -> CaseAssessment:
    claims = list(knowledge.base_claims)
    amounts = {name: 0 for name in knowledge.damages_model.component_names()}
    amounts.update(knowledge.base_damages)

    # Triggers are independent; each contributes its claims at most once.
    for trigger in knowledge.triggers:
        if not trigger.matches(text):
            continue
        claims.extend(trigger.claims)
        for name, amount in trigger.damages.items():
            amounts[name] += amount

    logger.debug(
        "Classified case as %s with %d claim(s)",
        knowledge.category.value,
        len(claims),
    )

    return CaseAssessment(
        issue=text,
        category=knowledge.category,
        claims=claims,
        damages=knowledge.damages_model(**amounts),
        success_probability=knowledge.success_probability,
        documents=list(knowledge.documents),
        actions=list(knowledge.actions),
    )


CATEGORY_RULES: list[
    tuple[Callable[[str], bool], Callable[[str], CaseAssessment]]
] = [
    (knowledge.matches, partial(_analyze, knowledge))
    for knowledge in CATEGORY_KNOWLEDGE
]
