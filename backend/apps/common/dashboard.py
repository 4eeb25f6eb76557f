from __future__ import annotations

from typing import Any, Dict, List, Type

from .logger import get_logger

logger = get_logger(__name__).bind(component="common", layer="dashboard")

Card = Dict[str, Any]


class AdminDashboardCardComposer:
    """
    Base class for apps contributing cards to the admin dashboard.

    Subclasses return a mapping of card key to card payload. A payload carries
    ``color``, ``name``, ``value`` and ``icon``.
    """

    def get_cards(self) -> Dict[str, Card]:
        raise NotImplementedError


_COMPOSERS: List[Type[AdminDashboardCardComposer]] = []


def register_dashboard_composer(
    composer_class: Type[AdminDashboardCardComposer],
) -> Type[AdminDashboardCardComposer]:
    """Class decorator adding a composer to the dashboard registry."""
    if composer_class not in _COMPOSERS:
        _COMPOSERS.append(composer_class)
    return composer_class


def registered_composers() -> List[Type[AdminDashboardCardComposer]]:
    return list(_COMPOSERS)


def collect_dashboard_cards(composers=None) -> Dict[str, Card]:
    """
    Merge the cards of every composer. Later composers win on key clashes.
    """
    if composers is None:
        composers = [composer_class() for composer_class in _COMPOSERS]
    cards: Dict[str, Card] = {}
    for composer in composers:
        contributed = composer.get_cards()
        logger.debug(
            "Collected dashboard cards",
            composer=type(composer).__name__,
            keys=sorted(contributed),
        )
        cards.update(contributed)
    return cards
