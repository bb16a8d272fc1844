"""
Cross-search over the calculator catalog and the converter pages.

One free-text query is matched against both collections. The collection of
the page the user is on is "primary"; the other one is only surfaced when
the primary collection has nothing to offer.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, FrozenSet, List, Tuple

from constants import CALCULATORS, CONVERTER_GROUPS, KIND_CALCULATOR, KIND_CONVERTER, SEARCH_KINDS
from unit_tables import get_converters_in_group

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchableEntry:
    """A calculator or converter page that search can point to."""
    title: str
    description: str
    href: str
    kind: str
    keywords: FrozenSet[str] = frozenset()
    features: Tuple[str, ...] = ()

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match; *query* must already be lowercase."""
        if query in self.title.lower() or query in self.description.lower():
            return True
        if any(query in feature.lower() for feature in self.features):
            return True
        return any(query in keyword for keyword in self.keywords)

    def to_dict(self) -> Dict:
        return {
            "title": self.title,
            "description": self.description,
            "href": self.href,
            "type": self.kind,
            "features": list(self.features),
        }


@dataclass(frozen=True)
class SearchResults:
    primary_results: Tuple[SearchableEntry, ...]
    cross_results: Tuple[SearchableEntry, ...]
    show_cross_results: bool
    primary_kind: str
    cross_kind: str

    def to_dict(self) -> Dict:
        return {
            "primary_results": [e.to_dict() for e in self.primary_results],
            "cross_results": [e.to_dict() for e in self.cross_results],
            "show_cross_results": self.show_cross_results,
            "primary_type": self.primary_kind,
            "cross_type": self.cross_kind,
        }


def _other_kind(kind: str) -> str:
    return KIND_CONVERTER if kind == KIND_CALCULATOR else KIND_CALCULATOR


# ── Indices ──

@lru_cache(maxsize=1)
def build_calculator_index() -> Tuple[SearchableEntry, ...]:
    """One entry per calculator, in catalog order."""
    return tuple(
        SearchableEntry(
            title=calc['title'],
            description=calc['description'],
            href=f"/calculators/{calc['slug']}",
            kind=KIND_CALCULATOR,
            keywords=frozenset(k.lower() for k in calc['keywords']),
            features=tuple(calc['features']),
        )
        for calc in CALCULATORS
    )


def _converter_tokens(group_id: str) -> FrozenSet[str]:
    """Everything a query may hit for the quantities listed on one page."""
    tokens = set()
    for quantity in get_converters_in_group(group_id):
        tokens.update([quantity.name, quantity.about, quantity.group])
        tokens.update(quantity.tags)
        tokens.update(quantity.keywords)
        for unit in quantity.units:
            tokens.add(unit.label)
            tokens.add(unit.symbol)
    return frozenset(t.lower() for t in tokens if t)


@lru_cache(maxsize=1)
def build_converter_index() -> Tuple[SearchableEntry, ...]:
    """One entry per visible converter page, in menu order."""
    entries = []
    for group in CONVERTER_GROUPS:
        if group.get('hidden'):
            continue
        entries.append(SearchableEntry(
            title=group['name'],
            description=group['description'],
            href=f"/converters/{group['id']}",
            kind=KIND_CONVERTER,
            keywords=_converter_tokens(group['id']),
        ))
    return tuple(entries)


def _index_for(kind: str) -> Tuple[SearchableEntry, ...]:
    return build_calculator_index() if kind == KIND_CALCULATOR else build_converter_index()


# ── Query ──

def search(query: str, primary_kind: str) -> SearchResults:
    """
    Match *query* against both collections.

    Matching is plain case-insensitive substring containment and results keep
    table order. show_cross_results is set only when the primary collection
    is empty and the other one is not.
    """
    if primary_kind not in SEARCH_KINDS:
        raise ValueError(
            f"primary_kind must be one of {', '.join(SEARCH_KINDS)}, got {primary_kind!r}"
        )
    cross_kind = _other_kind(primary_kind)

    needle = (query or '').strip().lower()
    if not needle:
        return SearchResults((), (), False, primary_kind, cross_kind)

    primary = tuple(e for e in _index_for(primary_kind) if e.matches(needle))
    cross = tuple(e for e in _index_for(cross_kind) if e.matches(needle))
    show_cross = not primary and bool(cross)

    logger.debug(
        f"Search '{needle}' on {primary_kind}: {len(primary)} primary, {len(cross)} cross"
    )
    return SearchResults(primary, cross, show_cross, primary_kind, cross_kind)
