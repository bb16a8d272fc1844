"""
Converter page URLs for the sitemap.

Every converter page gets one URL per ordered unit pair, in the form
/converters/{group}#{from}-{to}.
"""

from typing import Dict, List
from urllib.parse import quote

from unit_tables import CONVERTER_REGISTRY


def _group_ids() -> List[str]:
    seen = []
    for converter in CONVERTER_REGISTRY:
        if converter.group not in seen:
            seen.append(converter.group)
    return seen


def _pair_url(base_url: str, group: str, from_symbol: str, to_symbol: str) -> str:
    fragment = f"{quote(from_symbol, safe='')}-{quote(to_symbol, safe='')}"
    return f"{base_url}/converters/{group}#{fragment}"


def generate_converter_urls(base_url: str = "") -> List[str]:
    """Main page, each group page, the 'all' page, then every unit pair."""
    base_url = base_url.rstrip("/")
    urls = [f"{base_url}/converters"]
    urls.extend(f"{base_url}/converters/{group}" for group in _group_ids())
    urls.append(f"{base_url}/converters/all")

    for converter in CONVERTER_REGISTRY:
        for source in converter.units:
            for target in converter.units:
                if source is not target:
                    urls.append(_pair_url(base_url, converter.group, source.symbol, target.symbol))
    return urls


def generate_converter_sitemap_entries(base_url: str = "") -> List[Dict]:
    """Sitemap entries with title and description for every unit pair."""
    base_url = base_url.rstrip("/")
    entries = []
    for converter in CONVERTER_REGISTRY:
        for source in converter.units:
            for target in converter.units:
                if source is target:
                    continue
                entries.append({
                    "url": _pair_url(base_url, converter.group, source.symbol, target.symbol),
                    "title": f"Convert {source.label} to {target.label} - {converter.name}",
                    "description": (
                        f"Instantly convert {source.label} ({source.symbol}) to "
                        f"{target.label} ({target.symbol}). {converter.about}"
                    ),
                    "category": converter.group,
                })
    return entries


def get_converter_url_count() -> int:
    count = 1 + len(_group_ids()) + 1
    for converter in CONVERTER_REGISTRY:
        n = len(converter.units)
        count += n * (n - 1)
    return count
