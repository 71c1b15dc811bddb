"""
Team index construction from raw roster records.

Roster feeds mix FBS and FCS programs and spell identities several ways:
numeric ids, school names, abbreviations, mascots and alternate names. The
index built here is the single source of truth for resolving game
participants to canonical team names during a ranking run.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .fields import (
    TEAM_ALIAS_FIELDS,
    TEAM_ALIAS_LIST_FIELDS,
    TEAM_CLASSIFICATION_FIELDS,
    TEAM_CONFERENCE_FIELDS,
    TEAM_ID_FIELDS,
    TEAM_NAME_FIELDS,
    normalize_id,
    pick_field,
    pick_truthy,
)
from .normalize import clean_name, normalize_alias, normalize_classification

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeamMeta:
    """Identity metadata for a canonical team."""

    name: str
    conference: str = "Unknown"
    classification: str = "unknown"


@dataclass
class TeamIndex:
    """Lookup tables produced from a roster."""

    by_id: Dict[str, str] = field(default_factory=dict)
    by_alias: Dict[str, str] = field(default_factory=dict)
    meta: Dict[str, TeamMeta] = field(default_factory=dict)
    dropped: int = 0

    def __len__(self) -> int:
        return len(self.meta)

    def lookup_id(self, team_id) -> Optional[str]:
        key = normalize_id(team_id)
        if key is None:
            return None
        return self.by_id.get(key)

    def lookup_alias(self, name) -> Optional[str]:
        key = normalize_alias(name)
        if not key:
            return None
        return self.by_alias.get(key)

    def resolve(self, team_id=None, name=None) -> Optional[str]:
        """
        Resolve a participant to a canonical name.

        Tries the id table, then the alias table, then falls back to the
        supplied name verbatim. The fallback may name a team that is not in
        the roster; callers must still check membership.

        Args:
            team_id: Numeric or string id from the source record
            name: Display name from the source record

        Returns:
            Canonical (or raw) name, or None when nothing was supplied
        """
        canonical = self.lookup_id(team_id)
        if canonical:
            return canonical
        canonical = self.lookup_alias(name)
        if canonical:
            return canonical
        raw = clean_name(name)
        return raw or None


def pick_team_name(record: Mapping) -> str:
    return clean_name(pick_field(record, TEAM_NAME_FIELDS, ""))


def _aliases(record: Mapping) -> List[str]:
    aliases: List[str] = []
    for key in TEAM_ALIAS_FIELDS:
        value = record.get(key)
        if value is not None and not isinstance(value, (list, tuple, dict)):
            aliases.append(str(value))
    for key in TEAM_ALIAS_LIST_FIELDS:
        values = record.get(key)
        if isinstance(values, (list, tuple)):
            aliases.extend(str(v) for v in values if v is not None)
    return aliases


def build_team_index(records: Iterable) -> TeamIndex:
    """
    Build id, alias and metadata tables from raw team records.

    Records without a resolvable name are dropped, as are later records
    repeating a canonical name already indexed. On alias or id collisions
    the first record to claim the key keeps it.

    Args:
        records: Iterable of loosely typed team mappings

    Returns:
        TeamIndex whose ``meta`` preserves roster order
    """
    index = TeamIndex()

    for record in records:
        if not isinstance(record, Mapping):
            index.dropped += 1
            continue
        canonical = pick_team_name(record)
        if not canonical:
            index.dropped += 1
            logger.debug("Dropping team record without a name: %r", record)
            continue
        if canonical in index.meta:
            index.dropped += 1
            logger.debug("Dropping duplicate team record for %s", canonical)
            continue

        index.meta[canonical] = TeamMeta(
            name=canonical,
            conference=clean_name(pick_truthy(record, TEAM_CONFERENCE_FIELDS, "")) or "Unknown",
            classification=normalize_classification(pick_truthy(record, TEAM_CLASSIFICATION_FIELDS, "")),
        )

        key = normalize_id(pick_field(record, TEAM_ID_FIELDS))
        if key is not None and key not in index.by_id:
            index.by_id[key] = canonical

        for alias in _aliases(record) + [canonical]:
            key = normalize_alias(alias)
            if not key:
                continue
            owner = index.by_alias.setdefault(key, canonical)
            if owner != canonical:
                logger.debug("Alias %r already claimed by %s; ignoring for %s", key, owner, canonical)

    if index.dropped:
        logger.info("Team index: kept %d teams, dropped %d records", len(index.meta), index.dropped)
    return index
