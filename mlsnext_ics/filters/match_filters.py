"""Team and age-group inclusion filters for schedule rows and records."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Pattern

from mlsnext_ics import config


@dataclass
class MatchCriteria:
    """Which matches make it onto the calendar."""

    team: str = config.TEAM
    age_group: str = config.AGE_GROUP
    strict_age_group: bool = config.STRICT_AGE_GROUP
    team_pattern: Pattern[str] = field(init=False, repr=False)
    age_pattern: Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        words = self.team.split()
        # "LA Surf Soccer Club" -> LA\s*Surf\s*Soccer\s*Club
        self.team_pattern = re.compile(r"\s*".join(re.escape(w) for w in words), re.IGNORECASE)
        self.age_pattern = re.compile(re.escape(self.age_group.strip()), re.IGNORECASE)

    @property
    def team_token(self) -> str:
        """Short lowercase token matched against JSON home/away names."""
        return " ".join(self.team.lower().split()[:2])

    @property
    def description_label(self) -> str:
        return f"{config.DIVISION_LABEL} ({self.age_group})"

    @property
    def calendar_name(self) -> str:
        return f"{self.team} {self.age_group} - {config.DIVISION_LABEL}"


def row_matches_team(text: str, criteria: MatchCriteria) -> bool:
    return bool(criteria.team_pattern.search(text))


def row_matches_age_group(text: str, criteria: MatchCriteria) -> bool:
    """True unless strict mode is on and the row lacks the age-group token."""
    if not criteria.strict_age_group:
        return True
    return bool(criteria.age_pattern.search(text))


def record_matches_team(home: str, away: str, criteria: MatchCriteria) -> bool:
    both = f"{home} {away}".lower()
    return criteria.team_token in both
