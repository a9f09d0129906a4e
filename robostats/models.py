"""Statbotics v3 payload shapes.

These are type hints only: payloads are used as decoded JSON and never
validated.  Breakdown-style fields change every season, so they are open
``str -> value`` mappings rather than fixed structures.
"""
from __future__ import annotations

from typing import Any, Optional, TypedDict

Breakdown = dict[str, Any]


class Record(TypedDict, total=False):
    wins: int
    losses: int
    ties: int
    count: int
    winrate: float


class NormEPA(TypedDict, total=False):
    current: float
    recent: float
    mean: float
    max: float


class Team(TypedDict, total=False):
    team: int
    name: str
    country: str
    state: Optional[str]
    district: Optional[str]
    rookie_year: int
    active: bool
    record: Record
    norm_epa: NormEPA


class MeanSD(TypedDict, total=False):
    mean: float
    sd: float


class Rank(TypedDict, total=False):
    rank: int
    percentile: float
    team_count: int


class TeamYearEPA(TypedDict, total=False):
    total_points: MeanSD
    unitless: float
    norm: float
    conf: list[float]
    breakdown: Breakdown
    stats: dict[str, float]          # start, pre_champs, max
    ranks: dict[str, Rank]           # total, country, state, district


class TeamYear(TypedDict, total=False):
    team: int
    year: int
    name: str
    country: str
    state: Optional[str]
    district: Optional[str]
    rookie_year: int
    epa: TeamYearEPA
    record: Record
    district_points: Optional[float]
    district_rank: Optional[int]


class EventEPA(TypedDict, total=False):
    max: Optional[float]
    top_8: Optional[float]
    top_24: Optional[float]
    mean: Optional[float]
    sd: Optional[float]


class Event(TypedDict, total=False):
    key: str
    year: int
    name: str
    time: int
    country: str
    state: str
    district: Optional[str]
    start_date: str
    end_date: str
    type: str
    week: int
    video: Optional[str]
    status: str
    status_str: str
    num_teams: int
    current_match: int
    qual_matches: int
    epa: EventEPA
    # win_prob, score_pred, and an optional season-specific rp_pred mapping
    metrics: dict[str, Any]


class QualRecord(Record, total=False):
    rps: Optional[float]
    rps_per_match: Optional[float]
    rank: Optional[int]
    num_teams: int


class ElimRecord(Record, total=False):
    alliance: Optional[str]
    is_captain: Optional[bool]


class TeamEventRecord(TypedDict, total=False):
    qual: QualRecord
    elim: ElimRecord
    total: Record


class TeamEventEPA(TypedDict, total=False):
    total_points: MeanSD
    unitless: float
    norm: float
    conf: list[float]
    breakdown: Breakdown
    stats: dict[str, float]          # start, pre_elim, mean, max


class TeamEvent(TypedDict, total=False):
    team: int
    year: int
    event: str
    time: int
    team_name: str
    event_name: str
    country: str
    state: str
    district: Optional[str]
    type: str
    week: int
    status: str
    first_event: bool
    epa: TeamEventEPA
    record: TeamEventRecord
    district_points: Optional[float]


class Alliance(TypedDict, total=False):
    team_keys: list[int]
    surrogate_team_keys: list[int]
    dq_team_keys: list[int]


class Match(TypedDict, total=False):
    key: str
    year: int
    event: str
    week: int
    elim: bool
    comp_level: str
    set_number: int
    match_number: int
    match_name: str
    time: int
    predicted_time: int
    status: str
    video: Optional[str]
    alliances: dict[str, Alliance]   # red, blue
    pred: Breakdown
    result: Breakdown


class TeamMatchEPA(TypedDict, total=False):
    total_points: float
    post: float
    breakdown: Breakdown


class TeamMatch(TypedDict, total=False):
    team: int
    match: str
    year: int
    event: str
    alliance: str
    time: int
    week: int
    elim: bool
    dq: bool
    surrogate: bool
    status: str
    epa: TeamMatchEPA


class YearData(TypedDict, total=False):
    year: int
    score_mean: float
    score_sd: float
    percentiles: dict[str, dict[str, float]]
    breakdown: Breakdown
    metrics: dict[str, Any]
