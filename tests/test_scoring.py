import pytest

from bet_tracker.bonuses import last_place_bonus, playoff_bonus, tournament_bonus
from bet_tracker.models import (
    ConferenceStandings,
    IncompleteSnapshotError,
    PlayoffResult,
    TeamRecord,
    TournamentResult,
)
from bet_tracker.scoring import base_points, leaderboard, score_standings, validate_snapshot


def _team(scores, participant, name):
    return next(t for t in scores[participant].teams if t.name == name)


def test_tournament_bonus_tiers_stack():
    result = TournamentResult.from_teams(
        semifinalists=["Knicks", "Magic", "Thunder", "Spurs"],
        runner_up="Spurs",
        champion="Knicks",
    )
    assert tournament_bonus("Magic", result) == 1
    assert tournament_bonus("Spurs", result) == 3
    assert tournament_bonus("knicks", result) == 5
    assert tournament_bonus("Lakers", result) == 0


def test_tournament_champion_also_runner_up_collects_every_tier():
    result = TournamentResult.from_teams(semifinalists=["Cavs"], runner_up="Cavaliers", champion="CAVALIERS")
    assert tournament_bonus("Cavaliers", result) == 7


def test_playoff_bonus():
    result = PlayoffResult(series_wins={"Thunder": 4, "sixers": 2}, finals_champion="Thunder")
    assert playoff_bonus("Thunder", result) == 4 * 6 + 12
    assert playoff_bonus("76ers", result) == 12
    assert playoff_bonus("Jazz", result) == 0


def test_last_place_bonus():
    assert last_place_bonus(True) == 3
    assert last_place_bonus(False) == 0


def test_base_points_for_a_conference_sum_to_120(standings):
    assert sum(base_points(rank) for rank in range(1, len(standings.east) + 1)) == 120


def test_bucks_scenario(standings, draft, no_tournament, no_playoffs):
    assert draft["Chris"][3] == "Bucks"
    scores = score_standings(standings, draft, no_tournament, no_playoffs)

    bucks = _team(scores, "Chris", "Bucks")
    assert bucks.conference_rank == 9
    assert bucks.draft_position == 4
    assert bucks.base_points == 7
    assert bucks.expected_points == 12
    assert bucks.points_vs_expected == -5
    assert bucks.total_points == 7


def test_participant_totals_and_breakdown(standings, draft, no_tournament, no_playoffs):
    scores = score_standings(standings, draft, no_tournament, no_playoffs)
    chris = scores["Chris"]

    assert chris.total_points == 84
    assert chris.breakdown.base_points == 81
    assert chris.breakdown.last_place_bonus == 3
    assert chris.breakdown.tournament_bonus == 0
    assert chris.breakdown.playoff_bonus == 0
    assert len(chris.teams) == 10

    totals = [t.total_points for t in chris.teams]
    assert totals == sorted(totals, reverse=True)
    assert sum(totals) == chris.total_points


def test_only_league_worst_gets_last_place_bonus(standings, draft, no_tournament, no_playoffs):
    scores = score_standings(standings, draft, no_tournament, no_playoffs)
    flagged = [
        (participant, team.name)
        for participant, score in scores.items()
        for team in score.teams
        if team.last_place_bonus
    ]
    assert flagged == [("Chris", "Pacers")]

    pacers = _team(scores, "Chris", "Pacers")
    assert pacers.is_league_worst
    assert pacers.last_place_bonus == 3
    assert pacers.total_points == 1 + 3


def test_bonuses_flow_into_totals(standings, draft):
    tournament = TournamentResult.from_teams(semifinalists=["Knicks", "Thunder"], runner_up="Thunder", champion="Knicks")
    playoff = PlayoffResult(series_wins={"Thunder": 3}, finals_champion=None)

    scores = score_standings(standings, draft, tournament, playoff)

    knicks = _team(scores, "Chris", "Knicks")
    assert knicks.tournament_bonus == 5
    assert knicks.total_points == 11 + 5

    thunder = _team(scores, "Karan", "Thunder")
    assert thunder.tournament_bonus == 3
    assert thunder.playoff_bonus == 18
    assert thunder.total_points == 15 + 3 + 18
    assert scores["Karan"].breakdown.playoff_bonus == 18


def test_missing_drafted_team_scores_as_rank_15(standings, no_tournament, no_playoffs):
    tournament = TournamentResult.from_teams(semifinalists=["SuperSonics"])
    draft = {"Chris": ["SuperSonics"]}

    scores = score_standings(standings, draft, tournament, no_playoffs)

    sonics = scores["Chris"].teams[0]
    assert sonics.conference == "Unknown"
    assert sonics.conference_rank == 15
    assert (sonics.wins, sonics.losses) == (0, 0)
    assert sonics.total_points == 1 + 1
    assert scores["Chris"].total_points == 2


def test_score_is_deterministic(standings, draft, no_tournament, no_playoffs):
    first = score_standings(standings, draft, no_tournament, no_playoffs)
    second = score_standings(standings, draft, no_tournament, no_playoffs)
    assert {k: v.as_dict() for k, v in first.items()} == {k: v.as_dict() for k, v in second.items()}


def test_incomplete_snapshot_is_rejected(standings, draft, no_tournament, no_playoffs):
    partial = ConferenceStandings(east=standings.east[:14], west=standings.west)
    with pytest.raises(IncompleteSnapshotError):
        score_standings(partial, draft, no_tournament, no_playoffs)


def test_duplicate_team_is_rejected(standings):
    doubled = ConferenceStandings(
        east=standings.east,
        west=standings.west[:14] + [TeamRecord("Cavs", 1, 1)],
    )
    with pytest.raises(IncompleteSnapshotError, match="cavaliers"):
        validate_snapshot(doubled)


def test_partial_snapshot_can_be_scored_without_validation(draft, no_tournament, no_playoffs):
    partial = ConferenceStandings(east=[TeamRecord("Bucks", 3, 1)], west=[])
    scores = score_standings(partial, {"Chris": ["Bucks"]}, no_tournament, no_playoffs, validate=False)
    assert scores["Chris"].teams[0].base_points == 15


def test_leaderboard_sorted_by_points(standings, draft, no_tournament, no_playoffs):
    scores = score_standings(standings, draft, no_tournament, no_playoffs)
    board = leaderboard(scores)
    assert [points for _, points in board] == sorted((s.total_points for s in scores.values()), reverse=True)
    assert {name for name, _ in board} == set(draft)


def test_fallback_standings_are_a_valid_snapshot(fallback_standings):
    validate_snapshot(fallback_standings)
