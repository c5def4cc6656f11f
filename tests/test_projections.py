from bet_tracker.models import ConferenceStandings, ProjectionTable, TeamRecord
from bet_tracker.projections import compare_to_projections, drafted_by, project, projected_ranking
from bet_tracker.season import VEGAS_PROJECTIONS

SMALL = ConferenceStandings(
    east=[TeamRecord("Heat", 9, 1), TeamRecord("Knicks", 8, 2), TeamRecord("Nets", 1, 9)],
    west=[TeamRecord("Jazz", 3, 7)],
)


def test_unlisted_team_uses_default_30_wins():
    table = ProjectionTable(wins={"knicks": 30.5, "nets": 29.5})
    assert table.projected_wins("Heat") == 30.0

    ranked = projected_ranking(SMALL, table)
    assert [t.team for t in ranked.east] == ["Knicks", "Heat", "Nets"]


def test_default_ties_keep_current_order():
    table = ProjectionTable(wins={"knicks": 30.0, "nets": 10.0})
    ranked = projected_ranking(SMALL, table)
    assert [t.team for t in ranked.east] == ["Heat", "Knicks", "Nets"]


def test_project_sums_base_points_without_bonuses():
    table = ProjectionTable(wins={"knicks": 50.0, "nets": 20.0})
    draft = {"A": ["Knicks", "Heat"], "B": ["Nets", "SuperSonics"], "C": ["Jazz"]}

    assert project(SMALL, table, draft) == {"A": 15 + 14, "B": 13, "C": 15}


def test_project_full_league_uses_every_rank_once(standings, draft):
    totals = project(standings, VEGAS_PROJECTIONS, draft)
    assert sum(totals.values()) == 240

    ranked = projected_ranking(standings, VEGAS_PROJECTIONS)
    assert ranked.east[0].team == "Cavaliers"
    assert ranked.west[0].team == "Thunder"
    assert ranked.east[-1].team == "Wizards"


def test_compare_to_projections_sorted_by_diff():
    table = ProjectionTable(wins={"knicks": 50.0, "nets": 20.0})
    draft = {"A": ["Knicks"], "B": ["Heat", "Nets"]}

    rows = compare_to_projections(SMALL, table, draft)

    assert [r.name for r in rows] == ["Heat", "Nets", "Jazz", "Knicks"]
    heat = rows[0]
    assert (heat.current_rank, heat.projected_rank) == (1, 2)
    assert (heat.current_points, heat.projected_points, heat.diff) == (15, 14, 1)
    assert heat.owner == "B"
    assert heat.record == "9-1"
    assert rows[2].owner is None
    assert rows[2].conference == "West"
    assert rows[-1].diff == -1


def test_drafted_by_uses_normalized_names(draft):
    assert drafted_by(draft, "sixers") == "Karan"
    assert drafted_by(draft, "Blazers") == "Chris"
    assert drafted_by(draft, "SuperSonics") is None
