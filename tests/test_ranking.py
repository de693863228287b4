from __future__ import annotations

from itertools import permutations

from icpc_scoreboard import Team, compare_teams, compute_ranking


def _team(name, solve_times=(), penalty=None):
    times = sorted(solve_times, reverse=True)
    return Team(
        name=name,
        solved=len(times),
        penalty=sum(times) if penalty is None else penalty,
        solve_times=list(times),
    )


def _order(teams):
    return [row.team for row in compute_ranking(teams).rows]


def test_more_solved_ranks_first():
    teams = [_team("A", [10]), _team("B", [100, 200])]
    assert _order(teams) == ["B", "A"]


def test_lower_penalty_breaks_solved_tie():
    teams = [_team("A", [15], penalty=35), _team("B", [5])]
    out = compute_ranking(teams)
    assert [row.team for row in out.rows] == ["B", "A"]
    assert [row.rank for row in out.rows] == [1, 2]
    assert (out.rows[1].solved, out.rows[1].penalty) == (1, 35)


def test_solve_times_break_penalty_tie_latest_first():
    # same solved and penalty; A's latest solve is earlier
    a = _team("A", [40, 20], penalty=60)
    b = _team("B", [50, 10], penalty=60)
    assert _order([b, a]) == ["A", "B"]
    assert compare_teams(a, b) == -1
    assert compare_teams(b, a) == 1


def test_solve_times_compare_later_index_when_latest_equal():
    a = _team("A", [50, 10, 5], penalty=65)
    b = _team("B", [50, 12, 3], penalty=65)
    assert _order([b, a]) == ["A", "B"]


def test_name_is_final_tie_break():
    teams = [_team("zeta", [10]), _team("Alpha", [10]), _team("alpha", [10])]
    assert _order(teams) == ["Alpha", "alpha", "zeta"]


def test_teams_without_solves_sort_by_name():
    assert _order([_team("c"), _team("a"), _team("b")]) == ["a", "b", "c"]


def test_comparator_is_strict_total_order():
    teams = [
        _team("A", [10]),
        _team("B", [10]),
        _team("C", [30, 5], penalty=35),
        _team("D", [20, 15], penalty=35),
        _team("E"),
    ]
    for a in teams:
        assert compare_teams(a, a) == 0
        for b in teams:
            if a is b:
                continue
            assert compare_teams(a, b) == -compare_teams(b, a) != 0
            for c in teams:
                if compare_teams(a, b) < 0 and compare_teams(b, c) < 0:
                    assert compare_teams(a, c) < 0


def test_ranking_independent_of_input_order():
    teams = [_team("A", [10]), _team("B", [5, 7]), _team("C"), _team("D", [5])]
    expected = _order(teams)
    for perm in permutations(teams):
        assert _order(perm) == expected
    assert expected == ["B", "D", "A", "C"]


def test_empty_ranking():
    out = compute_ranking([])
    assert out.rows == ()
    assert out.order == []
