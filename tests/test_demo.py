import pytest

from kdcluster.demo import generate_points, main


def test_generate_points_count_and_bounds():
    points = generate_points(100, 0.0, 200.0, seed=1)
    assert len(points) == 100
    assert all(len(p) == 3 for p in points)
    assert all(0.0 <= c <= 200.0 for p in points for c in p)


def test_generate_points_reproducible():
    first = generate_points(20, 0.0, 5.0, seed=4)
    second = generate_points(20, 0.0, 5.0, seed=4)
    assert len(first) == 20
    assert all(0.0 <= c <= 5.0 for p in first for c in p)
    assert first == second
    assert first != generate_points(20, 0.0, 5.0, seed=5)


def test_generate_points_zero_count():
    assert generate_points(0, 0.0, 1.0, seed=2) == []


def test_generate_points_rejects_negative_count():
    with pytest.raises(ValueError):
        generate_points(-1, 0.0, 1.0, seed=2)


def test_generate_points_rejects_inverted_range():
    with pytest.raises(ValueError):
        generate_points(5, 10.0, 1.0, seed=2)


def test_main_reports_counts(capsys):
    code = main(["--num-points", "50", "--eps", "5", "--min-points", "3", "--seed", "3"])
    out = capsys.readouterr().out
    assert code == 0
    assert "number of points: 50" in out
    assert "number of clusters:" in out


def test_main_rejects_bad_argument():
    with pytest.raises(SystemExit):
        main(["--eps", "not-a-number"])