import pytest

import geom2d.__main__ as cli


def test_line_query_prints_projection(capsys):
    exit_code = cli.main(["line", "--point", "3,4", "--origin", "0,0", "--direction", "1,0"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Closest point: (3.000000, 0.000000)" in out
    assert "Projected x: 3.000000" in out
    assert "Distance: 4.000000" in out


def test_segment_query_clips_to_endpoint(capsys):
    exit_code = cli.main(["segment", "--point", "15,1", "--a", "0,0", "--b", "10,0"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Closest point: (10.000000, 0.000000)" in out
    assert "Projected x: 1.000000" in out


def test_ray_query_clips_behind_origin(capsys):
    exit_code = cli.main(["ray", "--point=-5,2", "--origin", "0,0", "--direction", "1,0"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Closest point: (0.000000, 0.000000)" in out


def test_circle_query(capsys):
    exit_code = cli.main(["circle", "--point", "10,0", "--center", "0,0", "--radius", "5"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Signed distance: 5.000000" in out
    assert "Closest offset: (5.000000, 0.000000)" in out
    assert "Inside: False" in out


def test_line_line_query(capsys):
    exit_code = cli.main(
        [
            "line-line",
            "--origin-a", "0,0",
            "--direction-a", "1,0",
            "--origin-b", "5,5",
            "--direction-b", "0,1",
        ]
    )
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Intersection: (5.000000, 0.000000)" in out


def test_parallel_lines_exit_with_failure(capsys):
    exit_code = cli.main(
        [
            "line-line",
            "--origin-a", "0,0",
            "--direction-a", "1,0",
            "--origin-b", "0,1",
            "--direction-b", "1,0",
        ]
    )
    assert exit_code == 1
    assert "Success: False" in capsys.readouterr().out


def test_ray_circle_hits_and_misses(capsys):
    hit = cli.main(["ray-circle", "--origin=-10,0", "--direction", "1,0", "--center", "0,0", "--radius", "5"])
    out = capsys.readouterr().out
    assert hit == 0
    assert "Point A: (-5.000000, 0.000000)" in out
    assert "Point B: (5.000000, 0.000000)" in out

    miss = cli.main(["ray-circle", "--origin", "10,0", "--direction", "1,0", "--center", "0,0", "--radius", "5"])
    assert miss == 1
    assert "Success: False" in capsys.readouterr().out


def test_line_circle_query(capsys):
    exit_code = cli.main(["line-circle", "--origin", "10,0", "--direction", "1,0", "--center", "0,0", "--radius", "5"])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Point A: (-5.000000, 0.000000)" in out


@pytest.mark.parametrize("bad", ["3", "1,2,3", "a,b"])
def test_malformed_coordinate_is_rejected(bad, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["line", "--point", bad, "--origin", "0,0", "--direction", "1,0"])
    assert excinfo.value.code == 2
    assert "argument --point" in capsys.readouterr().err
