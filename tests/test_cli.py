from easekit.cli import main


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out.split()
    assert out[0] == "linear"
    assert "ease_in_out_bounce" in out


def test_sample(capsys):
    assert main(["sample", "ease_in_quad", "--steps", "3"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == [
        "0.000000 0.000000",
        "0.500000 0.250000",
        "1.000000 1.000000",
    ]


def test_sample_default_curve(capsys, monkeypatch):
    monkeypatch.setenv("EASEKIT_DEFAULT_EASING", "ease_out_quad")
    monkeypatch.setenv("EASEKIT_PRECISION", "2")
    assert main(["sample", "--steps", "3"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[1] == "0.50 0.75"


def test_sample_elastic_params(capsys):
    assert main(["sample", "ease_out_elastic", "--steps", "2",
                 "--amplitude", "2", "--period", "0.4"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == ["0.000000 0.000000", "1.000000 1.000000"]


def test_point(capsys):
    assert main(["point", "0", "0", "10", "0", "2"]) == 0
    assert capsys.readouterr().out.strip() == "20.000000 0.000000"


def test_unknown_curve(capsys):
    assert main(["sample", "wobble"]) == 2
    assert "Unknown easing function" in capsys.readouterr().err


def test_bad_params(capsys):
    assert main(["sample", "ease_in_quad", "--overshoot", "2"]) == 2
    assert capsys.readouterr().err.startswith("easekit:")


def test_invalid_settings(capsys, monkeypatch):
    monkeypatch.setenv("EASEKIT_SAMPLE_STEPS", "1")
    assert main(["list"]) == 2
    assert capsys.readouterr().err.startswith("easekit: invalid settings")
