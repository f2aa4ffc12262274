from cmadness.webserver.web_cli import main


def test_missing_arguments_prints_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Usage: ")
    assert "<port> <web_root>" in out


def test_one_argument_is_not_enough(capsys):
    assert main(["8080"]) == 1
    assert "<port> <web_root>" in capsys.readouterr().out


def test_non_numeric_port(capsys):
    assert main(["http", "/srv"]) == 1
    assert "Usage: " in capsys.readouterr().out