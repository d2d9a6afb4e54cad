from dodge import diag, settings


def test_warn_always_prints(capsys):
    diag.warn("font missing")
    assert capsys.readouterr().out == "[warn] font missing\n"


def test_info_needs_verbose(capsys, monkeypatch):
    diag.info("quiet")
    assert capsys.readouterr().out == ""
    monkeypatch.setattr(settings, "VERBOSE", True)
    diag.info("run started")
    assert capsys.readouterr().out == "[info] run started\n"
