from io import StringIO

import canada_sin.app.types_info as mod


def test10_digits():
    out = StringIO()
    mod.print_digits(out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 11
    assert lines[1] == "  0: CRA-assigned"
    assert lines[8] == "  7: British Columbia, Yukon, Business number"


def test20_types():
    out = StringIO()
    mod.print_types(out)
    got = out.getvalue()
    assert "BUSINESS_NUMBER" in got
    line = [x for x in got.splitlines() if "BUSINESS_NUMBER" in x][0]
    assert line.endswith("province=False human=False")


def test30_main(capsys):
    mod.main(["--all"])
    assert "YUKON" in capsys.readouterr().out
    mod.main([])
    assert capsys.readouterr().out.startswith(". Possible types by leading digit")
