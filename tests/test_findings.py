import json

from plainify.findings import Config, Finding


def test_to_dict_full():
    finding = Finding(file="a.txt", line=3, col=7, message="msg")
    assert finding.to_dict() == {"file": "a.txt", "line": 3, "col": 7, "message": "msg"}


def test_to_dict_omits_zero_line_and_col():
    finding = Finding(file="a.txt", message="CRLF line endings - convert to LF")
    assert finding.to_dict() == {
        "file": "a.txt",
        "message": "CRLF line endings - convert to LF",
    }


def test_to_dict_omits_zero_col_only():
    finding = Finding(file="a.txt", line=1, message="m")
    data = finding.to_dict()
    assert "col" not in data
    assert data["line"] == 1


def test_to_dict_key_order_and_json():
    finding = Finding(file="f", line=2, col=4, message="x")
    assert list(finding.to_dict()) == ["file", "line", "col", "message"]
    assert json.loads(json.dumps(finding.to_dict())) == finding.to_dict()


def test_finding_equality():
    assert Finding("f", 1, 1, "m") == Finding(file="f", line=1, col=1, message="m")
    assert Finding("f", 1, 1, "m") != Finding("f", 1, 2, "m")


def test_config_defaults_are_off():
    config = Config()
    assert config.fix is False
    assert config.allow_utf8_bom is False


def test_config_fields():
    config = Config(fix=True, allow_utf8_bom=True)
    assert config.fix is True
    assert config.allow_utf8_bom is True