import json

from desikata.cli import main


def write_json(tmp_path, name, data):
    p = tmp_path / name
    p.write_text(json.dumps(data))
    return str(p)


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "desikata" in capsys.readouterr().out


def test_upi_json_output(tmp_path, capsys, upi_log):
    path = write_json(tmp_path, "log.json", upi_log)

    assert main(["upi", path, "--json"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["netBalance"] == 4700
    assert out["frequentContact"] == "Swiggy"
    assert out["highestTransaction"]["id"] == "T1"


def test_upi_text_output(tmp_path, capsys, upi_log):
    path = write_json(tmp_path, "log.json", upi_log)

    assert main(["u", path]) == 0

    out = capsys.readouterr().out
    assert "UPI Transaction Summary" in out
    assert "Transactions : 3" in out
    assert "+₹4,700.00" in out
    assert "food" in out


def test_upi_no_valid_rows(tmp_path, capsys):
    path = write_json(tmp_path, "log.json", [{"type": "debit", "amount": -1}])

    assert main(["upi", path]) == 1
    assert "No valid transaction data" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main(["upi", str(tmp_path / "nope.json")]) == 2
    assert "File not found" in capsys.readouterr().out


def test_bad_json(tmp_path, capsys):
    p = tmp_path / "bad.json"
    p.write_text("{not json")

    assert main(["rc", str(p)]) == 2
    assert "Invalid JSON" in capsys.readouterr().out


def test_title(capsys):
    assert main(["title", "dil", "ka", "KYA", "kare"]) == 0
    assert capsys.readouterr().out.strip() == "Dil ka Kya Kare"


def test_blank_title(capsys):
    assert main(["t", "   "]) == 1


def test_report_card(tmp_path, capsys):
    path = write_json(
        tmp_path, "rahul.json",
        {"name": "Rahul", "marks": {"maths": 85, "science": 92, "english": 78}},
    )

    assert main(["report", path]) == 0
    out = capsys.readouterr().out
    assert "Report Card: Rahul" in out
    assert "Grade      : A" in out


def test_report_card_json(tmp_path, capsys):
    path = write_json(tmp_path, "priya.json", {"name": "Priya", "marks": {"maths": 35}})

    assert main(["rc", path, "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["grade"] == "F"


def test_report_card_invalid(tmp_path, capsys):
    path = write_json(tmp_path, "bad.json", {"name": "", "marks": {"maths": 35}})

    assert main(["report", path]) == 1


def test_non_utf8_file(tmp_path, capsys):
    p = tmp_path / "latin.json"
    p.write_bytes(b"[\xff\xfe]")

    assert main(["upi", str(p)]) == 2
    assert "Not UTF-8" in capsys.readouterr().out


def test_directory_path(tmp_path, capsys):
    assert main(["upi", str(tmp_path)]) == 2
    assert "Cannot read" in capsys.readouterr().out
