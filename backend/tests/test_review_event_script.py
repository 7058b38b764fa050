import json
from pathlib import Path

from scripts.review_event import main

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


def test_accepted_contribution_exits_zero(capsys):
    code = main([str(EXAMPLES_DIR / "claim_pixel.json")])

    out = capsys.readouterr().out
    assert code == 0
    assert "### Messages" in out
    assert "Passed  : True" in out


def test_extra_files_exit_one(capsys):
    code = main([str(EXAMPLES_DIR / "extra_files.json")])

    out = capsys.readouterr().out
    assert code == 1
    assert "### Fails" in out
    assert "- README.md" in out


def test_missing_patch_exits_two(tmp_path, capsys):
    event = json.loads((EXAMPLES_DIR / "claim_pixel.json").read_text(encoding="utf-8"))
    event["patches"] = {}
    path = tmp_path / "event.json"
    path.write_text(json.dumps(event), encoding="utf-8")

    code = main([str(path)])

    assert code == 2
    assert "Status  : FAILED" in capsys.readouterr().out


def test_unreadable_event_exits_two(tmp_path):
    path = tmp_path / "event.json"
    path.write_text("{not json", encoding="utf-8")

    assert main([str(path)]) == 2
