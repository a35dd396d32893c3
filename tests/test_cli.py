import io
from pathlib import Path

import pytest

from marina.cli import _split_name_amount, main


def run_cli(monkeypatch, argv: list[str], commands: list[str]) -> int:
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{c}\n" for c in commands)))
    return main(argv)


@pytest.fixture
def ledger(tmp_path: Path) -> Path:
    path = tmp_path / "BoatData.csv"
    path.write_text("Eleanor,28,slip,23,1200.50\nZed,10,land,B,0.00\n", encoding="utf-8")
    return path


def test_month_pay_and_exit_persists(monkeypatch, capsys, ledger: Path):
    code = run_cli(monkeypatch, [str(ledger)], ["M", "P Eleanor 1550.50", "x"])

    assert code == 0
    out = capsys.readouterr().out
    assert "Monthly charges applied to 2 boats" in out
    assert "Exiting the Boat Management System" in out
    assert ledger.read_text(encoding="utf-8") == "Eleanor,28,slip,23,0.00\nZed,10,land,B,140.00\n"


def test_inventory_is_sorted(monkeypatch, capsys, ledger: Path):
    run_cli(monkeypatch, [str(ledger)], ["A Ann,10,land,A,0.00", "i", "x"])

    out = capsys.readouterr().out
    # The menu prompt has no newline, so it prefixes the first inventory line.
    lines = [line.rpartition(" : ")[2] for line in out.splitlines() if "Owes $" in line]
    assert [line.split()[0] for line in lines] == ["Ann", "Eleanor", "Zed"]


def test_prompted_commands(monkeypatch, capsys, ledger: Path):
    commands = ["a", "Moby,40,storage,4,10.00", "r", "zed", "p", "Moby", "20", "x"]

    run_cli(monkeypatch, [str(ledger)], commands)

    out = capsys.readouterr().out
    assert "That is more than the amount owed, $10.00" in out
    assert ledger.read_text(encoding="utf-8") == "Eleanor,28,slip,23,1200.50\nMoby,40,storage,4,10.00\n"


def test_error_messages(monkeypatch, capsys, ledger: Path):
    run_cli(monkeypatch, [str(ledger)], ["A nonsense", "R Titanic", "P Ghost 5", "q", "x"])

    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert out.count("No boat with that name") == 2
    assert "Invalid option q" in out


def test_full_marina(monkeypatch, capsys, ledger: Path):
    run_cli(monkeypatch, [str(ledger), "--capacity", "2"], ["A Ann,10,land,A,0.00", "x"])

    assert "Marina is full" in capsys.readouterr().out
    assert "Ann" not in ledger.read_text(encoding="utf-8")


def test_end_of_input_saves_and_exits(monkeypatch, ledger: Path):
    code = run_cli(monkeypatch, [str(ledger)], ["R Zed"])

    assert code == 0
    assert ledger.read_text(encoding="utf-8") == "Eleanor,28,slip,23,1200.50\n"


def test_missing_ledger_starts_empty_and_creates_file(monkeypatch, capsys, tmp_path: Path):
    path = tmp_path / "new.csv"

    code = run_cli(monkeypatch, [str(path)], ["A Ann,10,land,A,0.00", "x"])

    assert code == 0
    assert "ERROR" in capsys.readouterr().err
    assert path.read_text(encoding="utf-8") == "Ann,10,land,A,0.00\n"


def test_unreadable_ledger_exits_nonzero(monkeypatch, tmp_path: Path):
    assert run_cli(monkeypatch, [str(tmp_path)], ["x"]) == 1


def test_missing_argument_exits_with_usage(monkeypatch):
    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, [], [])

    assert excinfo.value.code == 2


def test_split_name_amount():
    assert _split_name_amount("Big Brother 20.00") == ("Big Brother", "20.00")
    assert _split_name_amount("Big Brother") == ("Big Brother", None)
    assert _split_name_amount("Eleanor") == ("Eleanor", None)


def test_whole_command_words_prompt_for_arguments(monkeypatch, capsys, ledger: Path):
    commands = ["add", "Ann,10,land,A,0.00", "remove", "Zed", "pay", "Eleanor", "200.50", "x"]

    code = run_cli(monkeypatch, [str(ledger)], commands)

    assert code == 0
    assert "Invalid input" not in capsys.readouterr().out
    assert ledger.read_text(encoding="utf-8") == "Ann,10,land,A,0.00\nEleanor,28,slip,23,1000.00\n"


def test_sub_cent_payment_over_balance_is_refused(monkeypatch, capsys, ledger: Path):
    run_cli(monkeypatch, [str(ledger)], ["P Zed 0.004", "x"])

    assert "That is more than the amount owed, $0.00" in capsys.readouterr().out
    assert "Zed,10,land,B,0.00" in ledger.read_text(encoding="utf-8")
