"""
End-to-end tests for the command-line interfaces.

Runs the CLI entry points in-process against temporary files.
"""

import json
from pathlib import Path

import pytest

from schedule_sync.cli import admin_cli, import_cli

OWNERS_FILE = str(Path(__file__).resolve().parents[2] / "config" / "owners.yaml")


@pytest.fixture
def base_args(tmp_path):
    """Arguments isolating a run from the working directory's config."""
    settings = tmp_path / "settings.yaml"
    settings.write_text("import:\n  export_dir: %s\n" % (tmp_path / "reports"), encoding="utf-8")
    return ["--config", str(settings), "--owners", OWNERS_FILE, "--log-format", "text", "--log-level", "ERROR"]


@pytest.mark.e2e
class TestImportCli:

    def test_import_prints_summary(self, payload_file, base_args, capsys):
        exit_code = import_cli.main(["import", "--input", str(payload_file), *base_args])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "IMPORT: horarios.csv" in out
        assert "Total rows:     4" in out
        assert "Line 4: missing required field(s)" in out
        assert 'Line 5: invalid status "unknown"' in out

    def test_import_exports_report(self, payload_file, base_args, tmp_path, capsys):
        exit_code = import_cli.main(["import", "--input", str(payload_file), "--export", *base_args])

        assert exit_code == 0
        exported = list((tmp_path / "reports").glob("reporte_horarios.csv_*.json"))
        assert len(exported) == 1
        document = json.loads(exported[0].read_text(encoding="utf-8"))
        assert document["summary"]["errorCount"] == 2

    def test_missing_payload_exits_with_error(self, tmp_path, base_args, capsys):
        exit_code = import_cli.main(["import", "--input", str(tmp_path / "missing.csv"), *base_args])

        assert exit_code == 1
        assert "Cannot read payload" in capsys.readouterr().err

    def test_all_rows_rejected_is_not_a_failure(self, tmp_path, base_args, capsys):
        payload = tmp_path / "bad.csv"
        payload.write_text("h\nx\ny\n", encoding="utf-8")

        assert import_cli.main(["import", "--input", str(payload), *base_args]) == 0

    def test_unknown_owner_is_reported_as_kept_in_report(self, tmp_path, base_args, capsys):
        payload = tmp_path / "z.csv"
        payload.write_text("h\nZ,2025-01-10,08:00,16:00,Ventas,active\n", encoding="utf-8")

        import_cli.main(["import", "--input", str(payload), *base_args])

        assert "unknown owner(s): Z" in capsys.readouterr().out

    def test_demo(self, base_args, capsys):
        exit_code = import_cli.main(["demo", *base_args])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "IMPORT: horarios_demo.csv" in out
        assert "Imported:       3" in out

    def test_no_command(self, capsys):
        assert import_cli.main([]) == 1


@pytest.mark.e2e
class TestAdminCli:

    def test_stats_json_after_import(self, payload_file, base_args, capsys):
        exit_code = admin_cli.main(["stats", "--json", "--import", str(payload_file), *base_args])

        stats = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert stats["owners"] == {
            "total_owners": 3,
            "total_schedules": 6,
            "active_schedules": 3,
            "departments": 3,
        }
        assert stats["imports"] == {"total_imports": 1, "records_imported": 2, "total_errors": 2}

    def test_stats_with_demo(self, base_args, capsys):
        admin_cli.main(["stats", "--json", "--demo", *base_args])

        stats = json.loads(capsys.readouterr().out)
        assert stats["owners"]["total_schedules"] == 7
        assert stats["imports"]["records_imported"] == 3

    def test_owners_search(self, base_args, capsys):
        exit_code = admin_cli.main(["owners", "--search", "diseño", *base_args])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "María García" in out
        assert "Juan Pérez" not in out

    def test_owner_schedules(self, payload_file, base_args, capsys):
        exit_code = admin_cli.main(["schedules", "--owner", "1", "--import", str(payload_file), *base_args])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Desarrollo Frontend" in out
        assert "Backend" in out

    def test_unknown_owner(self, base_args, capsys):
        assert admin_cli.main(["schedules", "--owner", "99", *base_args]) == 1

    def test_invalid_owner_argument(self, base_args, capsys):
        assert admin_cli.main(["schedules", "--owner", "bad id", *base_args]) == 1
        assert "invalid characters" in capsys.readouterr().err
