"""
Tests for the jsongrep CLI.

Drives main(argv) with a patched stdin and captures stdout/stderr.
"""

import io
import json

import pytest

from jsongrep.cli.argparser import resolve_log_level, setup_argparse
from jsongrep.cli.runner import InvalidOptionError, run_stream, validate_options
from jsongrep.rules.dsl_parser import load_sort_text
from jsongrep.select import Selector
from jsongrep.sort import Sorter
from jsongrep_cli import main


SIRIUS_QUERY = json.dumps({
    "query": {"type": "raw", "pair": {"p": "/s", "cond": {
        "type": "match", "value": {"type": "string", "value": "[sS]irius"}, "mtype": "regex",
    }}}
})

DESC_SORT = '{"sort":[{"p":"/i","ord":"desc"}]}'

RECORDS = [
    '{"i":10,"s":"Sirius"}',
    '{"i":5,"s":"Vega"}',
    '{"i":20,"s":"sirius B"}',
    '{"i":0,"s":"Sirius C"}',
]


# ─────────────────────────────────────────────────────────────────────────────
# Test fixtures
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def stdin(monkeypatch):
    """Install the given lines as stdin."""
    def install(lines):
        monkeypatch.setattr("sys.stdin", io.StringIO("".join(line + "\n" for line in lines)))
    return install


def output_lines(captured) -> list[str]:
    return captured.out.splitlines()


# =============================================================================
# Selection
# =============================================================================

class TestSelection:
    """Query-only runs print selected lines immediately."""

    def test_no_options_echoes_valid_json(self, stdin, capsys):
        stdin(RECORDS)
        assert main([]) == 0
        assert output_lines(capsys.readouterr()) == RECORDS

    def test_raw_query(self, stdin, capsys):
        stdin(RECORDS)
        assert main(["-r", SIRIUS_QUERY]) == 0
        assert output_lines(capsys.readouterr()) == [RECORDS[0], RECORDS[2], RECORDS[3]]

    def test_query_file(self, stdin, capsys, tmp_path):
        path = tmp_path / "query.json"
        path.write_text(SIRIUS_QUERY, encoding="utf-8")
        stdin(RECORDS)
        assert main(["--query_file", str(path)]) == 0
        assert output_lines(capsys.readouterr()) == [RECORDS[0], RECORDS[2], RECORDS[3]]

    def test_lines_printed_verbatim(self, stdin, capsys):
        line = '{ "s" : "Sirius",   "x": [1, 2] }'
        stdin([line])
        main(["-r", SIRIUS_QUERY])
        assert output_lines(capsys.readouterr()) == [line]

    def test_empty_input(self, stdin, capsys):
        stdin([])
        assert main(["-r", SIRIUS_QUERY]) == 0
        assert capsys.readouterr().out == ""


# =============================================================================
# Sorting
# =============================================================================

class TestSorting:
    """Sorted runs buffer lines and print them at end of input."""

    def test_raw_sort(self, stdin, capsys):
        stdin(RECORDS)
        assert main(["-k", DESC_SORT]) == 0
        assert output_lines(capsys.readouterr()) == [RECORDS[2], RECORDS[0], RECORDS[1], RECORDS[3]]

    def test_query_and_sort(self, stdin, capsys):
        stdin(RECORDS)
        assert main(["-r", SIRIUS_QUERY, "-k", DESC_SORT]) == 0
        assert output_lines(capsys.readouterr()) == [RECORDS[2], RECORDS[0], RECORDS[3]]

    def test_yaml_sort_file(self, stdin, capsys, tmp_path):
        path = tmp_path / "sort.yml"
        path.write_text("sort:\n  - p: /s\n", encoding="utf-8")
        stdin(RECORDS)
        assert main(["-s", str(path)]) == 0
        assert output_lines(capsys.readouterr()) == [RECORDS[0], RECORDS[3], RECORDS[1], RECORDS[2]]


# =============================================================================
# Errors
# =============================================================================

class TestErrors:
    """Per-record failures and specification errors."""

    def test_record_errors_reported_and_skipped(self, stdin, capsys):
        stdin(['{"s":"Sirius"}', "not json", '{"s":1}', '{"t":"x"}', '{"s":"sirius"}'])
        assert main(["-r", SIRIUS_QUERY]) == 0
        captured = capsys.readouterr()
        assert output_lines(captured) == ['{"s":"Sirius"}', '{"s":"sirius"}']
        assert "line 2: " in captured.err
        assert "line 3: Matcher type mismatch" in captured.err
        assert "line 4: Invalid pointer" in captured.err
        assert "line 1:" not in captured.err
        assert "line 5:" not in captured.err

    def test_oversized_integer_is_a_record_error(self, stdin, capsys):
        stdin(['{"i":' + "1" * 5000 + "}", '{"i":1}'])
        assert main([]) == 0
        captured = capsys.readouterr()
        assert output_lines(captured) == ['{"i":1}']
        assert "line 1: " in captured.err

    def test_non_finite_numbers_are_record_errors(self, stdin, capsys):
        stdin(['{"i":NaN}', '{"i":1}', '{"i":-Infinity}'])
        assert main(["-k", DESC_SORT]) == 0
        captured = capsys.readouterr()
        assert output_lines(captured) == ['{"i":1}']
        assert "line 1: Invalid number: NaN" in captured.err
        assert "line 3: Invalid number: -Infinity" in captured.err

    def test_invalid_utf8_is_a_record_error(self, monkeypatch, capsys):
        raw = io.BytesIO(b'{"s":"\xff"}\n{"i":1}\n')
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(raw, encoding="utf-8"))
        assert main([]) == 0
        captured = capsys.readouterr()
        assert output_lines(captured) == ['{"i":1}']
        assert "line 1: Invalid UTF-8" in captured.err

    def test_debug_logs_failure_details(self, stdin, capsys):
        stdin(['{"s":1}'])
        main(["--debug", "-r", SIRIUS_QUERY])
        assert "'reason': 'MATCHER_TYPE_MISMATCH'" in capsys.readouterr().err

    def test_not_selected_is_silent(self, stdin, capsys):
        stdin(['{"s":"Vega"}'])
        main(["-r", SIRIUS_QUERY])
        assert capsys.readouterr().err == ""

    def test_exclusive_query_sources(self, stdin, capsys, tmp_path):
        stdin(RECORDS)
        assert main(["-r", SIRIUS_QUERY, "-q", str(tmp_path / "q.json")]) == 2
        captured = capsys.readouterr()
        assert "InvalidOption (query and raw_query are exclusive)" in captured.err
        assert captured.out == ""

    def test_exclusive_sort_sources(self, stdin, capsys, tmp_path):
        stdin(RECORDS)
        assert main(["-k", DESC_SORT, "-s", str(tmp_path / "s.json")]) == 2
        assert "InvalidOption (sort and raw_sort are exclusive)" in capsys.readouterr().err

    def test_malformed_query(self, stdin, capsys):
        stdin(RECORDS)
        assert main(["-r", '{"query":{"type":"xor","pair":[]}}']) == 2
        captured = capsys.readouterr()
        assert "unknown type 'xor'" in captured.err
        assert captured.out == ""

    def test_invalid_json_specification(self, stdin, capsys):
        stdin(RECORDS)
        assert main(["-k", "{sort"]) == 2
        assert "invalid JSON" in capsys.readouterr().err

    def test_missing_query_file(self, stdin, capsys, tmp_path):
        stdin(RECORDS)
        assert main(["-q", str(tmp_path / "missing.json")]) == 1
        assert capsys.readouterr().out == ""

    def test_invalid_log_level_config(self, stdin, capsys, monkeypatch):
        monkeypatch.setenv("JSONGREP_LOG_LEVEL", "loud")
        stdin(RECORDS)
        assert main([]) == 2
        assert "JSONGREP_LOG_LEVEL" in capsys.readouterr().err


# =============================================================================
# Stats and Options
# =============================================================================

class TestStatsAndOptions:
    """Summary table and option handling."""

    def test_stats_table(self, stdin, capsys):
        stdin(RECORDS + ["oops"])
        assert main(["-r", SIRIUS_QUERY, "--stats"]) == 0
        err = capsys.readouterr().err
        assert "jsongrep summary" in err
        for label in ("read", "selected", "filtered", "failed"):
            assert label in err

    def test_stats_from_config(self, stdin, capsys, monkeypatch):
        monkeypatch.setenv("JSONGREP_STATS", "true")
        stdin(RECORDS)
        main([])
        assert "jsongrep summary" in capsys.readouterr().err

    def test_no_stats_by_default(self, stdin, capsys):
        stdin(RECORDS)
        main([])
        assert "jsongrep summary" not in capsys.readouterr().err

    def test_debug_logs_on_stderr(self, stdin, capsys):
        stdin(RECORDS)
        assert main(["--debug", "-r", SIRIUS_QUERY]) == 0
        captured = capsys.readouterr()
        assert "Query: Query(Raw('/s'" in captured.err
        assert "reads ['/s']" in captured.err
        assert output_lines(captured) == [RECORDS[0], RECORDS[2], RECORDS[3]]

    def test_verbose_logs_summary(self, stdin, capsys):
        stdin(RECORDS)
        main(["-v", "-r", SIRIUS_QUERY])
        assert "Processed 4 records: 3 selected, 1 filtered, 0 failed" in capsys.readouterr().err

    def test_verbosity_flags_are_exclusive(self):
        with pytest.raises(SystemExit):
            setup_argparse(["--quiet", "--debug"])

    @pytest.mark.parametrize("argv,expected", [
        ([], "ERROR"),
        (["--quiet"], "WARNING"),
        (["-v"], "INFO"),
        (["--debug"], "DEBUG"),
    ])
    def test_resolve_log_level(self, argv, expected):
        assert resolve_log_level(setup_argparse(argv), "ERROR") == expected

    def test_validate_options(self):
        validate_options(setup_argparse(["-r", "{}", "-s", "sort.json"]))
        with pytest.raises(InvalidOptionError):
            validate_options(setup_argparse(["-q", "a.json", "-r", "{}"]))


class TestRunStream:
    """The input loop without the CLI shell."""

    def test_counts_and_reports(self):
        out = io.StringIO()
        reported = []
        lines = ['{"i":2}\n', '{"i":1}\r\n', "bad\n"]
        stats = run_stream(
            lines,
            Selector.all(),
            Sorter(load_sort_text('{"sort":[{"p":"/i"}]}')),
            out=out,
            report=lambda n, msg: reported.append(n),
        )
        assert out.getvalue() == '{"i":1}\n{"i":2}\n'
        assert reported == [3]
        assert stats.to_dict() == {"read": 3, "selected": 2, "filtered": 0, "failed": 1}
