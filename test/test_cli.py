"""Tests for the click command-line interface."""

from __future__ import annotations

import json
import sys
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MuleSearch.cli import cli
from MuleSearch.storage.db import DatabaseManager
from MuleSearch.utils.log import log

_CONFIG = """
log: {level: WARNING, to_file: false, dir: log}
search: {sources: [dump], max_workers: 2, sanitize_names: true}
dump: {path: results.json}
storage: {enabled: false}
output: {base_dir: out, formats: [json]}
"""

_CONFIG_WITH_HISTORY = """
log: {level: WARNING}
search: {sources: [dump, known]}
dump: {path: results.json}
storage: {enabled: true, db_path: db/known.db}
output: {base_dir: out, formats: [console, json]}
"""

_DUMP = [
    {"hash": "h1", "size": 100, "name": "Movie 2020.avi", "sources": 2},
    {"hash": "h1", "size": 100, "name": "Movie 2020.avi", "sources": 3},
    {"hash": "h2", "size": 200, "name": "Movie 2020 CAM.avi", "sources": 9},
    {"hash": "h3", "size": 300, "name": "Other.avi", "sources": 1},
]


class TestMatchCommand(unittest.TestCase):
    def test_match_filters_arguments(self) -> None:
        result = CliRunner().invoke(cli, ["match", "foo OR bar", "foo.txt", "baz.txt", "Bar.txt"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.splitlines(), ["foo.txt", "Bar.txt"])

    def test_match_reads_stdin(self) -> None:
        result = CliRunner().invoke(cli, ["match", "NOT cam"], input="movie.avi\nmovie.cam.avi\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.splitlines(), ["movie.avi"])

    def test_match_show_tree(self) -> None:
        result = CliRunner().invoke(cli, ["match", "--show-tree", "a AND b OR c", "c"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.splitlines(), ["# ((a AND b) OR c)", "c"])

    def test_match_tolerates_malformed_query(self) -> None:
        result = CliRunner().invoke(cli, ["match", "((a OR", "a", "b"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.splitlines(), ["a"])


class TestSearchCommand(unittest.TestCase):
    def tearDown(self) -> None:
        # CliRunner streams are closed once invoke returns.
        log.handlers.clear()

    def test_search_writes_aggregated_json(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("config.yml").write_text(_CONFIG, encoding="utf-8")
            Path("results.json").write_text(json.dumps(_DUMP), encoding="utf-8")

            result = runner.invoke(cli, ["--config", "config.yml", "search", "movie NOT cam"])

            self.assertEqual(result.exit_code, 0, result.output)
            written = list(Path("out/json").glob("search_*.json"))
            self.assertEqual(len(written), 1)
            payload = json.loads(written[0].read_text(encoding="utf-8"))

        self.assertEqual(payload[0]["query"], "movie NOT cam")
        self.assertEqual(
            payload[0]["hits"],
            [{"hash": "h1", "size": 100, "name": "Movie.2020.avi", "sources": 5}],
        )

    def test_search_tracks_dump_hits_in_history(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("config.yml").write_text(_CONFIG_WITH_HISTORY, encoding="utf-8")
            Path("results.json").write_text(json.dumps(_DUMP), encoding="utf-8")

            first = runner.invoke(cli, ["--config", "config.yml", "search", "other"])
            self.assertEqual(first.exit_code, 0, first.output)

            Path("results.json").write_text("[]", encoding="utf-8")
            Path("config.yml").write_text(
                _CONFIG_WITH_HISTORY.replace("[dump, known]", "[known]"),
                encoding="utf-8",
            )
            second = runner.invoke(cli, ["--config", "config.yml", "search", "other"])
            self.assertEqual(second.exit_code, 0, second.output)

            written = sorted(Path("out/json").glob("search_*.json"))
            payloads = [json.loads(p.read_text(encoding="utf-8")) for p in written]

        self.assertIsNone(DatabaseManager._instance)
        # The last file comes from the history-only search.
        recalled = payloads[-1][0]["hits"]
        self.assertEqual([(hit["name"], hit["sources"]) for hit in recalled], [("Other.avi", 1)])

    def test_search_with_missing_config_fails_cleanly(self) -> None:
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["--config", "missing.yml", "search", "x"])
        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Invalid config", result.output)


if __name__ == "__main__":
    unittest.main()
