"""Tests for the boolean query parser and evaluator."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MuleSearch.core.query import (
    QueryGroup,
    compile_query,
    format_query,
    has_extension,
    matches,
    parse_query,
    query_matches,
)


class TestParseQueryShapes(unittest.TestCase):
    def test_empty_query_is_empty_and_group(self) -> None:
        self.assertEqual(parse_query(""), QueryGroup("AND", ()))

    def test_single_keyword(self) -> None:
        self.assertEqual(parse_query("foo"), QueryGroup("AND", ("foo",)))

    def test_not_wraps_single_keyword(self) -> None:
        self.assertEqual(
            parse_query("NOT foo"),
            QueryGroup("AND", (QueryGroup("NOT", ("foo",)),)),
        )

    def test_separators_split_keywords(self) -> None:
        self.assertEqual(
            parse_query("foo.bar-baz_qux"),
            QueryGroup("AND", ("foo", "bar", "baz", "qux")),
        )

    def test_or_after_and_nests_existing_group(self) -> None:
        self.assertEqual(
            parse_query("a AND b OR c"),
            QueryGroup("OR", (QueryGroup("AND", ("a", "b")), "c")),
        )

    def test_or_after_single_keyword_lifts_it(self) -> None:
        self.assertEqual(parse_query("a OR b"), QueryGroup("OR", ("a", "b")))

    def test_separator_after_or_group_demotes_to_and(self) -> None:
        self.assertEqual(
            parse_query("a OR b c"),
            QueryGroup("AND", (QueryGroup("OR", ("a", "b")), "c")),
        )

    def test_parenthesized_group(self) -> None:
        self.assertEqual(
            parse_query("(foo OR bar) AND baz"),
            QueryGroup("AND", (QueryGroup("OR", ("foo", "bar")), "baz")),
        )

    def test_leading_or_does_not_invent_children(self) -> None:
        self.assertEqual(parse_query("OR foo"), QueryGroup("OR", ("foo",)))

    def test_unterminated_group_keeps_partial_tree(self) -> None:
        self.assertEqual(
            parse_query("(foo bar"),
            QueryGroup("AND", (QueryGroup("AND", ("foo", "bar")),)),
        )

    def test_text_after_unbalanced_close_is_dropped(self) -> None:
        self.assertEqual(parse_query("a) b"), QueryGroup("AND", ("a",)))

    def test_operator_words_match_as_prefixes(self) -> None:
        self.assertEqual(
            parse_query("NOTE"),
            QueryGroup("AND", (QueryGroup("NOT", ("E",)),)),
        )
        self.assertEqual(parse_query("ORANGE"), QueryGroup("OR", ("ANGE",)))

    def test_lowercase_operators_are_keywords(self) -> None:
        self.assertEqual(parse_query("foo or bar"), QueryGroup("AND", ("foo", "or", "bar")))

    def test_pending_not_skips_nested_group(self) -> None:
        self.assertEqual(
            parse_query("NOT (a b) c"),
            QueryGroup("AND", (QueryGroup("AND", ("a", "b")), QueryGroup("NOT", ("c",)))),
        )

    def test_malformed_inputs_do_not_raise(self) -> None:
        for query in ("", "(", ")", "((", "))", "NOT", "OR", "AND", "AND OR NOT", "(()", "a (b OR", "!!..--"):
            with self.subTest(query=query):
                node = parse_query(query)
                self.assertIsInstance(node, QueryGroup)
                matches(node, "anything")


class TestMatches(unittest.TestCase):
    def test_empty_query_matches_everything(self) -> None:
        self.assertTrue(query_matches("", "anything"))
        self.assertTrue(query_matches("", ""))

    def test_term_is_case_insensitive_substring(self) -> None:
        self.assertTrue(query_matches("foo", "a foo b"))
        self.assertFalse(query_matches("foo", "bar"))
        self.assertTrue(query_matches("FOO", "foo"))
        self.assertTrue(query_matches("foo", "xFOOx"))

    def test_and(self) -> None:
        self.assertTrue(query_matches("foo AND bar", "foobar"))
        self.assertFalse(query_matches("foo AND bar", "foo"))

    def test_or(self) -> None:
        self.assertTrue(query_matches("foo OR bar", "bar"))
        self.assertFalse(query_matches("foo OR bar", "baz"))

    def test_not(self) -> None:
        self.assertTrue(query_matches("NOT foo", "bar"))
        self.assertFalse(query_matches("NOT foo", "foo"))

    def test_grouping(self) -> None:
        self.assertTrue(query_matches("(foo OR bar) AND baz", "foobaz"))
        self.assertFalse(query_matches("(foo OR bar) AND baz", "foo"))

    def test_implicit_and_on_separators(self) -> None:
        self.assertTrue(query_matches("foo.bar", "foobar test"))
        self.assertFalse(query_matches("foo.bar", "foo test"))

    def test_operator_rebinding_is_left_grouped(self) -> None:
        for target in ("abc", "ab", "c", "a", "b", "ac", "bc", "x"):
            with self.subTest(target=target):
                self.assertEqual(
                    query_matches("a AND b OR c", target),
                    query_matches("(a AND b) OR c", target),
                )
        self.assertTrue(query_matches("a AND b OR c", "c"))

    def test_multi_child_not_is_nand(self) -> None:
        node = QueryGroup("NOT", ("a", "b"))
        self.assertTrue(matches(node, "a"))
        self.assertTrue(matches(node, "b"))
        self.assertTrue(matches(node, "x"))
        self.assertFalse(matches(node, "ab"))

    def test_empty_groups_match(self) -> None:
        for operator in ("AND", "OR", "NOT"):
            with self.subTest(operator=operator):
                self.assertTrue(matches(QueryGroup(operator, ()), "x"))

    def test_unbalanced_queries_degrade_gracefully(self) -> None:
        self.assertTrue(query_matches("(foo bar", "foo bar"))
        self.assertFalse(query_matches("(foo bar", "foo"))
        self.assertTrue(query_matches("a) b", "a"))
        self.assertTrue(query_matches("foo OR", "foo"))
        self.assertTrue(query_matches("foo NOT", "foo"))

    def test_compile_query_reuses_parsed_tree(self) -> None:
        predicate = compile_query("movie NOT cam")
        names = ["Movie.2020.DVDRip.avi", "Movie.2020.CAM.avi", "Other.avi"]
        self.assertEqual([n for n in names if predicate(n)], ["Movie.2020.DVDRip.avi"])


class TestFormatQuery(unittest.TestCase):
    def test_format_renders_fully_parenthesized(self) -> None:
        self.assertEqual(format_query(parse_query("a AND b OR c")), "((a AND b) OR c)")
        self.assertEqual(format_query(parse_query("NOT foo")), "(NOT foo)")
        self.assertEqual(format_query(parse_query("")), "()")
        self.assertEqual(format_query(QueryGroup("NOT", ("a", "b"))), "NOT (a AND b)")

    def test_format_of_multi_child_not_is_display_only(self) -> None:
        rendered = format_query(QueryGroup("NOT", ("a", "b")))
        self.assertEqual(rendered, "NOT (a AND b)")
        # A pending NOT does not apply to a parenthesized group.
        self.assertEqual(parse_query(rendered), QueryGroup("AND", (QueryGroup("AND", ("a", "b")),)))

    def test_format_deeply_nested_tree(self) -> None:
        rendered = format_query(parse_query("(" * 3000 + "foo"))
        self.assertEqual(rendered, "(" * 3001 + "foo" + ")" * 3001)


class TestDeepNesting(unittest.TestCase):
    def test_unterminated_deep_nesting_matches(self) -> None:
        self.assertTrue(query_matches("(" * 5000 + "foo", "foo"))
        self.assertFalse(query_matches("(" * 5000 + "foo", "bar"))

    def test_balanced_deep_nesting_matches(self) -> None:
        query = "(" * 2000 + "foo OR bar" + ")" * 2000 + " NOT baz"
        self.assertTrue(query_matches(query, "bar.avi"))
        self.assertFalse(query_matches(query, "bar.baz.avi"))

    def test_deep_nesting_keeps_tree_shape(self) -> None:
        node = parse_query("(" * 1500 + "foo" + ")" * 1500)
        depth = 0
        while isinstance(node, QueryGroup):
            self.assertEqual(len(node.children), 1)
            node = node.children[0]
            depth += 1
        self.assertEqual((node, depth), ("foo", 1501))


class TestHasExtension(unittest.TestCase):
    def test_extension_filter(self) -> None:
        self.assertTrue(has_extension("Movie.AVI", "avi"))
        self.assertTrue(has_extension("Movie.avi", ".avi"))
        self.assertFalse(has_extension("Movie.mkv", "avi"))
        self.assertFalse(has_extension("avi", "avi"))
        self.assertTrue(has_extension("anything", None))
        self.assertTrue(has_extension("anything", "  "))


if __name__ == "__main__":
    unittest.main()
