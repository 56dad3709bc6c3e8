from __future__ import annotations

import unittest
from collections import Counter

from contracts.organize import SortMode
from organize import PlainOptions, ProjectedOptions, organize
from organize.sort_values import UNOCSS_BUCKETS, collation_key, sort_rule_values, unocss_bucket


def _identity(v: str) -> str:
    return v


class TestLexicographicSort(unittest.TestCase):
    def test_no_sort_keeps_input_order(self) -> None:
        result = organize(["c", "a", "b"], PlainOptions(groups=[], sort=False))
        self.assertEqual(result.flat, ["c", "a", "b"])

    def test_true_means_ascending(self) -> None:
        result = organize(["c", "a", "b"], PlainOptions(groups=[], sort=True))
        self.assertEqual(result.flat, ["a", "b", "c"])

    def test_ascending_is_case_insensitive_lowercase_first(self) -> None:
        ordered = sort_rule_values(["b", "A", "a", "B"], SortMode.ASC, _identity)
        self.assertEqual(ordered, ["a", "A", "b", "B"])
        self.assertLess(collation_key("apple"), collation_key("Banana"))

    def test_ascending_ranks_punctuation_before_digits_before_letters(self) -> None:
        values = ["text-2xl", "text-[12px]", "w-10", "w-[10px]", "text-base"]
        ordered = sort_rule_values(values, SortMode.ASC, _identity)
        self.assertEqual(ordered, ["text-[12px]", "text-2xl", "text-base", "w-[10px]", "w-10"])

        unocss = sort_rule_values(["w-10", "w-[10px]", "p-2", "p-[3px]"], SortMode.UNOCSS, _identity)
        self.assertEqual(unocss, ["w-[10px]", "w-10", "p-[3px]", "p-2"])

    def test_ascending_ignores_accents_before_case(self) -> None:
        ordered = sort_rule_values(["éa", "Eb", "ea"], SortMode.ASC, _identity)
        self.assertEqual(ordered, ["ea", "éa", "Eb"])

    def test_descending_is_reverse_of_ascending(self) -> None:
        values = ["mt-2", "Flex", "bg-red", "p-1", "flex", "bg-blue"]
        asc = sort_rule_values(values, SortMode.ASC, _identity)
        desc = sort_rule_values(values, SortMode.DESC, _identity)
        self.assertEqual(desc, list(reversed(asc)))
        self.assertEqual(sort_rule_values(asc, SortMode.ASC, _identity), asc)

    def test_descending_reverses_ties(self) -> None:
        items = [("x", 1), ("x", 2), ("a", 3)]
        asc = organize(items, ProjectedOptions(groups=[], sort="ASC", map=lambda t: t[0]))
        desc = organize(items, ProjectedOptions(groups=[], sort="DESC", map=lambda t: t[0]))
        self.assertEqual(asc.flat, [("a", 3), ("x", 1), ("x", 2)])
        self.assertEqual(desc.flat, [("x", 2), ("x", 1), ("a", 3)])

    def test_sort_is_per_group(self) -> None:
        result = organize(["b2", "a9", "b1", "a1"], PlainOptions(groups=["^b"], sort="ASC"))
        self.assertEqual(result.groups[0].values, ["b1", "b2"])
        self.assertEqual(result.groups[1].values, ["a1", "a9"])
        self.assertEqual(result.flat, ["b1", "b2", "a1", "a9"])


class TestUnocssSort(unittest.TestCase):
    def test_mixed_utilities(self) -> None:
        result = organize(["mt-2", "flex", "bg-red", "p-1"], PlainOptions(groups=[], sort="UNOCSS"))
        # "mt-2" does not start with "m-", so it lands with the unknown attrs.
        self.assertEqual(result.flat, ["flex", "p-1", "bg-red", "mt-2"])

    def test_bucket_order(self) -> None:
        values = [
            "bg-blue", "text-sm", "@hover:x", ":focus", "p-2", "w-4", "m-1", "h-2",
            "grid", "absolute", "mt-2", "flexible", "zeta", "alpha",
        ]
        ordered = sort_rule_values(values, SortMode.UNOCSS, _identity)
        self.assertEqual(
            ordered,
            [
                "@hover:x", ":focus",  # priority, input order
                "absolute", "flexible", "grid",  # display/position, sorted
                "h-2", "w-4",  # size
                "m-1", "p-2",  # spacing
                "text-sm",
                "bg-blue",
                "mt-2", "zeta", "alpha",  # unknown, input order
            ],
        )
        self.assertEqual(Counter(ordered), Counter(values))

    def test_priority_and_unknown_buckets_are_not_resorted(self) -> None:
        ordered = sort_rule_values([":z", "zz", "@a", "aa"], SortMode.UNOCSS, _identity)
        self.assertEqual(ordered, [":z", "@a", "zz", "aa"])

    def test_prefix_collisions_follow_plain_prefix_test(self) -> None:
        self.assertEqual(unocss_bucket("flexible"), 1)
        self.assertEqual(unocss_bucket("topaz"), 1)
        self.assertEqual(unocss_bucket("textual"), 4)
        self.assertEqual(unocss_bucket("mx-2"), len(UNOCSS_BUCKETS))

    def test_duplicates_are_preserved(self) -> None:
        values = ["p-1", "flex", "p-1", "x", "x"]
        ordered = sort_rule_values(values, SortMode.UNOCSS, _identity)
        self.assertEqual(ordered, ["flex", "p-1", "p-1", "x", "x"])

    def test_uses_projection(self) -> None:
        items = [{"c": "bg-red"}, {"c": "w-4"}, {"c": ":hover"}]
        result = organize(items, ProjectedOptions(groups=[], sort="UNOCSS", map=lambda d: d["c"]))
        self.assertEqual([d["c"] for d in result.flat], [":hover", "w-4", "bg-red"])


if __name__ == "__main__":
    unittest.main()
