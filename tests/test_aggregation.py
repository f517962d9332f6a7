from __future__ import annotations

from aggregation import group_count, group_label


class TestGroupCount:
    def test_sorted_by_count_descending(self) -> None:
        rows = [{"supplier": "Beta"}, {"supplier": "Acme"}, {"supplier": "Acme"}]
        assert group_count(rows, "supplier") == [("Acme", 2), ("Beta", 1)]

    def test_ties_keep_first_seen_order(self) -> None:
        rows = [{"k": "c"}, {"k": "a"}, {"k": "b"}, {"k": "a"}, {"k": "b"}, {"k": "c"}, {"k": "d"}]
        assert group_count(rows, "k") == [("c", 2), ("a", 2), ("b", 2), ("d", 1)]

    def test_missing_field_is_unknown(self) -> None:
        assert group_count([{"shipment_id": "SH-1"}], "supplier") == [("Unknown", 1)]

    def test_blank_and_none_values_are_unknown(self) -> None:
        rows = [{"supplier": ""}, {"supplier": "   "}, {"supplier": None}, {"supplier": "Acme"}]
        assert group_count(rows, "supplier") == [("Unknown", 3), ("Acme", 1)]

    def test_values_are_trimmed_before_grouping(self) -> None:
        rows = [{"supplier": " Acme"}, {"supplier": "Acme  "}]
        assert group_count(rows, "supplier") == [("Acme", 2)]

    def test_empty_input(self) -> None:
        assert group_count([], "supplier") == []

    def test_accepts_a_generator(self) -> None:
        gen = ({"supplier": s} for s in ["x", "y", "y"])
        assert group_count(gen, "supplier") == [("y", 2), ("x", 1)]


def test_group_label_stringifies_non_strings() -> None:
    assert group_label({"days_late": 3}, "days_late") == "3"
