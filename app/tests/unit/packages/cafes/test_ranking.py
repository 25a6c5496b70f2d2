"""Unit tests for packages.cafes.ranking module."""

import pytest

from packages.cafes.ranking import (
    COLLAPSED_LIMIT,
    rank_by_rating,
    rank_by_work_score,
    rank_cities,
    visible_cafes,
)


def cafe(name, work_score=None, google_rating=None, google_ratings_total=None):
    return {
        "id": name,
        "name": name,
        "work_score": work_score,
        "google_rating": google_rating,
        "google_ratings_total": google_ratings_total,
    }


@pytest.mark.unit
class TestRankByWorkScore:
    def test_descending(self):
        ranked = rank_by_work_score([cafe("a", 5), cafe("b", 9), cafe("c", 7)])
        assert [c["name"] for c in ranked] == ["b", "c", "a"]

    def test_missing_score_counts_as_zero(self):
        ranked = rank_by_work_score([cafe("a"), cafe("b", 1)])
        assert [c["name"] for c in ranked] == ["b", "a"]

    def test_ties_keep_input_order(self):
        ranked = rank_by_work_score([cafe("a", 5), cafe("b", 5), cafe("c", 5)])
        assert [c["name"] for c in ranked] == ["a", "b", "c"]

    def test_non_numeric_score_counts_as_zero(self):
        ranked = rank_by_work_score([{"name": "a", "work_score": "9"}, cafe("b", 1)])
        assert [c["name"] for c in ranked] == ["b", "a"]


@pytest.mark.unit
class TestRankByRating:
    def test_rating_then_count_then_score(self):
        ranked = rank_by_rating(
            [
                cafe("a", 9, 4.5, 10),
                cafe("b", 1, 4.8, 5),
                cafe("c", 2, 4.5, 100),
                cafe("d", 8, 4.5, 10),
            ]
        )
        assert [c["name"] for c in ranked] == ["b", "c", "a", "d"]

    def test_full_ties_keep_input_order(self):
        ranked = rank_by_rating(
            [
                cafe("a", 7, 4.5, 10),
                cafe("b", 7, 4.5, 10),
                cafe("c", 7, 4.5, 10),
            ]
        )
        assert [c["name"] for c in ranked] == ["a", "b", "c"]

    def test_missing_values_tie_at_zero(self):
        ranked = rank_by_rating([cafe("a"), cafe("b", 0, 0, 0), cafe("c")])
        assert [c["name"] for c in ranked] == ["a", "b", "c"]


@pytest.mark.unit
class TestVisibleCafes:
    def test_collapsed_takes_top_ten_by_work_score(self):
        cafes = [cafe(f"c{i}", work_score=i) for i in range(15)]
        shown = visible_cafes(cafes)
        assert len(shown) == COLLAPSED_LIMIT
        assert shown[0]["name"] == "c14"
        assert shown[-1]["name"] == "c5"

    def test_expanded_shows_all_by_rating(self):
        cafes = [cafe(f"c{i}", work_score=i, google_rating=5 - i / 10) for i in range(15)]
        shown = visible_cafes(cafes, expanded=True)
        assert len(shown) == 15
        assert shown[0]["name"] == "c0"

    def test_fewer_than_limit(self):
        assert len(visible_cafes([cafe("a", 1)])) == 1

    def test_empty(self):
        assert visible_cafes([]) == []


@pytest.mark.unit
class TestRankCities:
    def test_count_then_name(self):
        counts = {"Hamburg": 3, "Berlin": 5, "Bremen": 3}
        assert rank_cities(counts) == [("Berlin", 5), ("Bremen", 3), ("Hamburg", 3)]

    def test_limit(self):
        counts = {f"City {i}": i for i in range(20)}
        assert len(rank_cities(counts, limit=10)) == 10
