# tests/test_ranking.py
import itertools
import math

import pytest

from conftest import make_entry
from thidua.core.models import ClassModel, ScoringConfig
from thidua.core.ranking import RankingAggregator, aggregate, exact_sum


class TestAggregateBasics:
    def test_reference_example(self):
        """Exemple de référence : deux classes, trois saisies."""
        a = ClassModel(id="A", name="A")
        b = ClassModel(id="B", name="B")
        entries = [make_entry("A", 5), make_entry("B", -2), make_entry("A", -1)]

        rows = aggregate([a, b], entries)

        assert [r.class_model.id for r in rows] == ["A", "B"]
        assert (rows[0].plus, rows[0].minus, rows[0].total, rows[0].rank) == (5, -1, 104, 1)
        assert (rows[1].plus, rows[1].minus, rows[1].total, rows[1].rank) == (0, -2, 98, 2)

    def test_empty_classes(self):
        """Référentiel vide : classement vide."""
        assert aggregate([], [make_entry("A", 5)]) == []

    def test_no_entries(self, classes):
        """Sans saisie, chaque classe garde le score de départ."""
        rows = aggregate(classes, [])

        assert all(r.total == 100 for r in rows)
        assert all(r.plus == 0 and r.minus == 0 for r in rows)
        assert [r.rank for r in rows] == [1, 2, 3]
        assert [r.class_model.id for r in rows] == ["A", "B", "C"]

    def test_every_class_once(self, classes):
        """Chaque classe apparaît exactement une fois."""
        entries = [make_entry("C", 3), make_entry("C", 4)]
        rows = aggregate(classes, entries)

        assert sorted(r.class_model.id for r in rows) == ["A", "B", "C"]

    def test_unknown_class_ignored(self, classes):
        """Les saisies d'une classe inconnue sont ignorées sans erreur."""
        entries = [make_entry("ZZ", 50), make_entry("A", 1)]
        rows = aggregate(classes, entries)

        assert sum(r.total for r in rows) == 301
        assert rows[0].class_model.id == "A"

    def test_zero_point_change(self, classes):
        """Une saisie nulle n'alimente ni les plus ni les moins."""
        rows = aggregate(classes, [make_entry("A", 0)])
        row_a = next(r for r in rows if r.class_model.id == "A")

        assert (row_a.plus, row_a.minus, row_a.total) == (0, 0, 100)

    def test_total_equals_base_plus_minus(self, classes):
        """total == base + plus + minus, exactement pour des entiers."""
        entries = [
            make_entry("A", 3), make_entry("A", -7), make_entry("B", 10),
            make_entry("B", -1), make_entry("C", -5), make_entry("A", 2),
        ]
        for row in aggregate(classes, entries):
            assert row.total == 100 + row.plus + row.minus
            assert row.minus <= 0 <= row.plus


class TestOrdering:
    def test_descending_total(self, classes):
        entries = [make_entry("C", 10), make_entry("B", 5)]
        rows = aggregate(classes, entries)

        assert [r.class_model.id for r in rows] == ["C", "B", "A"]
        assert [r.rank for r in rows] == [1, 2, 3]

    def test_stable_ties(self):
        """Ex aequo : l'ordre du référentiel est conservé, pas celui des saisies."""
        roster = [ClassModel(id=str(i), name=str(i)) for i in range(10)]
        # Même total pour toutes, saisies dans l'ordre inverse
        entries = [make_entry(str(i), 1) for i in reversed(range(10))]

        rows = aggregate(roster, entries)

        assert [r.class_model.id for r in rows] == [str(i) for i in range(10)]
        assert [r.rank for r in rows] == list(range(1, 11))

    def test_ties_get_sequential_ranks_by_default(self, classes):
        rows = aggregate(classes, [make_entry("C", -1)])

        assert [(r.class_model.id, r.rank) for r in rows] == [("A", 1), ("B", 2), ("C", 3)]

    def test_competition_ranking_opt_in(self, classes):
        """rank_method="min" : ex aequo au même rang, puis saut."""
        config = ScoringConfig(rank_method="min")
        rows = aggregate(classes, [make_entry("C", -1)], config)

        assert [r.rank for r in rows] == [1, 1, 3]


class TestPermutationInvariance:
    def test_integer_entries(self, classes):
        entries = [make_entry("A", 5), make_entry("B", -2), make_entry("A", -1), make_entry("C", 4)]
        expected = [(r.class_model.id, r.plus, r.minus, r.total, r.rank) for r in aggregate(classes, entries)]

        for perm in itertools.permutations(entries):
            got = [(r.class_model.id, r.plus, r.minus, r.total, r.rank) for r in aggregate(classes, list(perm))]
            assert got == expected

    def test_float_entries_bit_identical(self, classes):
        """Flottants : résultat identique au bit près quelle que soit la permutation."""
        values = [0.1, 0.2, 0.3, -0.7, 1e16, -1e16, 2.5]
        entries = [make_entry("A", v, entry_id=str(i)) for i, v in enumerate(values)]
        reference = aggregate(classes, entries)[0]

        for perm in itertools.permutations(entries):
            row = next(r for r in aggregate(classes, list(perm)) if r.class_model.id == "A")
            assert row.total == reference.total
            assert row.plus == reference.plus
            assert row.minus == reference.minus

    def test_exact_sum_is_correctly_rounded(self):
        assert exact_sum([0.1] * 10) == 1.0
        assert exact_sum([1, 2, 3]) == 6
        assert isinstance(exact_sum([1, 2, 3]), int)
        assert exact_sum([]) == 0


class TestNonFinite:
    def test_nan_propagates_to_total(self, classes):
        """NaN n'est pas filtré ici : il se propage dans le total."""
        rows = aggregate(classes, [make_entry("A", float("nan"))])
        row_a = next(r for r in rows if r.class_model.id == "A")

        assert math.isnan(row_a.total)
        assert rows[-1].class_model.id == "A"

    def test_infinity_propagates(self, classes):
        rows = aggregate(classes, [make_entry("B", float("inf"))])

        assert rows[0].class_model.id == "B"
        assert rows[0].total == float("inf")
        assert rows[0].plus == float("inf")

    def test_exact_sum_overflow_follows_ieee(self):
        """Hors de la plage des flottants : ±inf, jamais d'exception."""
        assert exact_sum([10 ** 400, 0.5]) == math.inf
        assert exact_sum([-10 ** 400, 0.5]) == -math.inf
        assert exact_sum([1e308, 1e308]) == math.inf
        assert math.isnan(exact_sum([math.inf, -math.inf]))

    def test_huge_integer_entry(self, classes):
        rows = aggregate(classes, [make_entry("C", 10 ** 400), make_entry("C", 0.5)])

        assert rows[0].class_model.id == "C"
        assert rows[0].total == math.inf


class TestConfig:
    def test_custom_base_score(self, classes):
        aggregator = RankingAggregator(ScoringConfig(base_score=50))
        rows = aggregator.aggregate(classes, [make_entry("A", 5)])

        assert rows[0].total == 55
        assert rows[1].total == 50

    def test_aggregate_weeks(self, classes):
        """Classement restreint à une sélection de semaines."""
        entries = [
            make_entry("A", 10, week_id="W1"),
            make_entry("B", 3, week_id="W2"),
            make_entry("A", -20, week_id="W2"),
        ]
        rows = RankingAggregator().aggregate_weeks(classes, entries, ["W2"])

        assert [(r.class_model.id, r.total) for r in rows] == [("B", 103), ("C", 100), ("A", 80)]

    def test_invalid_rank_method(self):
        with pytest.raises(ValueError):
            ScoringConfig(rank_method="dense")

    def test_from_mapping(self):
        config = ScoringConfig.from_mapping({"baseScore": 80, "topN": 3})

        assert config.base_score == 80
        assert config.top_n == 3
        assert config.rank_method == "ordinal"

    @pytest.mark.parametrize("top_n", [2.7, None, "3", True])
    def test_from_mapping_rejects_non_integral_top_n(self, top_n):
        """topN n'est jamais tronqué silencieusement."""
        with pytest.raises(ValueError, match="topN"):
            ScoringConfig.from_mapping({"topN": top_n})

    def test_from_mapping_integral_float(self):
        assert ScoringConfig.from_mapping({"topN": 3.0}).top_n == 3

    @pytest.mark.parametrize("base_score", [float("nan"), float("inf"), float("-inf"), "100", None])
    def test_invalid_base_score(self, base_score):
        with pytest.raises(ValueError, match="base_score"):
            ScoringConfig(base_score=base_score)
