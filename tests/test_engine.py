import unittest

from lateral_trend.lateral.engine import (
    Strategy,
    find_longest_lateral_trend,
    validate_prices,
    validate_threshold,
)
from lateral_trend.lateral.errors import (
    EmptyInputError,
    InvalidThresholdError,
    LateralTrendError,
    NonPositivePriceError,
)


class TestStrategyParse(unittest.TestCase):
    def test_accepts_values_and_aliases(self):
        self.assertIs(Strategy.parse("exhaustive"), Strategy.EXHAUSTIVE)
        self.assertIs(Strategy.parse("brute"), Strategy.EXHAUSTIVE)
        self.assertIs(Strategy.parse("divide-and-conquer"), Strategy.DIVIDE_AND_CONQUER)
        self.assertIs(Strategy.parse(" Divide_And_Conquer "), Strategy.DIVIDE_AND_CONQUER)
        self.assertIs(Strategy.parse(Strategy.EXHAUSTIVE), Strategy.EXHAUSTIVE)

    def test_rejects_unknown(self):
        with self.assertRaises(ValueError) as ctx:
            Strategy.parse("sliding-window")
        self.assertIn("sliding-window", str(ctx.exception))


class TestValidation(unittest.TestCase):
    def test_threshold(self):
        self.assertEqual(validate_threshold(0), 0.0)
        self.assertEqual(validate_threshold("2.5"), 2.5)
        for bad in (-0.1, float("nan"), "abc", None):
            with self.assertRaises(InvalidThresholdError):
                validate_threshold(bad)

    def test_prices(self):
        validate_prices([1, 2, 3])
        with self.assertRaises(EmptyInputError):
            validate_prices([])
        with self.assertRaises(NonPositivePriceError) as ctx:
            validate_prices([100, 0, 100])
        self.assertEqual(ctx.exception.index, 1)
        with self.assertRaises(NonPositivePriceError):
            validate_prices([100, -5])

    def test_errors_are_value_errors(self):
        for cls in (EmptyInputError, InvalidThresholdError, NonPositivePriceError):
            self.assertTrue(issubclass(cls, LateralTrendError))
            self.assertTrue(issubclass(cls, ValueError))


class TestFindLongestLateralTrend(unittest.TestCase):
    def test_scenarios_for_both_strategies(self):
        for strategy in Strategy:
            with self.subTest(strategy=strategy.value):
                w = find_longest_lateral_trend([100, 101, 102, 100], 5.0, strategy)
                self.assertEqual((w.start, w.end), (0, 3))

                w = find_longest_lateral_trend([100, 200, 100, 100], 5.0, strategy)
                self.assertEqual((w.start, w.end), (2, 3))

                with self.assertRaises(EmptyInputError):
                    find_longest_lateral_trend([], 5.0, strategy)

                w = find_longest_lateral_trend([1234], 5.0, strategy)
                self.assertEqual((w.start, w.end), (0, 0))

                w = find_longest_lateral_trend([100, 110, 120, 130], 0.0, strategy)
                self.assertEqual(w.length, 1)

    def test_default_threshold_is_five_percent(self):
        self.assertEqual(find_longest_lateral_trend([100, 105]).length, 2)
        self.assertEqual(find_longest_lateral_trend([100, 106]).length, 1)

    def test_threshold_checked_before_prices(self):
        with self.assertRaises(InvalidThresholdError):
            find_longest_lateral_trend([], -1.0)

    def test_non_positive_price_rejected(self):
        with self.assertRaises(NonPositivePriceError):
            find_longest_lateral_trend([100, 100, 0], 5.0, "exhaustive")

    def test_logs_result(self):
        with self.assertLogs("lateral_search", level="INFO") as logs:
            find_longest_lateral_trend([100, 101], 5.0, "exhaustive")
        self.assertTrue(any("strategy=exhaustive" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
