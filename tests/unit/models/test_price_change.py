from pricestats.models import PriceChange


class TestPriceChange:
    def test_named_fields(self):
        change = PriceChange(20, "2023-06-25", "2023-06-29")

        assert change.amount == 20
        assert change.start_date == "2023-06-25"
        assert change.end_date == "2023-06-29"

    def test_behaves_as_ordered_triple(self):
        amount, start, end = PriceChange(20, "2023-06-25", "2023-06-29")

        assert (amount, start, end) == (20, "2023-06-25", "2023-06-29")
        assert PriceChange(20, "2023-06-25", "2023-06-29") == (20, "2023-06-25", "2023-06-29")

    def test_str(self):
        assert str(PriceChange(7, "2023-07-01", "2023-07-06")) == "7 (2023-07-01 -> 2023-07-06)"
