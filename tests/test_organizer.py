import unittest
from datetime import date, datetime, timezone

from airing.errors import DecodeError
from airing.organizer import organize_by_day, resolve_title, to_show_info
from tests.helpers import DAY, HOUR, MAY_1, record


class TestOrganizer(unittest.TestCase):
    def test_title_falls_back_to_romaji(self):
        self.assertEqual(resolve_title(record(MAY_1, english="", romaji="Foo")), "Foo")

    def test_title_prefers_english(self):
        self.assertEqual(resolve_title(record(MAY_1, english="Bar", romaji="Baz")), "Bar")

    def test_show_info_uses_utc_instant(self):
        show = to_show_info(record(MAY_1 + 15 * HOUR + 4 * 60, episode=7, english="Bar", score=64))
        self.assertEqual(show.title, "Bar")
        self.assertEqual(show.episode, 7)
        self.assertEqual(show.average_score, 64)
        self.assertEqual(show.airing_time, datetime(2024, 5, 1, 15, 4, tzinfo=timezone.utc))

    def test_empty_input_yields_empty_mapping(self):
        self.assertEqual(organize_by_day([]), {})

    def test_every_show_lands_in_its_utc_day(self):
        records = [record(MAY_1 + offset) for offset in (
            3 * DAY - 1, 2 * DAY + 5 * HOUR, 2 * DAY, DAY + 23 * HOUR, DAY, 12 * HOUR, 0,
        )]

        buckets = organize_by_day(records)

        self.assertEqual(sum(len(shows) for shows in buckets.values()), len(records))
        self.assertEqual(set(buckets), {date(2024, 5, 1), date(2024, 5, 2), date(2024, 5, 3)})
        for day, shows in buckets.items():
            for show in shows:
                self.assertEqual(show.airing_time.date(), day)

    def test_same_day_keeps_input_order(self):
        records = [
            record(MAY_1 + 20 * HOUR, english="Late"),
            record(MAY_1 + 10 * HOUR, english="Middle"),
            record(MAY_1 + 1 * HOUR, english="Early"),
        ]

        buckets = organize_by_day(records)

        self.assertEqual([s.title for s in buckets[date(2024, 5, 1)]], ["Late", "Middle", "Early"])

    def test_order_is_not_resorted_even_when_ascending(self):
        records = [record(MAY_1 + 1 * HOUR, english="A"), record(MAY_1 + 9 * HOUR, english="B")]
        self.assertEqual([s.title for s in organize_by_day(records)[date(2024, 5, 1)]], ["A", "B"])

    def test_unrepresentable_airing_time_raises_decode_error(self):
        with self.assertRaises(DecodeError) as ctx:
            organize_by_day([record(99999999999999999)])
        self.assertIn("airingAt out of range", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
