import unittest
from averse.logic.search.fuzzy import fuzzy_filter, fuzzy_score


class TestFuzzy(unittest.TestCase):

    def test_empty_query_matches_everything(self):
        self.assertEqual(fuzzy_score("", "anything"), 0)
        self.assertEqual(fuzzy_filter("", ["b", "a"]), [(0, "b"), (1, "a")])

    def test_subsequence_required(self):
        self.assertIsNone(fuzzy_score("xyz", "Beef Chili"))
        self.assertIsNotNone(fuzzy_score("bfch", "Beef Chili"))

    def test_case_insensitive(self):
        self.assertEqual(fuzzy_score("CHILI", "beef chili"), fuzzy_score("chili", "Beef Chili"))

    def test_consecutive_and_word_start_rank_higher(self):
        results = fuzzy_filter("chili", ["Chicken Lime", "Pancakes", "Beef Chili"])
        self.assertEqual([c for _, c in results], ["Beef Chili", "Chicken Lime"])
        self.assertEqual(results[0][0], 2)

    def test_tags_in_summary_are_searchable(self):
        summaries = ["Beef Chili -- soup, mealprep", "Pancakes -- breakfast"]
        self.assertEqual(fuzzy_filter("breakfast", summaries), [(1, "Pancakes -- breakfast")])


if __name__ == '__main__':
    unittest.main()
