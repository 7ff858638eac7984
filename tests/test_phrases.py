import unittest

from stl_cli_renderer.phrases import ART, generate_art, is_valid_prompt, word_count


class PhraseTests(unittest.TestCase):
    def test_known_object(self) -> None:
        self.assertEqual(generate_art("a rubber duck"), ART["duck"])
        self.assertEqual(generate_art("My RED Car"), ART["car"])

    def test_first_table_entry_wins(self) -> None:
        self.assertEqual(generate_art("cat chasing a duck"), ART["duck"])

    def test_placeholder(self) -> None:
        art = generate_art("purple spaceship thing")
        self.assertIn("PURPLE S", art)
        self.assertIn("Processing...", art)

    def test_word_limits(self) -> None:
        self.assertEqual(word_count("  one   two "), 2)
        self.assertFalse(is_valid_prompt("one"))
        self.assertTrue(is_valid_prompt("one two"))
        self.assertTrue(is_valid_prompt("a b c d e"))
        self.assertFalse(is_valid_prompt("a b c d e f"))


if __name__ == "__main__":
    unittest.main()
