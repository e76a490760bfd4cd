import unittest
from unittest.mock import MagicMock

import requests

from crossword_engine.data.dictionary import DEFAULT_WORD_BANK
from crossword_engine.data.theme import (
    GeminiThemeWordSource,
    StaticThemeWordSource,
    ThemeWord,
    UserWordListSource,
    merge_theme_sources,
)
from crossword_engine.io.gemini_client import GeminiAPIError, GeminiClient


class StaticThemeWordSourceTests(unittest.TestCase):
    def test_draws_from_bank_with_clues(self) -> None:
        source = StaticThemeWordSource(seed=1)
        words = source.words("anything", limit=5)
        self.assertEqual(len(words), 5)
        bank = dict(DEFAULT_WORD_BANK)
        for entry in words:
            self.assertEqual(entry.clue, bank[entry.word])
            self.assertEqual(entry.source, "bank")

    def test_same_seed_same_draw(self) -> None:
        first = StaticThemeWordSource(seed=4).words("", limit=6)
        second = StaticThemeWordSource(seed=4).words("", limit=6)
        self.assertEqual([w.word for w in first], [w.word for w in second])


class UserWordListSourceTests(unittest.TestCase):
    def test_parses_words_and_clues(self) -> None:
        source = UserWordListSource(["stack:LIFO", "# skip", "", "Queue"])
        words = source.words("", limit=10)
        self.assertEqual(
            words,
            [ThemeWord("STACK", "LIFO", "user"), ThemeWord("QUEUE", "", "user")],
        )

    def test_respects_limit(self) -> None:
        source = UserWordListSource(["A1", "B2", "C3"])
        self.assertEqual(len(source.words("", limit=2)), 2)


class GeminiThemeWordSourceTests(unittest.TestCase):
    def test_parse_response_skips_noise(self) -> None:
        text = "\n".join(
            [
                "```json",
                '{"word": "Recursion"}',
                "not json",
                '{"word": "big-o"},',
                '{"clue": "missing word"}',
                '["WORD"]',
                "```",
            ]
        )
        words = GeminiThemeWordSource.parse_response(text)
        self.assertEqual([w.word for w in words], ["RECURSION", "BIGO"])
        self.assertTrue(all(w.clue == "" and w.source == "gemini" for w in words))

    def test_words_uses_client_and_limit(self) -> None:
        client = MagicMock()
        client.generate_text.return_value = '{"word": "GRAPH"}\n{"word": "TRIE"}\n{"word": "HEAP"}'
        source = GeminiThemeWordSource(client)
        words = source.words("data structures", limit=2)
        self.assertEqual([w.word for w in words], ["GRAPH", "TRIE"])
        prompt = client.generate_text.call_args[0][0]
        self.assertIn("data structures", prompt)


class MergeThemeSourcesTests(unittest.TestCase):
    def test_primary_then_fallback_without_duplicates(self) -> None:
        primary = UserWordListSource(["STACK", "TREE"])
        fallback = MagicMock()
        fallback.words.return_value = [ThemeWord("tree"), ThemeWord("HEAP"), ThemeWord("SORT")]
        merged = merge_theme_sources(primary, [fallback], "theme", target=3)
        self.assertEqual([w.word for w in merged], ["STACK", "TREE", "HEAP"])

    def test_failing_source_is_skipped(self) -> None:
        broken = MagicMock()
        broken.words.side_effect = GeminiAPIError("boom")
        backup = UserWordListSource(["HASH"])
        with self.assertLogs("crossword_engine.data.theme", level="WARNING"):
            merged = merge_theme_sources(None, [broken, backup], "theme", target=2)
        self.assertEqual([w.word for w in merged], ["HASH"])

    def test_full_primary_skips_fallbacks(self) -> None:
        fallback = MagicMock()
        merge_theme_sources(UserWordListSource(["STACK"]), [fallback], "", target=1)
        fallback.words.assert_not_called()


class GeminiClientTests(unittest.TestCase):
    def test_missing_key_raises(self) -> None:
        with self.assertRaises(GeminiAPIError):
            GeminiClient(api_key=None, api_key_env="CROSSWORD_ENGINE_TEST_UNSET_KEY")

    def test_generate_text_posts_prompt(self) -> None:
        session = MagicMock()
        session.post.return_value.json.return_value = {
            "candidates": [{"content": {"parts": [{"text": '{"word": "TREE"}'}]}}]
        }
        client = GeminiClient(api_key="k", session=session)
        self.assertEqual(client.generate_text("hello"), '{"word": "TREE"}')
        _, kwargs = session.post.call_args
        self.assertEqual(kwargs["params"], {"key": "k"})
        self.assertEqual(kwargs["json"]["contents"][0]["parts"][0]["text"], "hello")

    def test_generate_text_wraps_request_errors(self) -> None:
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("offline")
        client = GeminiClient(api_key="k", session=session)
        with self.assertRaises(GeminiAPIError):
            client.generate_text("hello")

    def test_generate_text_without_candidates_raises(self) -> None:
        session = MagicMock()
        session.post.return_value.json.return_value = {"candidates": []}
        client = GeminiClient(api_key="k", session=session)
        with self.assertRaises(GeminiAPIError):
            client.generate_text("hello")

    def test_request_body_carries_generation_config(self) -> None:
        client = GeminiClient(api_key="k", temperature=0.2, max_output_tokens=64, session=MagicMock())
        body = client.request_body("words please")
        self.assertEqual(body["generationConfig"], {"temperature": 0.2, "maxOutputTokens": 64})

    def test_extract_text_joins_parts(self) -> None:
        payload = {"candidates": [{"content": {"parts": [{"text": "TR"}, {"text": "EE"}]}}]}
        self.assertEqual(GeminiClient.extract_text(payload), "TREE")
        self.assertIsNone(GeminiClient.extract_text({}))

    def test_finish_reason(self) -> None:
        self.assertEqual(GeminiClient.finish_reason({"candidates": [{"finishReason": "SAFETY"}]}), "SAFETY")
        self.assertEqual(
            GeminiClient.finish_reason({"promptFeedback": {"blockReason": "OTHER"}}), "OTHER"
        )
        self.assertEqual(GeminiClient.finish_reason({}), "NO_CANDIDATES")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
