import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

import main


class CliTests(unittest.TestCase):
    def test_parse_words_file_skips_comments_and_keeps_ids(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "words.txt"
            path.write_text("# animals\ncat\n\n42\tdog\n", encoding="utf-8")
            entries = main.parse_words_file(path, "p")
        self.assertEqual([(e.id, e.value) for e in entries], [("p1", "cat"), ("42", "dog")])

    def test_writes_json_board(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "board.json"
            code = main.main(
                ["--words", "cat", "dog", "--size", "small", "--seed", "5", "--output", str(output),
                 "--log-level", "WARNING"]
            )
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(code, 0)
        self.assertEqual(payload["rows"], 5)
        self.assertEqual(payload["cols"], 5)
        self.assertEqual(sorted(w["value"] for w in payload["words"]), ["CAT", "DOG"])

    def test_pretty_output(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            main.main(["--words", "sun", "--pretty", "--seed", "1", "--log-level", "WARNING"])
        text = buffer.getvalue()
        self.assertIn("--- Words ---", text)
        self.assertIn("SUN", text)

    def test_requires_some_words(self) -> None:
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit):
            main.main(["--log-level", "WARNING"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
