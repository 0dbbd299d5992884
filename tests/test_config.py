import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from autograde.config.config import DEFAULT_ENCOURAGEMENTS, load_config, messages_config, validate_config
from autograde.grading.messages import correct


class ConfigTests(unittest.TestCase):
    def test_package_defaults(self) -> None:
        cfg = validate_config(load_config())
        self.assertEqual(cfg["messages"]["correct"]["title"], "Got it!")
        self.assertIn("Well done!", cfg["encouragements"])
        self.assertIn("{correct}", cfg["tracker"]["summary_template"])

    def test_fills_missing_sections(self) -> None:
        cfg = validate_config({})
        self.assertEqual(cfg["messages"]["hint"]["title"], "Hint")
        self.assertEqual(cfg["messages"]["keep_working"]["text"], "The answer is not quite right.")
        self.assertEqual(cfg["encouragements"], DEFAULT_ENCOURAGEMENTS)

    def test_repairs_bad_values(self) -> None:
        raw = {
            "messages": {"bogus": {"title": "x"}, "hint": {"category": "purple"}, "fyi": None},
            "encouragements": ["", "  "],
        }
        with contextlib.redirect_stdout(io.StringIO()) as out:
            cfg = validate_config(raw)
        self.assertNotIn("bogus", cfg["messages"])
        self.assertEqual(cfg["messages"]["hint"]["category"], "hint")
        self.assertEqual(cfg["messages"]["fyi"]["title"], "Additional info")
        self.assertEqual(cfg["encouragements"], DEFAULT_ENCOURAGEMENTS)
        self.assertIn("WARNING", out.getvalue())

    def test_scalar_message_section_is_replaced(self) -> None:
        with contextlib.redirect_stdout(io.StringIO()) as out:
            cfg = validate_config({"messages": {"hint": "x", "bomb": ["a"]}})
        self.assertEqual(cfg["messages"]["hint"]["title"], "Hint")
        self.assertEqual(cfg["messages"]["bomb"]["category"], "bomb")
        self.assertIn("must be a mapping", out.getvalue())

    def test_shared_messages_config_is_read_only(self) -> None:
        cfg = messages_config()
        with self.assertRaises(TypeError):
            cfg["messages"]["correct"]["title"] = "Changed"  # type: ignore[index]
        with self.assertRaises(TypeError):
            cfg["encouragements"][0] = "Changed"  # type: ignore[index]
        self.assertEqual(correct("ok").title, "Got it!")

    def test_load_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "course.yml"
            p.write_text("encouragements:\n  - Bravo!\n", encoding="utf-8")
            cfg = validate_config(load_config(str(p)))
        self.assertEqual(cfg["encouragements"], ["Bravo!"])

    def test_missing_file_exits(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                load_config("/nonexistent/course.yml")


if __name__ == "__main__":
    unittest.main()
