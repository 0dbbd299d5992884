import contextlib
import io
import itertools
import random
import unittest

from autograde.app import explain
from autograde.grading.check import check_answer, check_defined, validate
from autograde.grading.messages import MessageKind
from autograde.grading.question import Question
from autograde.grading.tracker import ProgressTracker
from autograde.grading.truth import MISSING, InvalidTruthValue, Truth, all_of, any_of, to_truths


class CheckAnswerScenarioTests(unittest.TestCase):
    def test_session_walkthrough(self) -> None:
        t = ProgressTracker("Ada", "ada@example.org")

        msg = check_answer(t, True, True)
        self.assertEqual(msg.kind, MessageKind.CORRECT)
        self.assertEqual((t.correct, t.total), (1, 1))

        msg = check_answer(t, True, False)
        self.assertEqual(msg.kind, MessageKind.PARTIALLY_CORRECT)
        self.assertEqual((t.correct, t.total), (1, 2))

        msg = check_answer(t, MISSING)
        self.assertEqual(msg.kind, MessageKind.STILL_MISSING)
        self.assertEqual((t.correct, t.total), (1, 3))

        msg = check_answer(t, False, False)
        self.assertEqual(msg.kind, MessageKind.KEEP_WORKING)
        self.assertEqual((t.correct, t.total), (1, 4))

    def test_false_beats_missing(self) -> None:
        t = ProgressTracker("Ada", "ada@example.org")
        self.assertEqual(check_answer(t, False, MISSING).kind, MessageKind.KEEP_WORKING)
        self.assertEqual(check_answer(t, True, False, MISSING).kind, MessageKind.PARTIALLY_CORRECT)
        self.assertEqual(check_answer(t, True, MISSING).kind, MessageKind.STILL_MISSING)
        self.assertEqual((t.correct, t.total), (0, 3))

    def test_invalid_input_leaves_tracker_untouched(self) -> None:
        t = ProgressTracker("Ada", "ada@example.org")
        with self.assertRaises(InvalidTruthValue):
            check_answer(t, True, None)
        with self.assertRaises(InvalidTruthValue):
            check_answer(t)
        with self.assertRaises(InvalidTruthValue):
            validate(Question(), t)
        self.assertEqual((t.correct, t.total), (0, 0))

    def test_seeded_rng_gives_same_encouragement(self) -> None:
        a = check_answer(ProgressTracker("A", "a@x"), True, rng=random.Random(3))
        b = check_answer(ProgressTracker("B", "b@x"), True, rng=random.Random(3))
        self.assertEqual(a.text, b.text)


class CheckAnswerPropertyTests(unittest.TestCase):
    """Every combination of up to three checks follows the decision order."""

    def test_all_combinations(self) -> None:
        values = [True, False, MISSING]
        for n in (1, 2, 3):
            for combo in itertools.product(values, repeat=n):
                with self.subTest(combo=combo):
                    t = ProgressTracker("Ada", "ada@example.org", correct=2, total=5)
                    msg = check_answer(t, *combo)
                    truths = to_truths(combo)
                    conj = all_of(truths)
                    disj = any_of(truths)

                    self.assertEqual(t.total, 6)
                    if conj is Truth.UNKNOWN:
                        self.assertEqual(msg.kind, MessageKind.STILL_MISSING)
                        self.assertEqual(t.correct, 2)
                    elif conj is Truth.FALSE and disj is Truth.TRUE:
                        self.assertEqual(msg.kind, MessageKind.PARTIALLY_CORRECT)
                        self.assertEqual(t.correct, 2)
                    elif conj is Truth.FALSE:
                        self.assertEqual(msg.kind, MessageKind.KEEP_WORKING)
                        self.assertEqual(t.correct, 2)
                    else:
                        self.assertEqual(msg.kind, MessageKind.CORRECT)
                        self.assertEqual(t.correct, 3)


class ValidateTests(unittest.TestCase):
    def test_status_updated_and_question_returned(self) -> None:
        t = ProgressTracker("Ada", "ada@example.org")
        q = Question(title="Clamp", description="Write myclamp(x).")
        self.assertEqual(q.status.kind, MessageKind.STILL_MISSING)

        self.assertIs(validate(q, t, True, False), q)
        self.assertEqual(q.status.kind, MessageKind.PARTIALLY_CORRECT)

        self.assertIs(validate(q, t, False), q)
        self.assertEqual(q.status.kind, MessageKind.KEEP_WORKING)

        self.assertIs(validate(q, t, True, True), q)
        self.assertEqual(q.status.kind, MessageKind.CORRECT)
        self.assertEqual((t.correct, t.total), (1, 3))


class CheckDefinedTests(unittest.TestCase):
    def test_missing_name(self) -> None:
        msg = check_defined({"x": 1}, "myclamp")
        self.assertIsNotNone(msg)
        self.assertEqual(msg.kind, MessageKind.NOT_DEFINED)

    def test_defined_name(self) -> None:
        self.assertIsNone(check_defined({"myclamp": abs}, "myclamp"))


class ExplainTraceTests(unittest.TestCase):
    def tearDown(self) -> None:
        explain.enable(False)

    def test_trace_line(self) -> None:
        explain.enable(True)
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            check_answer(ProgressTracker("Ada", "ada@example.org"), True, False)
        out = buf.getvalue()
        self.assertIn("[EXPLAIN] graded ::", out)
        self.assertIn('"kind":"partially_correct"', out)

    def test_silent_by_default(self) -> None:
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            check_answer(ProgressTracker("Ada", "ada@example.org"), True)
        self.assertEqual(buf.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
