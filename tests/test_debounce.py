import unittest

from search_box.debounce import Debouncer


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, ms: float):
        self.now += ms / 1000.0


class DebouncerTests(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.deb = Debouncer(300, clock=self.clock)

    def test_settles_after_delay(self):
        self.deb.push("ap")
        self.clock.advance(299)
        self.assertIsNone(self.deb.poll())
        self.clock.advance(5)
        self.assertEqual(self.deb.poll(), "ap")
        self.assertIsNone(self.deb.poll())

    def test_new_push_restarts_window(self):
        self.deb.push("a")
        self.clock.advance(200)
        self.deb.push("ap")
        self.clock.advance(200)
        self.assertIsNone(self.deb.poll())
        self.clock.advance(150)
        self.assertEqual(self.deb.poll(), "ap")

    def test_empty_string_is_a_settled_value(self):
        self.deb.push("")
        self.clock.advance(301)
        self.assertEqual(self.deb.poll(), "")

    def test_flush_and_cancel(self):
        self.deb.push("x")
        self.assertTrue(self.deb.pending)
        self.assertEqual(self.deb.flush(), "x")
        self.assertFalse(self.deb.pending)
        self.deb.push("y")
        self.deb.cancel()
        self.clock.advance(1000)
        self.assertIsNone(self.deb.poll())


if __name__ == "__main__":
    unittest.main()
