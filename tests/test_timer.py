import unittest

from tetris_timer import TickTimer


class TickTimerTests(unittest.TestCase):
    def test_idle_until_started(self):
        timer = TickTimer(100)
        self.assertEqual(timer.advance(500), 0)

    def test_accumulates_partial_periods(self):
        timer = TickTimer(100)
        timer.start()
        self.assertEqual(timer.advance(40), 0)
        self.assertEqual(timer.advance(70), 1)
        self.assertEqual(timer.advance(290), 3)
        self.assertEqual(timer.advance(0), 0)

    def test_stop_is_final(self):
        timer = TickTimer(100)
        timer.start()
        timer.advance(50)
        timer.stop()
        self.assertFalse(timer.running)
        self.assertEqual(timer.advance(1000), 0)
        timer.stop()
        self.assertTrue(timer.stopped)
        with self.assertRaises(RuntimeError):
            timer.start()


if __name__ == "__main__":
    unittest.main()
