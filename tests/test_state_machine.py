"""
Unit tests for the mode state machine

Tests state_machine.py transitions, exit handling and state lifetimes
"""

import tempfile
import unittest
from motionlab.data.sensor_data import SensorSample
from motionlab.modes.base import KeySnapshot, Mode, TickInput
from motionlab.state_machine import AppState, ModeStateMachine
from motionlab.storage.preferences import Preferences


def make_tick(now_ms=0, keys=(), accel=(0.0, 0.0, 1.0)):
    return TickInput(SensorSample(accel=accel), KeySnapshot(keys), now_ms)


class StateMachineTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.prefs = Preferences("motion-lab", self.tmp.name)
        self.state = AppState.create(self.prefs, seed=42)
        self.machine = ModeStateMachine(self.state)

    def tearDown(self):
        self.tmp.cleanup()

    def enter(self, key):
        """Go from splash to the menu, then pick a mode"""
        self.machine.tick(make_tick(0))
        self.machine.tick(make_tick(2001))
        self.machine.tick(make_tick(2100, keys=(key,)))


class TestSplashAndMenu(StateMachineTestCase):
    """Test start-up transitions"""

    def test_initial_mode_is_splash(self):
        """Test the machine starts on the splash screen"""
        self.assertEqual(self.machine.current, Mode.SPLASH)

    def test_splash_waits_two_seconds(self):
        """Test splash -> menu only after 2000ms have elapsed"""
        self.machine.tick(make_tick(500))
        self.machine.tick(make_tick(2500))
        self.assertEqual(self.machine.current, Mode.SPLASH)

        self.machine.tick(make_tick(2501))
        self.assertEqual(self.machine.current, Mode.MENU)

    def test_splash_ignores_exit_keys(self):
        """Test exit keys only apply to visualization modes"""
        frame = self.machine.tick(make_tick(0, keys=("BACKSPACE",)))

        self.assertEqual(self.machine.current, Mode.SPLASH)
        self.assertIn("Motion Lab", frame.texts())

    def test_menu_keys(self):
        """Test each menu key selects its mode"""
        expected = {
            "1": Mode.CUBE, "2": Mode.LEVEL, "3": Mode.GAME,
            "4": Mode.LAUNCH, "5": Mode.GRAPH, "6": Mode.RAW,
        }
        for key, mode in expected.items():
            machine = ModeStateMachine(self.state, initial=Mode.MENU)
            machine.tick(make_tick(0, keys=(key,)))
            self.assertEqual(machine.current, mode)

    def test_menu_priority_order(self):
        """Test the lowest-numbered key wins when several are held"""
        machine = ModeStateMachine(self.state, initial=Mode.MENU)
        machine.tick(make_tick(0, keys=("5", "2")))

        self.assertEqual(machine.current, Mode.LEVEL)

    def test_menu_without_key_stays(self):
        """Test menu keeps showing the list"""
        machine = ModeStateMachine(self.state, initial=Mode.MENU)
        frame = machine.tick(make_tick(0, keys=("x",)))

        self.assertEqual(machine.current, Mode.MENU)
        self.assertIn("IMU Demo Menu", frame.texts())
        self.assertIn("6. Raw Viewer", frame.texts())


class TestExit(StateMachineTestCase):
    """Test leaving visualization modes"""

    def test_exit_keys_return_to_menu(self):
        """Test both exit keys, from every visualization mode"""
        for exit_key in ("BACKSPACE", "DELETE"):
            for key in "123456":
                machine = ModeStateMachine(self.state, initial=Mode.MENU)
                machine.tick(make_tick(0, keys=(key,)))
                self.assertNotEqual(machine.current, Mode.MENU)

                frame = machine.tick(make_tick(10, keys=(exit_key,)))
                self.assertIsNone(frame)
                self.assertEqual(machine.current, Mode.MENU)

    def test_exit_checked_before_mode_logic(self):
        """Test the exit tick does not run the mode (no peak recorded)"""
        self.enter("4")
        self.assertEqual(self.machine.current, Mode.LAUNCH)

        self.machine.tick(make_tick(3000, keys=("DELETE",), accel=(0.0, 0.0, 4.0)))

        self.assertEqual(self.state.peaks.all_time_high_g, 0.0)

    def test_held_menu_key_after_exit(self):
        """Test a key held across ticks re-enters idempotently"""
        self.enter("2")
        self.machine.tick(make_tick(2200, keys=("BACKSPACE",)))
        self.machine.tick(make_tick(2300, keys=("2",)))
        self.machine.tick(make_tick(2400, keys=("2",)))

        self.assertEqual(self.machine.current, Mode.LEVEL)


class TestStateLifetimes(StateMachineTestCase):
    """Test which state survives re-entry"""

    def test_zoom_survives_cube_sessions(self):
        """Test zoom is process-lifetime state"""
        self.enter("1")
        self.assertEqual(self.state.zoom.scale, 90.0)
        for t in range(10):
            self.machine.tick(make_tick(3000 + t, keys=("+",)))
        self.assertEqual(self.state.zoom.scale, 110.0)

        self.machine.tick(make_tick(4000, keys=("BACKSPACE",)))
        self.machine.tick(make_tick(4100, keys=("1",)))
        self.machine.tick(make_tick(4200))

        self.assertEqual(self.machine.current, Mode.CUBE)
        self.assertEqual(self.state.zoom.scale, 110.0)

    def test_game_restarts_on_reentry(self):
        """Test ball recentred and goal cleared after exit and re-entry"""
        self.enter("3")
        self.machine.tick(make_tick(3000, accel=(1.0, 0.0, 0.0)))
        game = self.machine.active
        self.assertNotEqual(game.state.ball_pos, (120.0, 67.0))

        self.machine.tick(make_tick(3100, keys=("DELETE",)))
        self.machine.tick(make_tick(3200, keys=("3",)))

        fresh = self.machine.active
        self.assertIsNot(fresh, game)
        self.assertTrue(fresh.state.first_run)
        self.assertIsNone(fresh.state.goal_pos)

    def test_peak_record_shared_with_launch_mode(self):
        """Test the G-force meter uses the application tracker"""
        self.enter("4")
        self.machine.tick(make_tick(3000, accel=(0.0, 0.0, 2.0)))

        self.assertEqual(self.state.peaks.all_time_high_g, 2.0)
        self.assertEqual(Preferences("motion-lab", self.tmp.name).get_float("highG"), 2.0)

    def test_transitions_are_logged(self):
        """Test every transition is reported at INFO"""
        with self.assertLogs("motionlab.state_machine", level="INFO") as logs:
            self.enter("6")

        self.assertEqual(len(logs.records), 2)
        self.assertIn("SPLASH -> MENU", logs.output[0])
        self.assertIn("MENU -> RAW", logs.output[1])


if __name__ == '__main__':
    unittest.main()
