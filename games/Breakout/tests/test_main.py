"""
Tests for the standalone entry point.

Tests cover:
- Command line parsing
- The session loop: restart after an outcome, --no-restart, quit
"""

from unittest import mock

import pytest

from games.Breakout import main as breakout_main
from games.Breakout.config import STARTING_LIVES
from games.Breakout.engine import SessionEnd


class TestParser:
    """Test command line parsing."""

    def test_defaults(self):
        args = breakout_main.build_parser().parse_args([])
        assert args.skin == 'classic'
        assert args.pacing == 'classic'
        assert args.lives == STARTING_LIVES
        assert args.width is None
        assert not args.fullscreen
        assert not args.no_restart

    def test_options(self):
        args = breakout_main.build_parser().parse_args(
            ['--skin', 'geometric', '--pacing', 'fast', '--lives', '5',
             '--width', '1024', '--height', '768', '--no-restart'])
        assert args.skin == 'geometric'
        assert args.pacing == 'fast'
        assert args.lives == 5
        assert (args.width, args.height) == (1024, 768)
        assert args.no_restart

    def test_unknown_pacing_rejected(self):
        with pytest.raises(SystemExit):
            breakout_main.build_parser().parse_args(['--pacing', 'ludicrous'])


class TestSessionLoop:
    """Test restart handling with a scripted driver."""

    def _run(self, ends, argv):
        with mock.patch.object(breakout_main, 'FrameDriver') as driver_cls:
            driver_cls.return_value.run.side_effect = list(ends)
            assert breakout_main.main(argv) == 0
            game = driver_cls.call_args[0][0]
            return driver_cls.return_value, game

    def test_restarts_after_outcome(self):
        with mock.patch.object(breakout_main.BreakoutMode, 'reset') as reset:
            driver, _ = self._run([SessionEnd.WON, SessionEnd.LOST, SessionEnd.QUIT], [])
        assert driver.run.call_count == 3
        assert reset.call_count == 2

    def test_no_restart_stops_after_outcome(self):
        with mock.patch.object(breakout_main.BreakoutMode, 'reset') as reset:
            driver, _ = self._run([SessionEnd.LOST], ['--no-restart'])
        assert driver.run.call_count == 1
        assert reset.call_count == 0

    def test_restart_key_restarts_even_with_no_restart(self):
        with mock.patch.object(breakout_main.BreakoutMode, 'reset') as reset:
            driver, _ = self._run([SessionEnd.RESTART, SessionEnd.QUIT], ['--no-restart'])
        assert driver.run.call_count == 2
        assert reset.call_count == 1

    def test_game_built_from_arguments(self):
        _, game = self._run([SessionEnd.QUIT], ['--lives', '5', '--width', '640', '--height', '480'])
        assert game.lives == 5
        assert game.settings.width == 640
        assert game.settings.height == 480


class TestInvalidSettings:
    """Test that bad options end in a usage error, not a traceback."""

    @pytest.mark.parametrize("lives", ['0', '-2', 'three'])
    def test_lives_must_be_positive(self, lives, capsys):
        with pytest.raises(SystemExit) as exc_info:
            breakout_main.build_parser().parse_args(['--lives', lives])
        assert exc_info.value.code == 2
        assert '--lives' in capsys.readouterr().err

    def test_screen_narrower_than_paddle(self, capsys):
        with mock.patch.object(breakout_main, 'FrameDriver') as driver_cls:
            with pytest.raises(SystemExit) as exc_info:
                breakout_main.main(['--width', '50'])
        assert exc_info.value.code == 2
        assert 'paddle_width' in capsys.readouterr().err
        driver_cls.assert_not_called()
