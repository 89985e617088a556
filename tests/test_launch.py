"""Tests for terminal and clipboard helpers."""

from unittest.mock import MagicMock, patch

from ccswitch.launch import (
    copy_to_clipboard,
    detect_terminal,
    launch_assistant,
    open_terminal,
)


class TestDetectTerminal:
    @patch("ccswitch.launch.shutil.which")
    def test_first_available_wins(self, mock_which):
        mock_which.side_effect = lambda name: "/usr/bin/konsole" if name in ("konsole", "xterm") else None
        assert detect_terminal() == "konsole"

    @patch("ccswitch.launch.shutil.which", return_value=None)
    def test_none_available(self, mock_which):
        assert detect_terminal() is None


class TestOpenTerminal:
    @patch("ccswitch.launch.subprocess.Popen")
    @patch("ccswitch.launch.detect_terminal", return_value="gnome-terminal")
    @patch("ccswitch.launch.platform.system", return_value="Linux")
    def test_linux_gnome(self, mock_system, mock_detect, mock_popen):
        assert open_terminal("/abs/site") == "gnome-terminal"
        cmd = mock_popen.call_args[0][0]
        assert cmd[0] == "gnome-terminal"
        assert "--working-directory=/abs/site" in cmd

    @patch("ccswitch.launch.subprocess.Popen")
    @patch("ccswitch.launch.detect_terminal", return_value=None)
    @patch("ccswitch.launch.platform.system", return_value="Linux")
    def test_linux_without_terminal(self, mock_system, mock_detect, mock_popen):
        assert open_terminal("/abs/site") is None
        mock_popen.assert_not_called()

    @patch("ccswitch.launch.subprocess.Popen")
    @patch("ccswitch.launch.platform.system", return_value="Darwin")
    def test_macos_uses_osascript(self, mock_system, mock_popen):
        assert open_terminal("/abs/site", "claude") == "Terminal"
        cmd = mock_popen.call_args[0][0]
        assert cmd[0] == "osascript"
        assert "claude" in cmd[2]

    @patch("ccswitch.launch.subprocess.Popen")
    @patch("ccswitch.launch.platform.system", return_value="Windows")
    def test_windows_uses_cmd(self, mock_system, mock_popen):
        assert open_terminal("C:\\code\\site", "claude") == "cmd.exe"
        assert "cmd.exe /k" in mock_popen.call_args[0][0]
        assert mock_popen.call_args[1]["shell"] is True


class TestLaunchAssistant:
    @patch("ccswitch.launch.subprocess.Popen")
    @patch("ccswitch.launch.detect_terminal", return_value="xterm")
    @patch("ccswitch.launch.platform.system", return_value="Linux")
    def test_runs_claude(self, mock_system, mock_detect, mock_popen):
        assert launch_assistant("/abs/site") == "xterm"
        cmd = mock_popen.call_args[0][0]
        assert "claude" in cmd[-1]
        assert "/abs/site" in cmd[-1]


class TestClipboard:
    @patch("ccswitch.launch.subprocess.run")
    @patch("ccswitch.launch.shutil.which")
    def test_uses_first_tool_found(self, mock_which, mock_run):
        mock_which.side_effect = lambda name: "/usr/bin/xclip" if name == "xclip" else None
        mock_run.return_value = MagicMock(returncode=0)
        assert copy_to_clipboard("/abs/site") is True
        assert mock_run.call_args[0][0][0] == "xclip"
        assert mock_run.call_args[1]["input"] == "/abs/site"

    @patch("ccswitch.launch.shutil.which", return_value=None)
    def test_no_tool(self, mock_which):
        assert copy_to_clipboard("/abs/site") is False
