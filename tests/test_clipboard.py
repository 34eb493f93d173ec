"""Tests for the best-effort clipboard copy."""

import logging
import subprocess

import pyperclip

from trein import clipboard


def test_missing_wl_copy_is_not_an_error(monkeypatch, caplog):
    monkeypatch.setattr(clipboard.shutil, "which", lambda name: None)
    copied = []
    monkeypatch.setattr(clipboard.pyperclip, "copy", copied.append)

    with caplog.at_level(logging.WARNING, logger="trein"):
        assert clipboard.copy_to_clipboard("Bonjour") is False

    assert copied == []
    assert "wl-copy not found" in caplog.text


def test_copies_with_wl_clipboard_backend(monkeypatch):
    monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/wl-copy")
    backends, copied = [], []
    monkeypatch.setattr(clipboard.pyperclip, "set_clipboard", backends.append)
    monkeypatch.setattr(clipboard.pyperclip, "copy", copied.append)

    assert clipboard.copy_to_clipboard("Bonjour") is True
    assert backends == ["wl-clipboard"]
    assert copied == ["Bonjour"]


def test_pyperclip_failure_is_downgraded(monkeypatch, caplog):
    monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/wl-copy")
    monkeypatch.setattr(clipboard.pyperclip, "set_clipboard", lambda name: None)

    def boom(text):
        raise pyperclip.PyperclipException("wl-copy exited with 1")

    monkeypatch.setattr(clipboard.pyperclip, "copy", boom)

    with caplog.at_level(logging.WARNING, logger="trein"):
        assert clipboard.copy_to_clipboard("Bonjour") is False
    assert "Could not copy" in caplog.text


def test_launch_failure_is_downgraded(monkeypatch):
    monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/wl-copy")
    monkeypatch.setattr(clipboard.pyperclip, "set_clipboard", lambda name: None)

    def boom(text):
        raise FileNotFoundError(2, "No such file or directory", "wl-copy")

    monkeypatch.setattr(clipboard.pyperclip, "copy", boom)
    assert clipboard.copy_to_clipboard("Bonjour") is False


def test_wl_copy_nonzero_exit_is_downgraded(monkeypatch, caplog):
    monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/wl-copy")
    monkeypatch.setattr(clipboard.pyperclip, "set_clipboard", lambda name: None)

    # pyperclip runs `wl-copy --clear` with check_call for empty text
    def boom(text):
        raise subprocess.CalledProcessError(1, ["wl-copy", "--clear"])

    monkeypatch.setattr(clipboard.pyperclip, "copy", boom)

    with caplog.at_level(logging.WARNING, logger="trein"):
        assert clipboard.maybe_copy_to_clipboard(True, "") is False
    assert "Could not copy" in caplog.text


def test_maybe_copy_skips_when_not_requested(monkeypatch):
    def fail(text):
        raise AssertionError("should not be called")

    monkeypatch.setattr(clipboard, "copy_to_clipboard", fail)
    assert clipboard.maybe_copy_to_clipboard(False, "Bonjour") is False
