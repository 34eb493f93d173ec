"""Tests for slurp/grim region capture."""

import subprocess
from pathlib import Path

import pytest
from PIL import Image

from trein import capture
from trein.exceptions import ExternalToolError, SelectionCancelledError


def _completed(args, returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)


class TestSelectRegion:

    def test_returns_trimmed_geometry(self, monkeypatch):
        calls = []

        def fake_run(args, **kwargs):
            calls.append(args)
            return _completed(args, stdout="10,20 300x120\n")

        monkeypatch.setattr(capture.subprocess, "run", fake_run)

        assert capture.select_region() == "10,20 300x120"
        assert calls == [["slurp", "-f", "%x,%y %wx%h"]]

    def test_missing_tool(self, monkeypatch):
        def fake_run(args, **kwargs):
            raise FileNotFoundError(2, "No such file or directory", "slurp")

        monkeypatch.setattr(capture.subprocess, "run", fake_run)

        with pytest.raises(ExternalToolError, match="is it installed") as exc_info:
            capture.select_region()
        assert exc_info.value.tool == "slurp"

    def test_cancelled(self, monkeypatch):
        monkeypatch.setattr(
            capture.subprocess, "run",
            lambda args, **kw: _completed(args, returncode=1, stderr="selection cancelled"),
        )
        with pytest.raises(SelectionCancelledError, match="cancelled"):
            capture.select_region()

    def test_empty_geometry(self, monkeypatch):
        monkeypatch.setattr(
            capture.subprocess, "run", lambda args, **kw: _completed(args, stdout="  \n")
        )
        with pytest.raises(ExternalToolError, match="No selection geometry"):
            capture.select_region()


def _fake_grim(calls, size=(64, 32)):
    def fake_run(args, **kwargs):
        calls.append(args)
        Image.new("RGB", size, "white").save(args[-1])
        return _completed(args)
    return fake_run


class TestCaptureRegion:

    def test_writes_png_and_cleans_up(self, monkeypatch):
        calls = []
        monkeypatch.setattr(capture.subprocess, "run", _fake_grim(calls))

        with capture.capture_region("10,20 64x32") as image:
            assert image.path.exists()
            assert image.path.name == "capture.png"
            assert (image.width, image.height) == (64, 32)
            tmpdir = image.path.parent

        assert calls == [["grim", "-g", "10,20 64x32", str(image.path)]]
        assert not tmpdir.exists()

    def test_fresh_directory_per_call(self, monkeypatch):
        monkeypatch.setattr(capture.subprocess, "run", _fake_grim([]))

        with capture.capture_region("0,0 1x1") as first:
            with capture.capture_region("0,0 1x1") as second:
                assert first.path.parent != second.path.parent

    def test_cleans_up_when_consumer_fails(self, monkeypatch):
        monkeypatch.setattr(capture.subprocess, "run", _fake_grim([]))
        seen = {}

        with pytest.raises(RuntimeError):
            with capture.capture_region("0,0 5x5") as image:
                seen["dir"] = image.path.parent
                raise RuntimeError("ocr blew up")

        assert not seen["dir"].exists()

    def test_missing_tool(self, monkeypatch):
        def fake_run(args, **kwargs):
            raise FileNotFoundError(2, "No such file or directory", "grim")

        monkeypatch.setattr(capture.subprocess, "run", fake_run)

        with pytest.raises(ExternalToolError, match="grim") as exc_info:
            with capture.capture_region("0,0 5x5"):
                pass
        assert exc_info.value.tool == "grim"

    def test_non_zero_exit(self, monkeypatch):
        monkeypatch.setattr(
            capture.subprocess, "run",
            lambda args, **kw: _completed(args, returncode=1, stderr="invalid geometry"),
        )
        with pytest.raises(ExternalToolError, match="invalid geometry"):
            with capture.capture_region("garbage"):
                pass

    def test_unreadable_output(self, monkeypatch):
        def fake_run(args, **kwargs):
            Path(args[-1]).write_bytes(b"not a png")
            return _completed(args)

        monkeypatch.setattr(capture.subprocess, "run", fake_run)

        with pytest.raises(ExternalToolError, match="readable image"):
            with capture.capture_region("0,0 5x5"):
                pass
