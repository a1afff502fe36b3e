from __future__ import annotations

from typing import Any, Dict, List, Tuple

from dashboard.core.sample_data import build_word_lists
from dashboard.core.viewmodels import StatisticsViewModel
from dashboard.ui import components
from dashboard.ui.components import render_image, render_statistics_sheet, resolve_image_path


class _RecordingContainer:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...], Dict[str, Any]]] = []

    def image(self, *args: Any, **kwargs: Any) -> None:
        self.calls.append(("image", args, kwargs))

    def markdown(self, *args: Any, **kwargs: Any) -> None:
        self.calls.append(("markdown", args, kwargs))


def test_resolve_image_path_prefers_known_extensions(tmp_path) -> None:
    (tmp_path / "image1.jpg").write_bytes(b"jpg")
    (tmp_path / "image1.png").write_bytes(b"png")
    (tmp_path / "image2.gif").write_bytes(b"gif")

    assert resolve_image_path("image1", tmp_path) == tmp_path / "image1.png"
    assert resolve_image_path("image2", tmp_path) is None
    assert resolve_image_path("image3", tmp_path) is None
    assert resolve_image_path("", tmp_path) is None


def test_resolve_image_path_missing_directory(tmp_path) -> None:
    assert resolve_image_path("image1", tmp_path / "missing") is None


def test_render_image_fills_container_width(tmp_path) -> None:
    (tmp_path / "image1.png").write_bytes(b"png")
    container = _RecordingContainer()

    render_image("image1", tmp_path, container=container)

    assert container.calls == [("image", (str(tmp_path / "image1.png"),), {"use_container_width": True})]


def test_render_image_missing_file_renders_placeholder(tmp_path) -> None:
    container = _RecordingContainer()

    render_image("image<9>", tmp_path, container=container, height=64)

    assert len(container.calls) == 1
    kind, args, kwargs = container.calls[0]
    assert kind == "markdown"
    assert "height:64px" in args[0]
    assert "image&lt;9&gt;" in args[0]
    assert kwargs == {"unsafe_allow_html": True}


def test_render_statistics_sheet_opens_dialog(monkeypatch) -> None:
    opened: List[str] = []

    def fake_dialog(title: str):
        def decorator(func):
            def open_dialog() -> None:
                opened.append(title)

            return open_dialog

        return decorator

    monkeypatch.setattr(components.st, "dialog", fake_dialog)

    render_statistics_sheet(StatisticsViewModel(build_word_lists()))

    assert opened == ["List Statistics"]
