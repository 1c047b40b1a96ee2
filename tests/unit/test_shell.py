"""
Tests for the console session, driven by scripted input.
"""

import pytest

from filter_studio.core.data_types import Color, ImageBuffer
from filter_studio.core.registry import FilterRegistry
from filter_studio.shell import ConsoleSession


pytestmark = pytest.mark.usefixtures("builtin_filters")


class ScriptedConsole:
    """Feeds queued answers to the session and records its output."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.lines = []

    def input(self, prompt):
        self.lines.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def output(self, text):
        self.lines.append(text)

    @property
    def text(self):
        return "\n".join(self.lines)


def make_session(tmp_path, answers, image=None, names=("blur", "rgb_split")):
    console = ScriptedConsole(answers)
    session = ConsoleSession(
        registry=FilterRegistry.from_names(names),
        image=image if image is not None else ImageBuffer.filled(3, 3, Color(10, 20, 30)),
        output_directory=tmp_path / "out",
        filter_names=list(names),
        image_label="sample.png",
        input_fn=console.input,
        output_fn=console.output,
    )
    return session, console


class TestChooseFilter:
    """Tests for filter selection."""

    def test_lists_applicable_filters(self, tmp_path):
        session, console = make_session(tmp_path, ["1"])
        f = session.choose_filter()
        assert str(f) == "Blur"
        assert " 1 Blur" in console.lines
        assert " 2 Rgb split" in console.lines

    def test_translucent_image_hides_rgb_split(self, tmp_path):
        image = ImageBuffer.empty(2, 2, has_translucency=True)
        session, console = make_session(tmp_path, ["2", "1"], image=image)
        f = session.choose_filter()
        assert str(f) == "Blur"
        assert " 2 Rgb split" not in console.lines
        assert "The filter is not valid for this image type." in console.lines

    def test_unknown_id_reprompts(self, tmp_path):
        session, console = make_session(tmp_path, ["9", "abc", "2"])
        f = session.choose_filter()
        assert str(f) == "Rgb split"
        assert "Filter id not found: 9" in console.lines
        assert "Please select a filter number." in console.lines

    def test_preselected_id(self, tmp_path):
        session, console = make_session(tmp_path, [])
        assert str(session.choose_filter("2")) == "Rgb split"

    def test_quit(self, tmp_path):
        session, _ = make_session(tmp_path, ["q"])
        assert session.choose_filter() is None
        assert session.quit_requested is True

    def test_nothing_applicable(self, tmp_path):
        image = ImageBuffer.empty(2, 2, has_translucency=True)
        session, console = make_session(tmp_path, [], image=image, names=("rgb_split",))
        assert session.choose_filter() is None
        assert session.quit_requested is True
        assert "No loaded filter is applicable to this image." in console.lines


class TestPromptParameters:
    """Tests for parameter entry."""

    def test_blank_keeps_default(self, tmp_path):
        session, console = make_session(tmp_path, ["", "3"])
        f = session.registry.get(1)
        session.prompt_parameters(f)
        assert f.get_parameter("radius", int) == 1
        assert f.get_parameter("weight", int) == 3
        assert "No value informed, will use default value if available." in console.lines
        assert "Parsed value is: 3" in console.lines

    def test_unparsable_value_reprompts(self, tmp_path):
        session, console = make_session(tmp_path, ["two", "2", ""])
        f = session.registry.get(1)
        session.prompt_parameters(f)
        assert f.get_parameter("radius", int) == 2
        assert "The value 'two' couldn't be parsed." in console.lines

    def test_channel_value(self, tmp_path):
        session, console = make_session(tmp_path, ["green"])
        f = session.registry.get(2)
        session.prompt_parameters(f)
        assert str(f.parameter_values()["channel"]) == "Green"
        assert "Parsed value is: Green" in console.lines


class TestRunOnce:
    """Tests for a full select/prompt/apply/save round."""

    def test_saves_output(self, tmp_path):
        session, console = make_session(tmp_path, ["2", "Red"])
        path = session.run_once()
        assert path is not None and path.exists()
        assert path.parent == tmp_path / "out"
        assert f"Output saved at {path}" in console.lines
        assert "Image: sample.png" in console.lines
        # the session image is left untouched
        assert session.image.get_pixel(0, 0) == Color(10, 20, 30)

    def test_missing_channel_reports_error(self, tmp_path):
        session, console = make_session(tmp_path, ["2", ""])
        assert session.run_once() is None
        assert any(line.startswith("Wrong argument error:") for line in console.lines)
        assert not (tmp_path / "out").exists()

    def test_invalid_blur_argument(self, tmp_path):
        session, console = make_session(tmp_path, ["1", "-2", ""])
        assert session.run_once() is None
        assert "radius" in console.text

    def test_reload_drops_previous_values(self, tmp_path):
        session, _ = make_session(tmp_path, ["1", "3", "", "q"])
        session.run_once()
        first = session.registry.get(1)
        session.run_once()
        assert session.registry.get(1) is not first
        assert session.registry.get(1).get_parameter("radius", int) == 1


class TestRun:
    """Tests for the session loop."""

    def test_loops_until_quit(self, tmp_path):
        session, _ = make_session(tmp_path, ["", "", "2", "Blue", "q"])
        session.run("1")
        assert session.quit_requested is True
        assert len(list((tmp_path / "out").glob("*.png"))) == 2

    def test_stops_at_end_of_input(self, tmp_path):
        session, _ = make_session(tmp_path, ["1", "", ""])
        session.run()
        assert len(list((tmp_path / "out").glob("*.png"))) == 1
