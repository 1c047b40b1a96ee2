"""
Console Session - Interactive filter selection and parameter entry.

One round of the session:
1. List the loaded filters applicable to the image
2. Read a filter id
3. Prompt for each declared parameter (blank keeps the default)
4. Run the filter and save the result
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from filter_studio.core.data_types import ImageBuffer
from filter_studio.core.errors import FilterIdNotFoundError, ParameterError
from filter_studio.core.execution import run_filter
from filter_studio.core.filter_types import Filter
from filter_studio.core.registry import FilterRegistry
from filter_studio.core.value_parser import example_input, parse_value
from filter_studio.image_io import save_image

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")


class ConsoleSession:
    """
    Text-based front end over a FilterRegistry.

    Input and output go through `input_fn` / `output_fn` so the session
    can be driven by tests.
    """

    def __init__(
        self,
        registry: FilterRegistry,
        image: ImageBuffer,
        output_directory: Path,
        filter_names: Iterable[str] | None = None,
        image_label: str = "",
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.registry = registry
        self.image = image
        self.output_directory = Path(output_directory)
        self.filter_names = list(filter_names) if filter_names is not None else None
        self.image_label = image_label
        self._input = input_fn
        self._output = output_fn
        self.quit_requested = False

    # -------------------------------------------------------------------------
    # Filter selection
    # -------------------------------------------------------------------------

    def _validate_choice(self, text: str) -> Filter | None:
        """Filter for a typed id, or None after reporting why not."""
        try:
            filter_id = int(text.strip())
        except ValueError:
            self._output("Please select a filter number.")
            return None

        try:
            f = self.registry.get(filter_id)
        except FilterIdNotFoundError as e:
            self._output(str(e))
            return None

        if not f.is_applicable(self.image):
            self._output("The filter is not valid for this image type.")
            return None
        return f

    def choose_filter(self, filter_id: str | None = None) -> Filter | None:
        """
        Select a filter, prompting until a valid id is entered.

        Returns:
            The chosen filter, or None if the user quits (quit_requested
            is then set)
        """
        if filter_id is not None:
            f = self._validate_choice(filter_id)
            if f is not None:
                return f

        applicable = self.registry.filters_for_image(self.image)
        if not applicable:
            self._output("No loaded filter is applicable to this image.")
            self.quit_requested = True
            return None

        while True:
            self._output("Available filters:")
            for fid, f in applicable:
                self._output(f" {fid} {f}")
            text = self._input("Filter number (q to quit): ")
            if text.strip().lower() in QUIT_COMMANDS:
                self.quit_requested = True
                return None
            f = self._validate_choice(text)
            if f is not None:
                return f

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    def prompt_parameters(self, f: Filter) -> None:
        """Ask for every declared parameter; blank input keeps the default."""
        for definition in f.schema:
            while True:
                self._output(
                    f"   Type the '{definition.name}' value ({definition.param_type.type_name}) "
                    "and press return. Insert a blank value to not choose a value for this parameter."
                )
                self._output(f"   Example: {example_input(definition.param_type)}")
                text = self._input("   > ")
                if not text.strip():
                    value = None
                    break
                value = parse_value(definition.param_type, text)
                if value is not None:
                    break
                self._output(f"The value '{text}' couldn't be parsed.")

            if value is None:
                self._output("No value informed, will use default value if available.")
                continue
            f.set_parameter(definition.name, value)
            self._output(f"Parsed value is: {value}")

    # -------------------------------------------------------------------------
    # Rounds
    # -------------------------------------------------------------------------

    def run_once(self, filter_id: str | None = None) -> Path | None:
        """
        Run one select/prompt/apply/save round.

        Returns:
            Path of the saved result, or None if nothing was saved
        """
        if self.filter_names is not None:
            self.registry.load(self.filter_names)

        if self.image_label:
            self._output(f"Image: {self.image_label}")

        f = self.choose_filter(filter_id)
        if f is None:
            return None

        self._output(f"Selected filter: {f}")
        self.prompt_parameters(f)

        self._output("Processing image...")
        try:
            result = run_filter(f, self.image)
        except (ParameterError, ValueError) as e:
            logger.warning("Filter %s failed: %s", f, e)
            self._output(f"Wrong argument error: {e}")
            return None

        try:
            path = save_image(result.output, self.output_directory)
        except OSError as e:
            logger.error("Could not write output to %s: %s", self.output_directory, e)
            self._output(f"Directory {self.output_directory} can't be written; output file not written.")
            return None

        self._output(f"Output saved at {path}")
        return path

    def run(self, filter_id: str | None = None) -> None:
        """Repeat rounds until the user quits or input ends."""
        self.quit_requested = False
        while not self.quit_requested:
            try:
                self.run_once(filter_id)
            except EOFError:
                self._output("")
                return
            filter_id = None
