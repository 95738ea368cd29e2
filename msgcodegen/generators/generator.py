# SPDX-License-Identifier: MIT
"""Generator protocol for source generation.

Generators take one input file and produce one generated source
module from it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Generator(Protocol):
    """Protocol for source generators.

    A Generator reads an input file and writes a generated module.
    The caller decides which inputs need generating and what to do
    when one of them fails.
    """

    @property
    def name(self) -> str:
        """Generator name (e.g., 'msgcodes')."""
        ...

    @property
    def input_suffix(self) -> str:
        """Suffix of the input files this generator consumes (e.g., '.csv')."""
        ...

    @property
    def output_suffix(self) -> str:
        """Suffix of the files this generator writes (e.g., '.py')."""
        ...

    def generate(self, input_path: Path, output_path: Path) -> None:
        """Generate one module.

        Args:
            input_path: The file to generate from.
            output_path: The file to write, replacing any existing content.
        """
        ...


class BaseGenerator:
    """Base class for generators with common functionality."""

    input_suffix = ""
    output_suffix = ".py"

    def __init__(self, name: str) -> None:
        """Initialize a generator.

        Args:
            name: Generator name.
        """
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def module_name(self, input_path: Path | str) -> str:
        """Name of the module generated from input_path."""
        name = Path(input_path).name
        if self.input_suffix and name.endswith(self.input_suffix):
            return name[: -len(self.input_suffix)]
        return name

    def output_path(self, input_path: Path | str, output_dir: Path | str) -> Path:
        """Path of the module generated from input_path inside output_dir."""
        return Path(output_dir) / (self.module_name(input_path) + self.output_suffix)

    def generate(self, input_path: Path, output_path: Path) -> None:
        """Generate one module. Subclasses must implement."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
