"""Generation of a header and source file pair for a new class."""

from __future__ import annotations

import os
from pathlib import Path

from .definitions import (
    HEADER_EXTENSION,
    SOURCE_EXTENSION,
    VALID_CLASS_NAME,
    create_file_path,
    create_method_definition_bones,
    remove_extension,
)
from .signals import Signal

SUCCESS_CREATION_TITLE = "Successful created"
SUCCESS_CREATION_MESSAGE = "The class was successfully created!"
NON_SUCCESS_CREATION_TITLE = "Forbidden creation"
NON_SUCCESS_CREATION_MESSAGE = "The class name is not correct!"


class InvalidClassName(ValueError):
    """The requested class name is not a valid identifier."""


class ClassGenerator:
    """Builds and writes the skeleton header and source of a class."""

    def __init__(
        self,
        project_path: str | os.PathLike[str],
        class_name: str,
        header_name: str | None = None,
        source_name: str | None = None,
    ) -> None:
        self.project_path = os.fspath(project_path)
        self.class_name = class_name
        self.header_name = header_name if header_name is not None else class_name + HEADER_EXTENSION
        self.source_name = source_name if source_name is not None else class_name + SOURCE_EXTENSION
        self.files_created = Signal()

    @property
    def header_path(self) -> str:
        return create_file_path(self.project_path, self.header_name)

    @property
    def source_path(self) -> str:
        return create_file_path(self.project_path, self.source_name)

    def is_valid_class_name(self) -> bool:
        return VALID_CLASS_NAME.search(self.class_name) is not None

    def header_macro_name(self) -> str:
        return (remove_extension(self.header_name, len(HEADER_EXTENSION)) + "_H").upper()

    def class_bones(self) -> str:
        name = self.class_name
        return f"\nclass {name}\n{{\npublic:\n\t{name}();\n}};\n"

    def header_text(self) -> str:
        macro = self.header_macro_name()
        return f"#ifndef {macro}\n#define {macro}\n{self.class_bones()}\n#endif // {macro}"

    def source_text(self) -> str:
        bones = create_method_definition_bones("", self.class_name, self.class_name, "")
        return f'#include "{self.header_name}"\n\n{bones}'

    def create_files(self) -> tuple[str, str]:
        """Write both files and return their paths; InvalidClassName for a bad name."""
        if not self.is_valid_class_name():
            raise InvalidClassName(NON_SUCCESS_CREATION_MESSAGE)
        header_path, source_path = self.header_path, self.source_path
        Path(header_path).write_text(self.header_text(), encoding="utf-8", newline="")
        Path(source_path).write_text(self.source_text(), encoding="utf-8", newline="")
        self.files_created.emit(header_path, source_path)
        return header_path, source_path