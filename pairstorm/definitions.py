"""Helpers that read method declarations and build matching definitions."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

VALID_CLASS_NAME = re.compile(r"^[a-zA-Z_]+([_]?[a-zA-Z0-9])*$")
VALID_FUNCTION_DECLARATION = re.compile(
    r"^[ \t]*([^ \t\n]+)[ \t\n]+([^ \t\n]+)[ \t\n]*\(([^)]*)\)[ \t\n]*;[ \t]*$"
)
TEXT_INSIDE_BRACKETS = re.compile(r"(?<=\().+?(?=\))")
CLASS_FINDING = re.compile(r"^.*class +([_a-zA-Z][_a-zA-Z0-9]*).*$")
VARIABLE_FROM_PARAMETER = re.compile(r"^.* +(?:&|\*)*([_a-zA-Z][_a-zA-Z0-9]*)$")

HEADER_EXTENSION = ".h"
SOURCE_EXTENSION = ".cpp"

DEFINITION_EXISTS_TITLE = "Cannot add definition"
DEFINITION_EXISTS_MESSAGE = "Definition already exists!"
DEFINITION_CREATED_TITLE = "Successfull creation"
DEFINITION_CREATED_MESSAGE = "Definition was successfully created!"


@dataclass(frozen=True)
class MethodDefinitionPattern:
    """The parts of a one-line method declaration."""

    data_type: str
    name: str
    parameters: str


def remove_extension(text: str, extension_length: int) -> str:
    """Drop the last ``extension_length`` characters of ``text``."""
    if extension_length <= 0:
        return text
    return text[: max(len(text) - extension_length, 0)]


def create_method_definition_bones(
    data_type: str, class_name: str, method_name: str, method_params: str
) -> str:
    """An empty method body for the given signature parts."""
    prefix = data_type + (" " if data_type else "")
    scope = class_name + ("::" if class_name else "")
    return f"{prefix}{scope}{method_name}({method_params})\n{{\n\n}}"


def create_file_path(root_path: str, file_name: str) -> str:
    return f"{root_path}/{file_name}"


def _line_at(lines: Sequence[str], line_number: int) -> str:
    if not 0 <= line_number < len(lines):
        raise IndexError(f"line {line_number} is outside the document")
    return lines[line_number]


def get_class_name_for_method_definition(lines: Sequence[str], line_number: int) -> str:
    """Name of the class enclosing ``line_number``, or '' when none is found.

    Lines are searched upwards from ``line_number``; the first line of the
    document is never considered, and ``friend class`` lines are skipped.
    """
    _line_at(lines, line_number)
    for number in range(line_number, 0, -1):
        text = lines[number]
        if "class" in text and "friend" not in text:
            match = CLASS_FINDING.search(text)
            return match.group(1) if match else ""
    return ""


def is_valid_method_initialization(line: str) -> bool:
    """True when ``line`` is a single-line declaration such as ``int f(int a);``."""
    return VALID_FUNCTION_DECLARATION.search(line) is not None


def get_method_definition_pattern(definition: str) -> MethodDefinitionPattern:
    """Split a declaration into type, name and parameters; ValueError if it is not one."""
    match = VALID_FUNCTION_DECLARATION.search(definition)
    if match is None:
        raise ValueError(f"not a method declaration: {definition!r}")
    return MethodDefinitionPattern(*match.group(1, 2, 3))


def get_method_definition_name(lines: Sequence[str], line_number: int) -> str:
    """``type Class::name`` (or ``type name`` outside a class) for the declaration."""
    parts = get_method_definition_pattern(_line_at(lines, line_number))
    class_name = get_class_name_for_method_definition(lines, line_number)
    scope = class_name + ("::" if class_name else "")
    return f"{parts.data_type} {scope}{parts.name}"


def definition_exists(source_text: str, lines: Sequence[str], line_number: int) -> bool:
    """True when ``source_text`` already defines the method declared at ``line_number``."""
    header_line = _line_at(lines, line_number)
    full_name = get_method_definition_name(lines, line_number)
    header_params = get_raw_parameters_inside_brackets(
        get_parameters_from_method_definition(header_line)
    )
    return any(
        full_name in line
        and get_raw_parameters_inside_brackets(get_parameters_from_method_definition(line))
        == header_params
        for line in source_text.split("\n")
        if line
    )


def is_file_with_extension(file_name: str, extension: str) -> bool:
    """True when the text after the last dot of ``file_name`` equals ``extension``."""
    parts = file_name.split(".")
    return len(parts) > 1 and parts[-1] == extension


def get_parameters_from_method_definition(definition: str) -> str:
    """The text between the first pair of round brackets, or ''."""
    match = TEXT_INSIDE_BRACKETS.search(definition)
    return match.group(0) if match else ""


def get_raw_parameters_inside_brackets(text: str) -> str:
    """Parameter types with variable names and all spaces removed, run together."""
    pieces = []
    for parameter in remove_commas_inside_angle_brackets(text).split(","):
        if not parameter:
            continue
        parameter = " ".join(parameter.split())
        match = VARIABLE_FROM_PARAMETER.search(parameter)
        if match:
            start, end = match.span(1)
            whole = match.group(0)
            pieces.append(whole[:start] + whole[end:])
        else:
            pieces.append(parameter)
    return "".join(pieces).replace(" ", "")


def remove_commas_inside_angle_brackets(parameters: str) -> str:
    """Replace commas inside angle brackets with spaces."""
    depth = 0
    result = []
    for char in parameters:
        if char == ">":
            depth += 1
        elif char == "<":
            depth -= 1
        elif char == "," and depth:
            char = " "
        result.append(char)
    return "".join(result)