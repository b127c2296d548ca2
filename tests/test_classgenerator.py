from pathlib import Path

import pytest

from pairstorm.classgenerator import (
    NON_SUCCESS_CREATION_MESSAGE,
    ClassGenerator,
    InvalidClassName,
)


def test_default_file_names(tmp_path):
    generator = ClassGenerator(tmp_path, "Widget")
    assert generator.header_name == "Widget" + ".h"
    assert generator.source_name == "Widget" + ".cpp"


@pytest.mark.parametrize("name", ["Widget", "_private", "My_Class2", "a"])
def test_valid_class_names(tmp_path, name):
    assert ClassGenerator(tmp_path, name).is_valid_class_name()


@pytest.mark.parametrize("name", ["2Bad", "has space", "", "bad-name"])
def test_invalid_class_names(tmp_path, name):
    assert not ClassGenerator(tmp_path, name).is_valid_class_name()


def test_header_macro_name(tmp_path):
    assert ClassGenerator(tmp_path, "Widget").header_macro_name() == "WIDGET_H"


def test_class_bones(tmp_path):
    bones = ClassGenerator(tmp_path, "Widget").class_bones()
    assert bones.startswith("\nclass Widget\n")
    assert "public:\n\tWidget();\n" in bones
    assert bones.endswith("};\n")


def test_header_text_structure(tmp_path):
    generator = ClassGenerator(tmp_path, "Widget")
    macro = generator.header_macro_name()
    text = generator.header_text()
    assert text.startswith(f"#ifndef {macro}\n#define {macro}\n")
    assert text.endswith(f"#endif // {macro}")
    assert generator.class_bones() in text


def test_source_text(tmp_path):
    text = ClassGenerator(tmp_path, "Widget").source_text()
    assert text == '#include "Widget.h"\n\nWidget::Widget()\n{\n\n}'


def test_create_files_writes_both(tmp_path):
    generator = ClassGenerator(tmp_path, "Widget")
    received = []
    generator.files_created.connect(lambda header, source: received.append((header, source)))

    header_path, source_path = generator.create_files()

    assert Path(header_path).read_text(encoding="utf-8") == generator.header_text()
    assert Path(source_path).read_text(encoding="utf-8") == generator.source_text()
    assert Path(header_path).parent == tmp_path
    assert received == [(header_path, source_path)]


def test_create_files_with_custom_names(tmp_path):
    generator = ClassGenerator(tmp_path, "Widget", "custom.h", "custom.cpp")
    header_path, source_path = generator.create_files()
    assert Path(header_path).name == "custom.h"
    assert Path(source_path).name == "custom.cpp"
    assert '#include "custom.h"' in Path(source_path).read_text(encoding="utf-8")


def test_create_files_rejects_invalid_name(tmp_path):
    generator = ClassGenerator(tmp_path, "9lives")
    with pytest.raises(InvalidClassName, match=NON_SUCCESS_CREATION_MESSAGE):
        generator.create_files()
    assert list(tmp_path.iterdir()) == []