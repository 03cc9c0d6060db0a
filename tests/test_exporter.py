import pytest

from hackasm.exporter import export, to_hack_file_name


def test_export_file_with_content(tmp_path):
    content = b"1110000000000000"
    path = export("Test.hack", tmp_path, content)
    assert path == tmp_path / "Test.hack"
    assert (tmp_path / "Test.hack").read_bytes() == content


def test_export_creates_directory(tmp_path):
    subdir = tmp_path / "nested" / "dir"
    content = b"1010101010101010"
    export("output.hack", subdir, content)
    full_path = subdir / "output.hack"
    assert full_path.is_file()
    assert full_path.read_bytes() == content


def test_export_replaces_asm_extension(tmp_path):
    export("Prog.asm", tmp_path, b"0000000000000001\n")
    assert (tmp_path / "Prog.hack").read_bytes() == b"0000000000000001\n"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Add.asm", "Add.hack"),
        ("Test.hack", "Test.hack"),
        ("noext", "noext.hack"),
        ("a.b.asm", "a.b.asm.hack"),
    ],
)
def test_to_hack_file_name(name, expected):
    assert to_hack_file_name(name) == expected