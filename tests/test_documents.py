import pytest

from cardesign.documents import (
    Document,
    DocumentEditor,
    DocumentElement,
    FileStorage,
    ImageElement,
    NewLineElement,
    Persistence,
    TabSpaceElement,
    TextElement,
    main,
)


class _MemoryStorage(Persistence):
    def __init__(self):
        self.saved = []

    def save(self, data):
        self.saved.append(data)


def _editor():
    storage = _MemoryStorage()
    return DocumentEditor(Document(), storage), storage


@pytest.mark.parametrize(
    "element, expected",
    [
        (TextElement("Hello"), "Hello"),
        (ImageElement("picture.jpg"), "[Image: picture.jpg]"),
        (NewLineElement(), "\n"),
        (TabSpaceElement(), "\t"),
    ],
)
def test_element_render(element, expected):
    assert element.render() == expected


def test_abstract_bases_cannot_be_built():
    with pytest.raises(TypeError):
        DocumentElement()
    with pytest.raises(TypeError):
        Persistence()


def test_document_concatenates_in_order():
    document = Document()
    parts = [TextElement("a"), TabSpaceElement(), TextElement("b"), NewLineElement()]
    for part in parts:
        document.add_element(part)
    assert document.render() == "".join(part.render() for part in parts)
    assert document.elements == parts


def test_editor_renders_example_document():
    editor, _ = _editor()
    editor.add_text("Hello, world!")
    editor.add_new_line()
    editor.add_tab_space()
    editor.add_text("Indented text after a tab space.")
    editor.add_new_line()
    editor.add_image("picture.jpg")
    assert editor.render_document() == (
        "Hello, world!\n\tIndented text after a tab space.\n[Image: picture.jpg]"
    )


def test_editor_render_is_cached():
    editor, _ = _editor()
    editor.add_text("first")
    first = editor.render_document()
    editor.add_text("second")
    assert editor.render_document() == first


def test_empty_render_is_not_cached():
    editor, _ = _editor()
    assert editor.render_document() == ""
    editor.add_text("later")
    assert editor.render_document() == "later"


def test_save_document_hands_render_to_storage():
    editor, storage = _editor()
    editor.add_text("Hello")
    editor.add_image("photo.png")
    editor.save_document()
    assert storage.saved == [editor.render_document()]


def test_file_storage_writes_file(tmp_path, capsys):
    target = tmp_path / "out.txt"
    FileStorage(str(target)).save("body\ttext\n")
    assert target.read_text(encoding="utf-8") == "body\ttext\n"
    assert capsys.readouterr().out.strip() == f"Document saved to {target}"


def test_file_storage_missing_directory_raises(tmp_path):
    storage = FileStorage(str(tmp_path / "missing" / "out.txt"))
    with pytest.raises(FileNotFoundError):
        storage.save("data")


def test_main_writes_document(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    saved = (tmp_path / "document.txt").read_text(encoding="utf-8")
    assert saved.startswith("Hello, world!\n")
    assert saved.endswith("[Image: picture.jpg]")
    assert "Document saved to document.txt" in capsys.readouterr().out