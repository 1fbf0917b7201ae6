"""A document editor built from typed elements and a pluggable storage."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class DocumentElement(ABC):
    """A piece of a document that knows how to render itself."""

    @abstractmethod
    def render(self) -> str:
        """Return the element as text."""


@dataclass(frozen=True)
class TextElement(DocumentElement):
    """Plain text."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class ImageElement(DocumentElement):
    """An image, shown by its path."""

    image_path: str

    def render(self) -> str:
        return f"[Image: {self.image_path}]"


class NewLineElement(DocumentElement):
    """A line break."""

    def render(self) -> str:
        return "\n"


class TabSpaceElement(DocumentElement):
    """A tab space."""

    def render(self) -> str:
        return "\t"


@dataclass
class Document:
    """An ordered collection of elements."""

    elements: list[DocumentElement] = field(default_factory=list)

    def add_element(self, element: DocumentElement) -> None:
        self.elements.append(element)

    def render(self) -> str:
        return "".join(element.render() for element in self.elements)


class Persistence(ABC):
    """Somewhere a rendered document can be kept."""

    @abstractmethod
    def save(self, data: str) -> None:
        """Store ``data``."""


class FileStorage(Persistence):
    """Keeps a document in a text file."""

    def __init__(self, path: str = "document.txt") -> None:
        self.path = path

    def save(self, data: str) -> None:
        with open(self.path, "w", encoding="utf-8") as file:
            file.write(data)
        print(f"Document saved to {self.path}")


class DocumentEditor:
    """Adds elements to a document, renders it and hands it to storage."""

    def __init__(self, document: Document, storage: Persistence) -> None:
        self.document = document
        self.storage = storage
        self._rendered = ""

    def add_text(self, text: str) -> None:
        self.document.add_element(TextElement(text))

    def add_image(self, image_path: str) -> None:
        self.document.add_element(ImageElement(image_path))

    def add_new_line(self) -> None:
        self.document.add_element(NewLineElement())

    def add_tab_space(self) -> None:
        self.document.add_element(TabSpaceElement())

    def render_document(self) -> str:
        """Render the document; the first non-empty result is kept."""
        if not self._rendered:
            self._rendered = self.document.render()
        return self._rendered

    def save_document(self) -> None:
        self.storage.save(self.render_document())


_SAMPLE_EDITS = (
    ("add_text", "Hello, world!"),
    ("add_new_line",),
    ("add_text", "This is a real-world document editor example."),
    ("add_new_line",),
    ("add_tab_space",),
    ("add_text", "Indented text after a tab space."),
    ("add_new_line",),
    ("add_image", "picture.jpg"),
)


def main(argv: list[str] | None = None) -> int:
    """Build a formatted document, show it and save it to a file."""
    editor = DocumentEditor(Document(), FileStorage())
    for name, *args in _SAMPLE_EDITS:
        getattr(editor, name)(*args)

    print(editor.render_document())
    editor.save_document()
    return 0