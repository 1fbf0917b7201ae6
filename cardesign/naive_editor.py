"""A document editor that keeps every element as a plain string and guesses its kind."""

from __future__ import annotations

from dataclasses import dataclass, field

IMAGE_SUFFIXES = (".jpg", ".png")


@dataclass
class NaiveDocumentEditor:
    """Stores text and image paths alike and tells them apart by file suffix."""

    elements: list[str] = field(default_factory=list)
    _rendered: str = field(default="", repr=False)

    def add_text(self, text: str) -> None:
        self.elements.append(text)

    def add_image(self, image_path: str) -> None:
        self.elements.append(image_path)

    def render_document(self) -> str:
        """Render each element on its own line; the first non-empty result is kept."""
        if not self._rendered:
            self._rendered = "".join(
                f"[Image: {element}]\n"
                if len(element) > 4 and element.endswith(IMAGE_SUFFIXES)
                else f"{element}\n"
                for element in self.elements
            )
        return self._rendered

    def save_to_file(self, path: str = "document.txt") -> None:
        """Write the rendered document to ``path``."""
        with open(path, "w", encoding="utf-8") as file:
            file.write(self.render_document())
        print(f"Document saved to {path}")


def main(argv: list[str] | None = None) -> int:
    """Build a small document, show it and save it."""
    editor = NaiveDocumentEditor()
    editor.add_text("Hello, world!")
    editor.add_image("picture.jpg")
    editor.add_text("This is a document editor.")
    print(editor.render_document())
    editor.save_to_file()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())