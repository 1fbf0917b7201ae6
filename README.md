# cardesign

A set of small, self-contained examples of object-oriented design in Python.
Each module models one idea and has a demonstration you can run.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## The modules

| Module | What it shows |
| --- | --- |
| `cardesign.abstraction` | An abstract `Car` with a concrete `SportCar` behind it |
| `cardesign.encapsulation` | A `SportCar` whose `engine` can only be replaced through `install_engine` |
| `cardesign.inheritance` | `ManualCar` and `ElectricCar` sharing the behaviour of a base `Car` |
| `cardesign.polymorphism` | Subclasses overriding `accelerate`, with an optional full-throttle mode |
| `cardesign.fleet` | An abstract car whose `accelerate` and `brake` differ per kind of car |
| `cardesign.manual_car` | One `ManualCar` that accelerates by a default or a chosen amount |
| `cardesign.naive_editor` | `NaiveDocumentEditor`, which guesses element types from strings |
| `cardesign.documents` | `DocumentEditor` built from separate elements, a `Document` and a `Persistence` back end |

## Cars

The car classes write what they do to a text stream given as `out`; when it
is left out, messages go to standard output. Pass a `StringIO` to capture them:

```python
import sys
from cardesign.fleet import ElectricCar

car = ElectricCar("Tesla", "Model S", out=sys.stdout)
car.start_engine()
car.accelerate()      # +15 km/h, battery -10
car.accelerate(30)    # +30 km/h, battery -40
car.brake()           # -15 km/h, never below zero
car.stop_engine()
```

A few points worth knowing:

- `abstraction.SportCar` refuses `current_speed`, `accelerate`, `apply_brake`
  and `stop` with a message while its engine is off. `accelerate` and
  `apply_brake` report the resulting velocity without changing `velocity`.
- `encapsulation.SportCar.install_engine(sentence)` accepts a new engine only
  if the word `Lamborgini` appears in it; otherwise it raises `ValueError`
  and the `engine` property keeps its old value.
- In `cardesign.inheritance` and `cardesign.polymorphism`, `ManualCar` and
  `ElectricCar` take the model before the brand: `ManualCar(model, brand, out=None)`.
- `polymorphism.ManualCar.accelerate(full=False)` adds 20 km/h, or 50 km/h
  with `full=True`; `polymorphism.ElectricCar.accelerate()` adds 15 km/h and
  takes 20 from `battery`. Neither checks whether the engine is on.
- `fleet.ManualCar.accelerate(speed=None)` adds 20 km/h or `speed`;
  `fleet.ElectricCar` refuses to accelerate once `battery` is at or below zero.
  `cardesign.manual_car.ManualCar` behaves like `fleet.ManualCar`.

## Building a document

```python
from cardesign.documents import Document, DocumentEditor, FileStorage

editor = DocumentEditor(Document(), FileStorage("document.txt"))
editor.add_text("Hello, world!")
editor.add_new_line()
editor.add_tab_space()
editor.add_text("Indented text after a tab space.")
editor.add_new_line()
editor.add_image("picture.jpg")

print(editor.render_document())
editor.save_document()
```

New kinds of content are added by subclassing `DocumentElement` and
implementing `render`; new places to keep a document are added by
subclassing `Persistence` and implementing `save`.

`NaiveDocumentEditor` keeps text and image paths as plain strings; an element
longer than four characters ending in `.jpg` or `.png` is rendered as
`[Image: ...]`, and every element is followed by a newline.
`save_to_file(path="document.txt")` writes the rendered text.

Both editors keep the first non-empty rendering: elements added after
`render_document` has returned something do not appear in later renderings
or saves.

## Running the demonstrations

Each module has a demonstration installed as a command:

```
cardesign-abstraction
cardesign-encapsulation
cardesign-inheritance
cardesign-polymorphism
cardesign-fleet
cardesign-manual-car
cardesign-naive-editor
cardesign-documents
```

The commands take no options. The two editor demonstrations write
`document.txt` in the current directory.

## What the package does not do

The only storage for documents is `FileStorage`, which writes a text file.
There is no database back end; one can be added by subclassing `Persistence`.