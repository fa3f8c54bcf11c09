from asciimind import Document, LayoutEngine, Renderer
from rich import print


def main() -> None:
    document = Document()
    layout = LayoutEngine(document)

    storage = layout.place_child(document.root, "Storage")
    layout.place_child(storage, "Write-ahead log")
    layout.place_sibling(storage, "Query planner")
    caching = layout.place_child(document.root, "Caching\nlayer")
    document.add_edge(caching.id, storage.id)

    document.selected = storage.id
    document.camera.x, document.camera.y = 25.0, 6.0
    document.camera.anchor()

    print(Renderer().render(document, 80, 22).to_text())


if __name__ == "__main__":
    main()
