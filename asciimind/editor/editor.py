import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import InvalidOperationError, PersistenceError
from ..map_components.core import ROOT_ID
from ..map_components.diff import diff
from ..map_components.document import Document
from ..map_components.layout import LayoutEngine
from ..map_components.renderer import Frame, Renderer
from ..map_components.selector import select_next, select_previous, select_toward
from .config import EditorConfig
from .events import MOVES, PANS, Event, EventKind
from .modes import EditIntent, EditMode, LinkMode, Mode, NavigationMode
from .persistence import load_document, save_document
from .scheduler import TickScheduler
from .status import HELP_TEXT, compose_status

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    document: Document
    status: str
    quit: bool = False


class Editor:
    """Routes input events to the handler of the current mode.

    Every handler returns the (possibly replaced) document with a status
    message. Rejected operations become status messages; nothing raised by
    the document layer escapes :meth:`handle`.
    """

    def __init__(
        self,
        document: Optional[Document] = None,
        config: Optional[EditorConfig] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.config = config if config is not None else EditorConfig()
        self.document = document if document is not None else Document(palette=self.config.palette)
        self.renderer = renderer if renderer is not None else Renderer()
        self.scheduler = TickScheduler(self.config.tick_rate, self.config.smoothness)
        self.mode: Mode = NavigationMode()
        self.status = ""
        self.width = self.config.width
        self.height = self.config.height

    @property
    def layout(self) -> LayoutEngine:
        return LayoutEngine(self.document)

    def handle(self, event: Event) -> Outcome:
        if event.kind is EventKind.RESIZE:
            self.width = event.width or self.width
            self.height = event.height or self.height
            return self._outcome()
        if isinstance(self.mode, EditMode):
            return self.handle_edit(event)
        if isinstance(self.mode, LinkMode):
            return self.handle_link(event)
        return self.handle_navigation(event)

    def handle_navigation(self, event: Event) -> Outcome:
        kind = event.kind
        document = self.document
        camera = document.camera

        if kind is EventKind.QUIT:
            return self._outcome(quit=True)

        if kind in MOVES:
            if select_toward(document, MOVES[kind]) is not None:
                self.status = ""
        elif kind in PANS:
            direction = PANS[kind]
            step = self.config.pan_step / camera.zoom
            camera.pan(direction.dx * step, direction.dy * step)
            self.scheduler.wake()
            self.status = ""
        elif kind is EventKind.ZOOM_IN:
            camera.zoom_in()
            self.scheduler.wake()
            self.status = ""
        elif kind is EventKind.ZOOM_OUT:
            camera.zoom_out()
            self.scheduler.wake()
            self.status = ""
        elif kind is EventKind.RESET_CAMERA:
            camera.reset()
            self.scheduler.wake()
            self.status = "Camera reset"
        elif kind is EventKind.CREATE_SIBLING:
            self.mode = EditMode(EditIntent.CREATE_SIBLING)
            self.status = "New sibling: type text and press Enter"
        elif kind is EventKind.CREATE_CHILD:
            self.mode = EditMode(EditIntent.CREATE_CHILD)
            self.status = "New child: type text and press Enter"
        elif kind is EventKind.EDIT:
            node = document.selected_node()
            if node is not None:
                self.mode = EditMode(EditIntent.EDIT_TEXT, node.text)
                self.status = "Edit node text (ESC to cancel, Enter to save)"
        elif kind is EventKind.DELETE:
            self._delete_selected()
        elif kind is EventKind.LINK:
            if document.selected_node() is not None:
                self.mode = LinkMode(document.selected)
                self.status = "Select target node (ESC to cancel)"
        elif kind is EventKind.NEXT:
            select_next(document)
            self.status = ""
        elif kind is EventKind.PREVIOUS:
            select_previous(document)
            self.status = ""
        elif kind is EventKind.CENTER:
            node = document.selected_node()
            if node is not None:
                camera.center_on(*node.center())
                self.scheduler.wake()
                self.status = "Centered on node"
        elif kind is EventKind.SAVE:
            self.save()
        elif kind is EventKind.LOAD:
            self.load()
        elif kind is EventKind.HELP:
            self.status = HELP_TEXT

        return self._outcome()

    def handle_edit(self, event: Event) -> Outcome:
        mode = self.mode
        if not isinstance(mode, EditMode):
            return self._outcome()
        kind = event.kind

        if kind is EventKind.QUIT:
            return self._outcome(quit=True)
        if kind is EventKind.CANCEL:
            self.mode = NavigationMode()
            self.status = "Cancelled"
        elif kind is EventKind.CONFIRM:
            self.mode = NavigationMode()
            if mode.buffer:
                self._commit(mode)
            else:
                self.status = "Empty text, nothing changed"
        elif kind is EventKind.BACKSPACE:
            self.mode = mode.erased()
        elif kind is EventKind.CHAR and event.text:
            self.mode = mode.typed(event.text)

        return self._outcome()

    def handle_link(self, event: Event) -> Outcome:
        mode = self.mode
        if not isinstance(mode, LinkMode):
            return self._outcome()
        kind = event.kind
        document = self.document

        if kind is EventKind.QUIT:
            return self._outcome(quit=True)
        if kind is EventKind.CANCEL:
            self.mode = NavigationMode()
            self.status = "Link cancelled"
        elif kind is EventKind.NEXT:
            select_next(document)
        elif kind is EventKind.PREVIOUS:
            select_previous(document)
        elif kind in MOVES:
            select_toward(document, MOVES[kind])
        elif kind is EventKind.CONFIRM:
            self.mode = NavigationMode()
            self._link(mode.source_id, document.selected)

        return self._outcome()

    def tick(self, now: Optional[float] = None) -> bool:
        return self.scheduler.tick(self.document.camera, now)

    def frame(self) -> Frame:
        status = compose_status(self.mode, self.status, self.document, self.width)
        return self.renderer.render(self.document, self.width, self.height, status)

    def save(self, path: Optional[str] = None) -> bool:
        target = path or self.config.file_path
        try:
            save_document(self.document, target)
        except PersistenceError as exc:
            self.status = f"Error saving: {exc}"
            return False
        self.status = f"Saved to {target}"
        return True

    def load(self, path: Optional[str] = None) -> bool:
        source = path or self.config.file_path
        try:
            loaded = load_document(source, previous=self.document)
        except PersistenceError as exc:
            self.status = f"Error loading: {exc}"
            return False
        changes = diff(self.document, loaded)
        self.document = loaded
        self.status = f"Loaded from {source} ({changes.summary()})"
        return True

    def _commit(self, mode: EditMode) -> None:
        text = mode.buffer
        document = self.document
        selected = document.selected_node()

        if mode.intent is EditIntent.EDIT_TEXT:
            if selected is None:
                self.status = "Node no longer exists"
                return
            selected.text = text
            self.status = "Node updated"
            return

        layout = self.layout
        if selected is None:
            node = layout.place_free(text)
            self.status = f"Created node {node.id}"
        elif mode.intent is EditIntent.CREATE_SIBLING and selected.id != ROOT_ID:
            node = layout.place_sibling(selected, text)
            self.status = f"Created sibling node {node.id}"
        else:
            node = layout.place_child(selected, text)
            self.status = f"Created child node {node.id}"

    def _delete_selected(self) -> None:
        node_id = self.document.selected
        if node_id is None:
            return
        try:
            deleted = self.document.delete_node(node_id)
        except InvalidOperationError as exc:
            logger.warning("Delete of %s rejected: %s", node_id, exc)
            self.status = str(exc)
            return
        if deleted:
            self.status = f"Deleted node {node_id}"

    def _link(self, source_id: str, target_id: Optional[str]) -> None:
        document = self.document
        if target_id is None or target_id not in document.nodes:
            self.status = "No target node selected"
            return
        if source_id not in document.nodes:
            self.status = f"Node {source_id} no longer exists"
            return
        try:
            document.add_edge(source_id, target_id)
        except InvalidOperationError as exc:
            logger.warning("Link %s -> %s rejected: %s", source_id, target_id, exc)
            self.status = str(exc)
            return
        self.status = f"Created link {source_id} → {target_id}"

    def _outcome(self, quit: bool = False) -> Outcome:
        return Outcome(self.document, self.status, quit)
