"""
Session d'édition: état détenu par l'appelant, hors du Document.

Porte le document courant, le bloc sélectionné (index) et les piles undo/redo.
Règles de sélection :
  insert    → nouveau dernier bloc
  move      → nouvelle position du bloc déplacé
  duplicate → la copie
  remove    → aucune sélection
  update    → inchangée
Non thread-safe : une édition à la fois, en réponse à une action utilisateur.
"""
import logging
from typing import Any, List, Mapping, Optional

from ..blocks import BaseBlock
from ..errors import BlockNotFound
from . import edits
from .document import Document

log = logging.getLogger(__name__)


class EditorSession:
    """
    Session d'édition d'un template.

    Usage:
        >>> session = EditorSession(starter_document())
        >>> session.insert("paragraph")
        >>> session.update_selected({"text": "Bonjour {{name}}"})
        >>> html = render(session.document)
    """

    def __init__(self, document: Optional[Document] = None, history_limit: int = 100):
        self.document = document or Document()
        self.selected_index: Optional[int] = None
        self.history_limit = history_limit
        self._undo: List[Document] = []
        self._redo: List[Document] = []

    # ── Sélection ───────────────────────────────────────────────────────────

    @property
    def selected_block(self) -> Optional[BaseBlock]:
        if self.selected_index is None:
            return None
        return self.document.blocks[self.selected_index]

    def select(self, index: Optional[int]) -> None:
        if index is not None and not 0 <= index < len(self.document.blocks):
            index = None
        self.selected_index = index

    # ── Historique ──────────────────────────────────────────────────────────

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def _commit(self, document: Document) -> bool:
        if document is self.document:
            return False
        self._undo.append(self.document)
        if len(self._undo) > self.history_limit:
            self._undo.pop(0)
        self._redo.clear()
        self.document = document
        return True

    def undo(self) -> bool:
        if not self._undo:
            return False
        self._redo.append(self.document)
        self.document = self._undo.pop()
        self.select(self.selected_index)
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False
        self._undo.append(self.document)
        self.document = self._redo.pop()
        self.select(self.selected_index)
        return True

    # ── Éditions ────────────────────────────────────────────────────────────

    def insert(self, kind: str) -> BaseBlock:
        self._commit(edits.insert(self.document, kind))
        self.selected_index = len(self.document.blocks) - 1
        return self.document.blocks[-1]

    def update(self, block_id: str, partial: Mapping[str, Any]) -> bool:
        try:
            return self._commit(edits.update(self.document, block_id, partial))
        except BlockNotFound as e:
            log.warning("update ignoré (référence périmée) : %s", e)
            return False

    def update_selected(self, partial: Mapping[str, Any]) -> bool:
        block = self.selected_block
        if block is None:
            return False
        return self.update(block.id, partial)

    def move(self, index: int, offset: int) -> Optional[int]:
        """Retourne la nouvelle position du bloc, ou None si le déplacement est refusé."""
        if not self._commit(edits.move(self.document, index, offset)):
            return None
        self.selected_index = index + offset
        return self.selected_index

    def duplicate(self, index: int) -> Optional[int]:
        try:
            self._commit(edits.duplicate(self.document, index))
        except BlockNotFound as e:
            log.warning("duplicate ignoré (référence périmée) : %s", e)
            return None
        self.selected_index = index + 1
        return self.selected_index

    def remove(self, block_id: str) -> bool:
        changed = self._commit(edits.remove(self.document, block_id))
        if changed:
            self.selected_index = None
        return changed

    def set_theme(self, **changes: Any) -> None:
        self._commit(edits.set_theme(self.document, **changes))
