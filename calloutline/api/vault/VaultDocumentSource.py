"""Filesystem-backed document source for a vault directory."""

from collections.abc import Iterable, Iterator
from pathlib import Path

from ..outline._AbstractDocumentSource import _AbstractDocumentSource
from ..outline._constants import DEFAULT_EXTENSIONS


class VaultDocumentSource(_AbstractDocumentSource):
    """Reads vault documents addressed by vault-relative POSIX paths."""

    def __init__(self, base_dir: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS):
        self.base_dir = Path(base_dir)
        self.extensions = tuple(ext.lower() for ext in extensions)

    def path_for(self, doc_id: str) -> Path:
        """Absolute path of ``doc_id``.

        Raises:
            ValueError: If ``doc_id`` points outside the vault
        """
        path = (self.base_dir / doc_id).resolve()
        if not path.is_relative_to(self.base_dir.resolve()):
            raise ValueError(f"Document {doc_id} is outside vault {self.base_dir}")
        return path

    def doc_id_for(self, path: Path) -> str | None:
        """Vault-relative identity of ``path``, None if outside the vault."""
        try:
            return Path(path).resolve().relative_to(self.base_dir.resolve()).as_posix()
        except ValueError:
            return None

    def is_text_document(self, doc_id: str) -> bool:
        return Path(doc_id).suffix.lower() in self.extensions

    def read_text(self, doc_id: str) -> str:
        return self.path_for(doc_id).read_text(encoding="utf-8")

    def iter_documents(self) -> Iterator[str]:
        """Iterate over the identities of all text documents in the vault."""
        for path in sorted(self.base_dir.rglob("*")):
            if path.is_file() and path.suffix.lower() in self.extensions:
                doc_id = self.doc_id_for(path)
                if doc_id is not None:
                    yield doc_id
