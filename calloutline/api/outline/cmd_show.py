"""Outline show API command.

CLI: calloutline outline show PATH
"""

from collections.abc import Iterator
from pathlib import Path

from ..config.CalloutlineConfig import CalloutlineConfig
from ..config.normalize_path import normalize_path
from ..StageResult import StageResult
from ..vault.MarkdownHeadingProvider import MarkdownHeadingProvider
from ..vault.VaultDocumentSource import VaultDocumentSource
from . import OutlineShowOutput
from .MetadataEvents import MetadataEvents
from .OutlineEngine import OutlineEngine


def _failure(result_obj: StageResult, file_path: Path, message: str) -> None:
    result_obj.result = f"Outline failed: {message}"
    result_obj.output = OutlineShowOutput(
        errors=[message],
        warnings=[],
        path=str(file_path),
        headings=[],
        native_count=0,
        callout_count=0,
        frontmatter={},
        success=False,
    ).model_dump(mode="python")
    result_obj.success = False


def cmd_show(path: str) -> StageResult:
    """Show the merged outline (native and callout headings) of a document."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = normalize_path(path)

        yield (0.2, "Loading configuration...")
        try:
            config = CalloutlineConfig.load()
        except ValueError as e:
            _failure(result_obj, file_path, str(e))
            yield (1.0, "Complete")
            return

        # Documents inside the configured vault keep their vault-relative identity
        source = VaultDocumentSource(Path(config.vault.base_dir), config.outline.extensions)
        doc_id = source.doc_id_for(file_path)
        if doc_id is None:
            source = VaultDocumentSource(file_path.parent, config.outline.extensions)
            doc_id = file_path.name

        if not file_path.is_file():
            _failure(result_obj, file_path, f"File not found: {file_path}")
            yield (1.0, "Complete")
            return
        if not source.is_text_document(doc_id):
            _failure(result_obj, file_path, f"Not a text document: {doc_id}")
            yield (1.0, "Complete")
            return

        yield (0.5, f"Extracting headings from {doc_id}...")
        native = MarkdownHeadingProvider(source)
        engine = OutlineEngine(source, native, MetadataEvents(), config.outline)
        provider = engine.start()
        try:
            if not engine.update_document(doc_id):
                _failure(result_obj, file_path, f"Cannot read {doc_id}")
                yield (1.0, "Complete")
                return
            metadata = provider.get_metadata(doc_id)
            synthetic = engine.cache.synthetic(doc_id)
        finally:
            engine.stop()

        if metadata is None:
            _failure(result_obj, file_path, f"No metadata for {doc_id}")
            yield (1.0, "Complete")
            return

        yield (0.8, "Merging headings...")
        headings = []
        for heading in metadata.headings:
            entry = heading.to_dict()
            entry["source"] = "callout" if any(heading is callout for callout in synthetic) else "native"
            headings.append(entry)

        result_obj.result = f"Outline of {doc_id}: {len(headings)} heading(s)"
        result_obj.output = OutlineShowOutput(
            errors=[],
            warnings=[],
            path=str(file_path),
            headings=headings,
            native_count=len(headings) - len(synthetic),
            callout_count=len(synthetic),
            frontmatter=metadata.frontmatter,
            success=True,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Building outline for {path}...",
        progress_callback=do_work,
    )
