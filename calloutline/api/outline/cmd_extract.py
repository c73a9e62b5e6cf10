"""Outline extract API command.

CLI: calloutline outline extract PATH
"""

from collections.abc import Iterator

from ..config.CalloutlineConfig import CalloutlineConfig
from ..config.normalize_path import normalize_path
from ..StageResult import StageResult
from . import OutlineExtractOutput
from .extract_callouts import extract_callouts


def cmd_extract(path: str) -> StageResult:
    """Extract callout headings from a single document."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = normalize_path(path)

        yield (0.2, "Loading configuration...")
        try:
            config = CalloutlineConfig.load()
            yield (0.5, f"Reading {file_path}...")
            text = file_path.read_text(encoding="utf-8")
        except (ValueError, OSError, UnicodeDecodeError) as e:
            result_obj.result = f"Extraction failed: {e}"
            result_obj.output = OutlineExtractOutput(
                errors=[str(e)],
                warnings=[],
                path=str(file_path),
                headings=[],
                count=0,
                success=False,
            ).model_dump(mode="python")
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.8, "Scanning callouts...")
        headings = extract_callouts(text, config.outline)
        result_obj.result = f"Found {len(headings)} callout heading(s)"
        result_obj.output = OutlineExtractOutput(
            errors=[],
            warnings=[],
            path=str(file_path),
            headings=[heading.to_dict() for heading in headings],
            count=len(headings),
            success=True,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Extracting callout headings from {path}...",
        progress_callback=do_work,
    )
