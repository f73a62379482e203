import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..config import settings
from ..models.schemas import PreprocessReport, RemappingRule
from ..utils.loader import get_remappings
from .transform import LineTransform, each_line

logger = logging.getLogger(settings.SERVICE_NAME + ".preprocessor")


def preprocess_source(text: str, transform: Callable[[str], str]) -> str:
    """
    Run a line transform over every line of a source text.
    Lines end at LF only. The transform sees each line without its CRLF or
    LF ending, and endings are kept.
    """
    out: List[str] = []
    for line in text.split("\n"):
        if line.endswith("\r"):
            out.append(transform(line[:-1]) + "\r")
        else:
            out.append(transform(line))
    return "\n".join(out)


def preprocess_file(source_path: Path, dest_path: Path, transform: Callable[[str], str]) -> None:
    """
    Preprocess a single file and write the result.

    Args:
        source_path: Contract source to read
        dest_path: Where to write the rewritten source
        transform: Per-line transform
    """
    with open(source_path, "r", encoding=settings.FILE_ENCODING, newline="") as f:
        content = f.read()

    output = preprocess_source(content, transform)

    dest_path.parent.mkdir(parents=True, exist_ok=True)
    with open(dest_path, "w", encoding=settings.FILE_ENCODING, newline="") as f:
        f.write(output)


def run_preprocess_pass(
    sources_dir: Optional[Union[str, Path]] = None,
    output_dir: Optional[Union[str, Path]] = None,
    loader: Callable[[], List[RemappingRule]] = get_remappings,
) -> PreprocessReport:
    """
    Preprocess every source file under `sources_dir` into `output_dir`.

    Remappings are loaded once for the whole pass. Files are selected with
    SOURCE_GLOB and visited in sorted order; the directory layout is mirrored
    in the output directory. Files under the output directory are skipped.

    Args:
        sources_dir: Defaults to SOURCES_DIR
        output_dir: Defaults to CACHE_DIR/PREPROCESSED_SUBDIR
        loader: Returns the remapping rules for this pass

    Returns:
        PreprocessReport for the pass
    """
    src_root = Path(sources_dir) if sources_dir is not None else settings.get_absolute_sources_dir()
    out_root = Path(output_dir) if output_dir is not None else settings.get_preprocessed_dir()

    transform: LineTransform = each_line(loader)
    report = PreprocessReport(output_dir=out_root)

    if not src_root.is_dir():
        logger.warning(f"Sources directory not found: {src_root}")
        return report

    # Output of earlier passes may live under the sources directory
    out_resolved = out_root.resolve()
    for source_path in sorted(p for p in src_root.glob(settings.SOURCE_GLOB) if p.is_file()):
        if out_resolved in source_path.resolve().parents:
            continue
        rel = source_path.relative_to(src_root)
        try:
            preprocess_file(source_path, out_root / rel, transform)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to preprocess {source_path}: {e}", exc_info=True)
            raise
        report.files.append(rel)

    report.lines_rewritten = transform.rewritten
    logger.info(
        f"Preprocessed {report.file_count} files into {out_root}, "
        f"{report.lines_rewritten} import lines remapped"
    )
    return report


if __name__ == "__main__":
    result = run_preprocess_pass()
    print(f"Output directory: {result.output_dir}")
    for rel_path in result.files:
        print(f"  - {rel_path}")
    print(f"Import lines remapped: {result.lines_rewritten}")
